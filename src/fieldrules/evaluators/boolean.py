# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..types import Category
from .base import PrimitiveEvaluator

__all__ = ("BooleanEvaluator",)

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class BooleanEvaluator(PrimitiveEvaluator):
    """Booleans; only ``==`` and ``!=`` are meaningful."""

    category = Category.BOOL
    zero = False
    operators = frozenset({"==", "!="})

    def parse(self, literal: str) -> bool:
        if literal in _TRUE:
            return True
        if literal in _FALSE:
            return False
        raise ValueError(f"invalid boolean '{literal}'")

    def render(self, threshold: bool) -> str:
        return "true" if threshold else "false"
