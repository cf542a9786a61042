# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import re

from ..errors import ComparisonError
from ..tokens import RuleSet
from ..types import Category
from .base import PrimitiveEvaluator, parse_int

__all__ = ("FloatEvaluator", "IntEvaluator", "UintEvaluator")

_UINT = re.compile(r"[0-9]+")
_FLOAT = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)", re.I)


class IntEvaluator(PrimitiveEvaluator):
    category = Category.INT
    zero = 0

    def parse(self, literal: str) -> int:
        return parse_int(literal)


class UintEvaluator(PrimitiveEvaluator):
    """Integers declared ``UInt``: unsigned literals, no negative values."""

    category = Category.UINT
    zero = 0

    def parse(self, literal: str) -> int:
        if not _UINT.fullmatch(literal):
            raise ValueError(f"invalid unsigned integer '{literal}'")
        return int(literal)

    def check(self, value: int, rules: RuleSet) -> None:
        if value < 0:
            raise ComparisonError("must be greater than or equal to 0")
        super().check(value, rules)


class FloatEvaluator(PrimitiveEvaluator):
    """IEEE floats, compared exactly; thresholds render with six decimals."""

    category = Category.FLOAT
    zero = 0.0

    def parse(self, literal: str) -> float:
        if not _FLOAT.fullmatch(literal):
            raise ValueError(f"invalid float '{literal}'")
        return float(literal)

    def render(self, threshold: float) -> str:
        return f"{threshold:f}"
