# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Optional values and explicit Ref boxes: nil or present."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import RequiredError
from ..handles import Handle, Ref
from ..tokens import RuleSet
from ..types import Category
from .base import Evaluator

if TYPE_CHECKING:
    from ..walk import Node, Walk

__all__ = ("OptionalEvaluator", "ReferenceEvaluator")


class OptionalEvaluator(Evaluator):
    """``X | None``: None passes unless required; otherwise validate as X."""

    category = Category.OPTIONAL

    def evaluate(self, walk: Walk, node: Node, rules: RuleSet) -> None:
        if node.value is None:
            if rules.required:
                raise RequiredError()
            return
        walk.dispatch(node.resolved.element, node.handle, rules)


class ReferenceEvaluator(Evaluator):
    """``Ref``: like optional, but its content is always writable."""

    category = Category.REFERENCE

    def evaluate(self, walk: Walk, node: Node, rules: RuleSet) -> None:
        ref: Ref = node.value
        if ref.value is None:
            if rules.required:
                raise RequiredError()
            return
        walk.dispatch(node.resolved.element, Handle(ref.value, ref.set), rules)
