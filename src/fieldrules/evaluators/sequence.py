# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from functools import partial
from typing import TYPE_CHECKING, Any

from ..errors import RequiredError, ValidationError
from ..handles import Handle
from ..tokens import RuleSet
from ..types import Category
from .base import Evaluator, check_length

if TYPE_CHECKING:
    from ..walk import Node, Walk

__all__ = ("SequenceEvaluator",)

LENGTH_KEY = "arrlen"


def _tuple_setter(owner: Handle, index: int) -> Callable[[Any], None]:
    def write_back(value: Any) -> None:
        current = owner.value
        owner.set((*current[:index], value, *current[index + 1 :]))

    return write_back


def _element_setter(owner: Handle, index: int) -> Callable[[Any], None] | None:
    seq = owner.value
    if isinstance(seq, MutableSequence):
        return partial(seq.__setitem__, index)
    if isinstance(seq, tuple) and owner.writable:
        return _tuple_setter(owner, index)
    # sets and read-only sequences
    return None


class SequenceEvaluator(Evaluator):
    """Lists, tuples and sets.

    ``arrlen<op>N`` rules apply to the container and are removed before the
    remaining rules are applied to every element. Element failures are
    prefixed with ``[index]``.
    """

    category = Category.LIST

    def evaluate(self, walk: Walk, node: Node, rules: RuleSet) -> None:
        seq = node.value
        if seq is None:
            if rules.required or any(True for _ in rules.comparisons(LENGTH_KEY)):
                raise RequiredError()
            return

        rules = check_length(seq, rules, LENGTH_KEY)
        for j, item in enumerate(list(seq)):
            handle = Handle(item, _element_setter(node.handle, j))
            try:
                walk.dispatch(node.resolved.item(j), handle, rules)
            except ValidationError as e:
                e.prefixed(f"[{j}]")
                raise
