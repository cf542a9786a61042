# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING

from ..errors import RequiredError, ValidationError
from ..handles import Handle
from ..tokens import RuleSet
from ..types import Category
from .base import Evaluator, check_length

if TYPE_CHECKING:
    from ..walk import Node, Walk

__all__ = ("MappingEvaluator",)

LENGTH_KEY = "maplen"


class MappingEvaluator(Evaluator):
    """Dicts and other mappings.

    ``maplen<op>N`` rules apply to the mapping itself; remaining rules apply
    to every value. Values of a mutable mapping are validated through a
    scratch handle and written back under their original key. Failures are
    prefixed with ``[key]``.
    """

    category = Category.MAP

    def evaluate(self, walk: Walk, node: Node, rules: RuleSet) -> None:
        mapping = node.value
        if mapping is None:
            if rules.required or any(True for _ in rules.comparisons(LENGTH_KEY)):
                raise RequiredError()
            return

        rules = check_length(mapping, rules, LENGTH_KEY)
        writable = isinstance(mapping, MutableMapping)
        for key, item in list(mapping.items()):
            handle = Handle.scratch(item) if writable else Handle(item)
            try:
                walk.dispatch(node.resolved.element, handle, rules)
            except ValidationError as e:
                e.prefixed(f"[{key}]")
                raise
            if writable and handle.value is not item:
                mapping[key] = handle.value
