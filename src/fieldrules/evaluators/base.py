# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Evaluator base classes.

Evaluator: one per semantic category, looked up by the dispatcher.
PrimitiveEvaluator: shared pipeline for scalar categories:
    normalize → default → required → token rules (textual order)
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import TYPE_CHECKING, Any, ClassVar

from ..errors import RequiredError, RuleFormatError
from ..tokens import DEFAULT_PREFIX, Comparison, RuleSet, check_comparison, split_comparison
from ..types import Category

if TYPE_CHECKING:
    from ..walk import Node, Walk

__all__ = ("Evaluator", "PrimitiveEvaluator", "check_length", "parse_int")

_INT = re.compile(r"[+-]?[0-9]+")


def parse_int(literal: str) -> int:
    """Decimal integer literal with optional sign.

    Raises:
        ValueError: If literal is not a plain decimal integer
    """
    if not _INT.fullmatch(literal):
        raise ValueError(f"invalid integer '{literal}'")
    return int(literal)


def literal_error(literal: str, token: str, cause: Exception) -> RuleFormatError:
    return RuleFormatError(
        f"invalid literal '{literal}' in rule '{token}'",
        details={"reason": str(cause)},
        cause=cause,
    )


def check_length(value: Sized | None, rules: RuleSet, key: str) -> RuleSet:
    """Apply ``key<op>N`` length rules; return rules without them.

    Raises:
        RequiredError: If value is None and a length rule is present
        ComparisonError: If a length rule fails
    """
    remaining = rules
    for c in rules.comparisons(key):
        if value is None:
            raise RequiredError()
        try:
            limit = parse_int(c.literal)
        except ValueError as e:
            raise literal_error(c.literal, c.token, e) from e
        check_comparison(c, len(value), limit, str(limit))
        # never re-applied to the elements
        remaining = remaining.without(c.token)
    return remaining


class Evaluator(ABC):
    """Validates values of one semantic category."""

    category: ClassVar[Category]

    @abstractmethod
    def evaluate(self, walk: Walk, node: Node, rules: RuleSet) -> None:
        """Validate node against rules, writing back through its handle.

        Raises:
            ValidationError: On the first failing rule
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self.category.value!r})"


class PrimitiveEvaluator(Evaluator):
    """Template for scalar categories."""

    zero: ClassVar[Any]
    required_message: ClassVar[str] = "non-zero value is required"
    time_phrases: ClassVar[bool] = False
    operators: ClassVar[frozenset[str] | None] = None

    @abstractmethod
    def parse(self, literal: str) -> Any:
        """Parse a rule literal in this category's syntax (ValueError if bad)."""

    def render(self, threshold: Any) -> str:
        return str(threshold)

    def comparable(self, value: Any) -> Any:
        return value

    def is_zero(self, value: Any) -> bool:
        return value == self.zero

    def normalize(self, value: Any, rules: RuleSet) -> Any:
        return value

    def parse_literal(self, literal: str, token: str) -> Any:
        try:
            return self.parse(literal)
        except ValueError as e:
            raise literal_error(literal, token, e) from e

    def evaluate(self, walk: Walk, node: Node, rules: RuleSet) -> None:
        handle = node.handle
        original = handle.value
        value = self.normalize(self.zero if original is None else original, rules)

        literal = rules.default
        if literal is not None and self.is_zero(value):
            default = self.parse_literal(literal, DEFAULT_PREFIX + literal)
            if default != value:
                value = default

        if original is None:
            changed = not self.is_zero(value)
        else:
            changed = value is not original and value != original
        if changed:
            handle.set(value)

        if rules.required and self.is_zero(value):
            raise RequiredError(self.required_message)

        self.check(value, rules)

    def check(self, value: Any, rules: RuleSet) -> None:
        for token in rules:
            self.check_token(value, token)

    def check_token(self, value: Any, token: str) -> None:
        c = split_comparison(token, "val")
        if c is not None:
            self.compare(value, c)

    def compare(self, value: Any, c: Comparison) -> None:
        if self.operators is not None and c.op not in self.operators:
            raise RuleFormatError(f"unsupported operator '{c.op}'")
        threshold = self.parse_literal(c.literal, c.token)
        check_comparison(
            c,
            self.comparable(value),
            self.comparable(threshold),
            self.render(threshold),
            time=self.time_phrases,
        )
