# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import re
from typing import Any

from ..errors import ComparisonError, RuleFormatError
from ..tokens import RuleSet, check_comparison, split_comparison
from ..types import Category
from .base import PrimitiveEvaluator, literal_error, parse_int

__all__ = ("TextEvaluator",)

REGEXP_PREFIX = "regexp "
ONEOF_PREFIX = "oneof "


class TextEvaluator(PrimitiveEvaluator):
    """Strings.

    Normalization: trim (unless ``notrim``), then ``toupper`` or
    ``tolower``; ``toupper`` wins when both are present.

    Extra rules:
        len<op>N: length in code points
        regexp <pattern>: unanchored search
        oneof a|b|c: exact membership
    """

    category = Category.TEXT
    zero = ""
    required_message = "value is required"

    def parse(self, literal: str) -> str:
        return literal

    def render(self, threshold: Any) -> str:
        return f"'{threshold}'"

    def normalize(self, value: str, rules: RuleSet) -> str:
        if not rules.has("notrim"):
            value = value.strip()
        if rules.has("toupper"):
            value = value.upper()
        elif rules.has("tolower"):
            value = value.lower()
        return value

    def check_token(self, value: str, token: str) -> None:
        c = split_comparison(token, "len")
        if c is not None:
            try:
                limit = parse_int(c.literal)
            except ValueError as e:
                raise literal_error(c.literal, c.token, e) from e
            check_comparison(c, len(value), limit, str(limit))
        elif token.startswith(REGEXP_PREFIX) and len(token) > len(REGEXP_PREFIX):
            pattern = token[len(REGEXP_PREFIX) :]
            try:
                compiled = re.compile(pattern)
            except re.error as e:
                raise RuleFormatError(f"invalid pattern '{pattern}': {e}", cause=e) from e
            if compiled.search(value) is None:
                raise ComparisonError("value doesn't match required pattern")
        elif token.startswith(ONEOF_PREFIX) and len(token) > len(ONEOF_PREFIX):
            choices = token[len(ONEOF_PREFIX) :]
            if value not in choices.split("|"):
                raise ComparisonError(f"value must be one of {choices}")
        else:
            super().check_token(value, token)
