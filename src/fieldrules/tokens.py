# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule tokenizer and comparison-operator parsing.

A rule string is a comma-separated list of tokens attached to a field:

    required,len<=32,default=CA,regexp ^[A-Z]{2}$

Tokens keep their textual order. Comparison tokens are ``key<op><literal>``
where key is one of ``val``, ``len``, ``arrlen`` or ``maplen``.
"""

from __future__ import annotations

import functools
import logging
import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import ComparisonError, RuleFormatError

__all__ = (
    "EXCLUDE",
    "OPERATORS",
    "Comparison",
    "RuleSet",
    "check_comparison",
    "parse_rules",
)

logger = logging.getLogger(__name__)

EXCLUDE = "-"
DEFAULT_PREFIX = "default="
ON_PREFIX = "on "

OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "<=": operator.le,
    "<": operator.lt,
    ">=": operator.ge,
    ">": operator.gt,
    "!=": operator.ne,
    "==": operator.eq,
}

_PHRASES = {
    "<=": "must be less than or equal to",
    "<": "must be less than",
    ">=": "must be greater than or equal to",
    ">": "must be greater than",
    "!=": "must not equal",
    "==": "must equal",
}

_TIME_PHRASES = {
    **_PHRASES,
    "<=": "must be earlier than or equal to",
    "<": "must be earlier than",
    ">=": "must be later than or equal to",
    ">": "must be later than",
}


@dataclass(frozen=True, slots=True)
class Comparison:
    """A parsed ``key<op><literal>`` token. Literal is still raw text."""

    key: str
    op: str
    literal: str
    token: str

    def describe(self, threshold: str, *, time: bool = False) -> str:
        text = f"{(_TIME_PHRASES if time else _PHRASES)[self.op]} {threshold}"
        # len, arrlen and maplen all constrain a length
        if self.key != "val":
            return f"length {text}"
        return text


def check_comparison(
    comparison: Comparison,
    actual: Any,
    threshold: Any,
    rendered: str,
    *,
    time: bool = False,
) -> None:
    """Raise ComparisonError unless ``actual <op> threshold`` holds."""
    if not OPERATORS[comparison.op](actual, threshold):
        raise ComparisonError(comparison.describe(rendered, time=time))


def split_comparison(token: str, key: str) -> Comparison | None:
    """Split ``key<op><literal>``; None if token is not a ``key`` comparison.

    Raises:
        RuleFormatError: If the operator is not one of OPERATORS
    """
    if not token.startswith(key) or len(token) <= len(key) + 1:
        return None
    op = token[len(key)]
    literal = token[len(key) + 1 :]
    if literal.startswith("="):
        op += "="
        literal = literal[1:]
    if op not in OPERATORS:
        raise RuleFormatError(f"unsupported operator '{op}'")
    return Comparison(key=key, op=op, literal=literal, token=token)


class RuleSet:
    """Immutable ordered collection of rule tokens."""

    __slots__ = ("_tokens",)

    def __init__(self, tokens: tuple[str, ...] | list[str] = ()):
        self._tokens = tuple(tokens)

    @property
    def tokens(self) -> tuple[str, ...]:
        return self._tokens

    def has(self, keyword: str) -> bool:
        return keyword in self._tokens

    @property
    def required(self) -> bool:
        return "required" in self._tokens

    @property
    def excluded(self) -> bool:
        return EXCLUDE in self._tokens

    @property
    def default(self) -> str | None:
        """Literal of the first ``default=`` token, or None."""
        for t in self._tokens:
            if t.startswith(DEFAULT_PREFIX):
                return t[len(DEFAULT_PREFIX) :]
        return None

    @property
    def targets(self) -> tuple[str, ...]:
        """Field names redirected to by ``on <Field>`` tokens."""
        return tuple(
            t[len(ON_PREFIX) :].strip()
            for t in self._tokens
            if t.startswith(ON_PREFIX) and len(t) > len(ON_PREFIX)
        )

    def without_prefix(self, prefix: str) -> RuleSet:
        """Copy without the tokens starting with ``prefix``."""
        return RuleSet(tuple(t for t in self._tokens if not t.startswith(prefix)))

    def comparisons(self, key: str) -> Iterator[Comparison]:
        """Yield the ``key`` comparison tokens in order."""
        for t in self._tokens:
            c = split_comparison(t, key)
            if c is not None:
                yield c

    def without(self, token: str) -> RuleSet:
        """Copy with every occurrence of ``token`` removed."""
        return RuleSet(tuple(t for t in self._tokens if t != token))

    def __add__(self, other: RuleSet) -> RuleSet:
        return RuleSet(self._tokens + other._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RuleSet):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"RuleSet({','.join(self._tokens)!r})"


def _tokenize(text: str) -> RuleSet:
    return RuleSet(tuple(t for t in (part.strip() for part in text.split(",")) if t))


@functools.lru_cache(maxsize=1024)
def _tokenize_cached(text: str) -> RuleSet:
    logger.debug("Tokenizing rule string %r", text)
    return _tokenize(text)


def parse_rules(text: str | None, *, cache: bool = True) -> RuleSet:
    """Split a rule string into a RuleSet.

    Args:
        text: Comma-separated rule string (None or "" gives an empty set)
        cache: Reuse tokenized results keyed by rule string

    Returns:
        RuleSet with whitespace-stripped, non-empty tokens in order
    """
    if not text:
        return RuleSet()
    if cache:
        return _tokenize_cached(text)
    return _tokenize(text)
