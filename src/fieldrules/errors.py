# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Error hierarchy for fieldrules.

Every failure raised by the engine is a ValidationError. Each enclosing
record, list or map frame prepends its segment (field name, ``[index]`` or
``[key]``) as the error unwinds, so ``str(err)`` reads root-to-leaf:

    A: [1]: I: value is required
"""

from __future__ import annotations

from typing import Any, Self

__all__ = (
    "ComparisonError",
    "FieldRulesError",
    "HookError",
    "MutabilityError",
    "RequiredError",
    "RuleFormatError",
    "ValidationError",
)


class FieldRulesError(Exception):
    """Base exception for fieldrules."""

    default_message = "fieldrules error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Serialize error to dict."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(FieldRulesError):
    """A value failed its rules.

    Attributes:
        path: Segments from the top-level value down to the failing value
    """

    default_message = "validation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        path: tuple[str, ...] = (),
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, details=details, cause=cause)
        self.path = tuple(path)

    def prefixed(self, segment: str) -> Self:
        """Prepend a path segment in place and return self for re-raising."""
        self.path = (segment, *self.path)
        return self

    @property
    def location(self) -> str:
        """Path rendered as an accessor expression, e.g. ``A[1].I``."""
        out = ""
        for segment in self.path:
            if segment.startswith("["):
                out += segment
            elif out:
                out += "." + segment
            else:
                out = segment
        return out

    def __str__(self) -> str:
        return ": ".join((*self.path, self.message))

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["path"] = list(self.path)
        return data


class RequiredError(ValidationError):
    """Required value is missing or zero-valued."""

    default_message = "value is required"


class ComparisonError(ValidationError):
    """Value or length violates a comparison rule."""


class RuleFormatError(ValidationError):
    """Rule literal, pattern or operator is malformed."""

    default_message = "malformed rule"


class MutabilityError(ValidationError):
    """A rule needed to write a value that has no write-back handle."""

    default_message = "data must be passed by reference"


class HookError(ValidationError):
    """A caller-defined validation hook rejected the record."""
