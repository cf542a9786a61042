# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Addressable handles.

A Handle pairs the value under validation with an optional write-back
callable. Rules that rewrite a value (default, trim, case-fold) go through
``Handle.set``; without a write-back the write is a MutabilityError.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import MutabilityError

__all__ = ("Handle", "Ref")

T = TypeVar("T")


class Handle:
    """Current value plus the capability to write it back, if any."""

    __slots__ = ("_setter", "value")

    def __init__(self, value: Any, setter: Callable[[Any], None] | None = None):
        self.value = value
        self._setter = setter

    @property
    def writable(self) -> bool:
        return self._setter is not None

    def set(self, value: Any) -> None:
        """Write value back to its owner.

        Raises:
            MutabilityError: If this handle has no write-back
        """
        if self._setter is None:
            raise MutabilityError()
        self._setter(value)
        self.value = value

    @classmethod
    def scratch(cls, value: Any) -> Handle:
        """Writable handle that only updates itself."""
        handle = cls(value)
        handle._setter = _noop
        return handle

    def __repr__(self) -> str:
        mode = "rw" if self.writable else "ro"
        return f"Handle({self.value!r}, {mode})"


def _noop(value: Any) -> None:
    pass


@dataclass(slots=True)
class Ref(Generic[T]):
    """Explicit by-reference box.

    Passing ``Ref(value)`` lets the engine write defaults and normalized
    values back, which a bare top-level value does not allow:

        ref = Ref(Settings(region=" us "))
        validate(ref)
        ref.value.region  # "us", even if Settings is frozen
    """

    value: T | None = None

    def set(self, value: T) -> None:
        self.value = value
