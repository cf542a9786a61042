# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Caller-defined validation hooks.

A record opts in by defining either (or both) methods; no base class is
needed, capability is checked structurally:

    @dataclass
    class Rect:
        w: Annotated[int, Rules("val>=0")]
        h: Annotated[int, Rules("val>=0")]

        def validate_self(self) -> None:
            if self.w * self.h > 100:
                raise ValueError("too big")

Both run after every field passed, ``validate_self`` first.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from .errors import HookError, ValidationError

__all__ = ("ContextValidator", "SelfValidator", "call_hook")


@runtime_checkable
class SelfValidator(Protocol):
    def validate_self(self) -> None: ...


@runtime_checkable
class ContextValidator(Protocol):
    def validate_self_context(self, ctx: Any) -> None: ...


def call_hook(hook: Callable[..., Any], *args: Any) -> None:
    """Invoke a hook, surfacing ValueError/AssertionError as HookError.

    ValidationError passes through untouched so enclosing frames can still
    prefix its path. Any other exception is a bug in the hook and propagates.
    """
    try:
        hook(*args)
    except ValidationError:
        raise
    except (ValueError, AssertionError) as e:
        raise HookError(str(e) or type(e).__name__, cause=e) from e
