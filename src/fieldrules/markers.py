# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Declaration helpers for attaching rules to fields.

Usage:
    from dataclasses import dataclass
    from typing import Annotated

    from fieldrules import Rules, UInt, field

    @dataclass
    class Person:
        first: Annotated[str, Rules("required,len<=32")]
        state: str = field("len==2,default=CA", default="")
        visits: UInt = 0
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Annotated, Any

__all__ = ("DEFAULT_TAG_KEY", "UNSIGNED", "Rules", "UInt", "Unsigned", "field")

DEFAULT_TAG_KEY = "rules"


@dataclass(frozen=True, slots=True)
class Rules:
    """Rule string carried in ``Annotated`` metadata."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Unsigned:
    """Marks an ``int`` annotation as an unsigned integer."""


UNSIGNED = Unsigned()

UInt = Annotated[int, UNSIGNED]


def field(rules: str, /, *, tag_key: str = DEFAULT_TAG_KEY, **kwargs: Any) -> Any:
    """``dataclasses.field`` with a rule string stored in its metadata."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag_key] = rules
    return dataclasses.field(metadata=metadata, **kwargs)
