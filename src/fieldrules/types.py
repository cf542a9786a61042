# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Semantic categories and their resolution from annotations and values.

Resolution prefers the declared annotation, so ``None`` still knows it is
an optional string or a missing record. When there is no annotation, or
the runtime value does not fit it, the runtime type decides.
"""

from __future__ import annotations

import types
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from inspect import isclass
from typing import Annotated, Any, NewType, Union, get_args, get_origin

from .handles import Ref
from .libs import is_zero_time
from .markers import UNSIGNED, Unsigned
from .records import is_record, is_record_type, record_fields

__all__ = ("Category", "Resolved", "is_zero", "resolve")


class Category(Enum):
    OPTIONAL = "optional"
    REFERENCE = "reference"
    TEXT = "text"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    BOOL = "bool"
    DURATION = "duration"
    TIMESTAMP = "timestamp"
    RECORD = "record"
    LIST = "list"
    MAP = "map"
    UNSUPPORTED = "unsupported"


# Python types a non-None value must have to keep its annotated category
_PRIMITIVE_TYPES: dict[Category, type | tuple[type, ...]] = {
    Category.TEXT: str,
    Category.INT: int,
    Category.UINT: int,
    Category.FLOAT: (float, int),
    Category.BOOL: bool,
    Category.DURATION: timedelta,
    Category.TIMESTAMP: datetime,
}


@dataclass(frozen=True, slots=True)
class Resolved:
    """Category of a value plus the annotation(s) of what it contains.

    Attributes:
        category: Semantic category driving evaluator selection
        element: Pointee (optional/reference), element (list) or value (map)
            annotation; None means infer from runtime values
        items: Per-index annotations for fixed-length tuples
    """

    category: Category
    element: Any = None
    items: tuple[Any, ...] | None = None

    def item(self, index: int) -> Any:
        if self.items is not None:
            return self.items[index] if index < len(self.items) else None
        return self.element


_UNSUPPORTED = Resolved(Category.UNSUPPORTED)


def _classify(base: Any, args: tuple[Any, ...], unsigned: bool) -> Resolved:
    if not isclass(base):
        return _UNSUPPORTED
    if issubclass(base, Ref):
        return Resolved(Category.REFERENCE, args[0] if args else None)
    if issubclass(base, bool):
        return Resolved(Category.BOOL)
    if issubclass(base, timedelta):
        return Resolved(Category.DURATION)
    if issubclass(base, datetime):
        return Resolved(Category.TIMESTAMP)
    if issubclass(base, int):
        return Resolved(Category.UINT if unsigned else Category.INT)
    if issubclass(base, float):
        return Resolved(Category.FLOAT)
    if issubclass(base, str):
        return Resolved(Category.TEXT)
    if is_record_type(base):
        return Resolved(Category.RECORD)
    if issubclass(base, Mapping):
        return Resolved(Category.MAP, args[1] if len(args) == 2 else None)
    if issubclass(base, (bytes, bytearray)):
        return _UNSUPPORTED
    if issubclass(base, tuple):
        if len(args) == 2 and args[1] is Ellipsis:
            return Resolved(Category.LIST, args[0])
        if args and args != ((),):
            return Resolved(Category.LIST, None, tuple(args))
        return Resolved(Category.LIST)
    if issubclass(base, (Sequence, Set)):
        return Resolved(Category.LIST, args[0] if args else None)
    return _UNSUPPORTED


def _resolve_runtime(value: Any) -> Resolved:
    if value is None:
        return Resolved(Category.OPTIONAL)
    return _classify(type(value), (), False)


def _fits(resolved: Resolved, value: Any) -> bool:
    category = resolved.category
    if category in _PRIMITIVE_TYPES:
        if category in (Category.INT, Category.UINT, Category.FLOAT) and isinstance(value, bool):
            return False
        return isinstance(value, _PRIMITIVE_TYPES[category])
    if category is Category.RECORD:
        return is_record(value)
    if category is Category.REFERENCE:
        return isinstance(value, Ref)
    if category is Category.MAP:
        return isinstance(value, Mapping)
    if category is Category.LIST:
        return isinstance(value, (Sequence, Set)) and not isinstance(value, (str, bytes, bytearray))
    return True


def resolve(annotation: Any, value: Any) -> Resolved:
    """Resolve the semantic category of value declared as annotation.

    Args:
        annotation: Declared type (None or Any to infer from value)
        value: Runtime value, possibly None

    Returns:
        Resolved category with nested annotations
    """
    unsigned = False
    while True:
        if annotation is None or annotation is Any:
            return _resolve_runtime(value)
        origin = get_origin(annotation)
        if origin is Annotated:
            args = get_args(annotation)
            if any(isinstance(m, Unsigned) for m in args[1:]):
                unsigned = True
            annotation = args[0]
            continue
        if isinstance(annotation, NewType):
            annotation = annotation.__supertype__
            continue
        if origin is Union or origin is types.UnionType:
            args = get_args(annotation)
            present = tuple(a for a in args if a is not type(None))
            if len(present) == len(args):
                # plain union: the value decides
                return _resolve_runtime(value)
            inner = present[0] if len(present) == 1 else Union[present]  # noqa: UP007
            if unsigned:
                inner = Annotated[inner, UNSIGNED]
            return Resolved(Category.OPTIONAL, inner)
        break

    base = origin if origin is not None else annotation
    resolved = _classify(base, get_args(annotation) if origin is not None else (), unsigned)
    if resolved.category is Category.UNSUPPORTED:
        # forward refs, TypeVars and foreign generics
        return _resolve_runtime(value)
    if value is not None and not _fits(resolved, value):
        return _resolve_runtime(value)
    return resolved


def is_zero(value: Any) -> bool:
    """Whether value equals the zero value of its category.

    None, "", 0, False, timedelta(0), datetime.min, empty containers, and
    records whose every field is zero.
    """
    if value is None:
        return True
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, (bool, int, float, str, timedelta)):
        return not value
    if isinstance(value, datetime):
        return is_zero_time(value)
    if isinstance(value, Ref):
        return value.value is None
    if is_record(value):
        return all(is_zero(getattr(value, f.name)) for f in record_fields(type(value)))
    if isinstance(value, (Mapping, Sequence, Set)):
        return len(value) == 0
    return False
