# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Record introspection: dataclasses, pydantic models and NamedTuples.

Records are the composite values whose declared fields carry rule strings.
This module answers four questions about them: is it a record, what are
its fields (with annotations and rules), can its fields be assigned in
place, and how to build an updated copy when they cannot.
"""

from __future__ import annotations

import copy
import dataclasses
import functools
import logging
import types
import typing
from dataclasses import dataclass
from inspect import isclass
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import BaseModel

from .markers import DEFAULT_TAG_KEY, Rules

__all__ = (
    "FieldSpec",
    "get_field",
    "is_mutable_record",
    "is_record",
    "is_record_type",
    "record_fields",
    "replace_field",
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """A declared record field and its joined rule string."""

    name: str
    annotation: Any
    rules: str


def is_pydantic_model(x: Any) -> bool:
    try:
        return isclass(x) and issubclass(x, BaseModel)
    except TypeError:
        return False


def _is_namedtuple(tp: type) -> bool:
    return issubclass(tp, tuple) and hasattr(tp, "_fields") and hasattr(tp, "_replace")


def is_record_type(tp: Any) -> bool:
    if not isclass(tp):
        return False
    return dataclasses.is_dataclass(tp) or is_pydantic_model(tp) or _is_namedtuple(tp)


def is_record(value: Any) -> bool:
    return not isclass(value) and is_record_type(type(value))


def _annotated_rules(annotation: Any) -> list[str]:
    origin = get_origin(annotation)
    if origin is Annotated:
        return [m.text for m in get_args(annotation)[1:] if isinstance(m, Rules)]
    if origin is Union or origin is types.UnionType:
        # Annotated[str, Rules(...)] | None
        return [r for arg in get_args(annotation) for r in _annotated_rules(arg)]
    return []


def _join(parts: list[Any]) -> str:
    return ",".join(str(p) for p in parts if p)


def _type_hints(tp: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(tp, include_extras=True)
    except (NameError, TypeError) as e:
        # Unresolvable forward references fall back to runtime inference
        logger.debug("Cannot resolve annotations of %s: %s", tp.__qualname__, e)
        return {}


def _dataclass_fields(tp: type, tag_key: str) -> tuple[FieldSpec, ...]:
    hints = _type_hints(tp)
    out = []
    for f in dataclasses.fields(tp):
        annotation = hints.get(f.name, None if isinstance(f.type, str) else f.type)
        rules = _annotated_rules(annotation)
        rules.append(f.metadata.get(tag_key, ""))
        out.append(FieldSpec(f.name, annotation, _join(rules)))
    return tuple(out)


def _pydantic_fields(tp: type[BaseModel], tag_key: str) -> tuple[FieldSpec, ...]:
    out = []
    for name, info in tp.model_fields.items():
        annotation = info.annotation
        rules = [m.text for m in info.metadata if isinstance(m, Rules)]
        rules.extend(_annotated_rules(annotation))
        extra = info.json_schema_extra
        if isinstance(extra, dict):
            rules.append(extra.get(tag_key, ""))
        if info.metadata:
            # pydantic moves Annotated extras into metadata; put them back
            annotation = Annotated[(annotation, *info.metadata)]
        out.append(FieldSpec(name, annotation, _join(rules)))
    return tuple(out)


def _namedtuple_fields(tp: type, tag_key: str) -> tuple[FieldSpec, ...]:
    hints = _type_hints(tp)
    return tuple(
        FieldSpec(name, hints.get(name), _join(_annotated_rules(hints.get(name))))
        for name in tp._fields
    )


@functools.lru_cache(maxsize=512)
def record_fields(tp: type, tag_key: str = DEFAULT_TAG_KEY) -> tuple[FieldSpec, ...]:
    """Declared fields of a record type, in declaration order.

    Rules are collected from ``Annotated[..., Rules(...)]`` metadata, then
    dataclass ``field(metadata={tag_key: ...})`` or pydantic
    ``Field(json_schema_extra={tag_key: ...})``, joined with commas.

    Raises:
        TypeError: If tp is not a record type
    """
    if is_pydantic_model(tp):
        return _pydantic_fields(tp, tag_key)
    if dataclasses.is_dataclass(tp):
        return _dataclass_fields(tp, tag_key)
    if isclass(tp) and _is_namedtuple(tp):
        return _namedtuple_fields(tp, tag_key)
    raise TypeError(f"{tp!r} is not a record type")


def get_field(tp: type, name: str, tag_key: str = DEFAULT_TAG_KEY) -> FieldSpec | None:
    for f in record_fields(tp, tag_key):
        if f.name == name:
            return f
    return None


def is_mutable_record(record: Any) -> bool:
    """Whether fields of this record instance accept ``setattr``."""
    tp = type(record)
    if is_pydantic_model(tp):
        return not tp.model_config.get("frozen", False)
    if dataclasses.is_dataclass(tp):
        return not tp.__dataclass_params__.frozen
    return False


def replace_field(record: Any, name: str, value: Any) -> Any:
    """Copy of a read-only record with one field replaced."""
    if isinstance(record, BaseModel):
        return record.model_copy(update={name: value})
    if dataclasses.is_dataclass(record):
        # replace() would re-run __init__ and skip init=False fields
        new = copy.copy(record)
        object.__setattr__(new, name, value)
        return new
    return record._replace(**{name: value})
