# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Record evaluator: declared fields, ``on``/``main`` redirects, hooks.

Given rules R attached to the field that holds a record:

1. ``required`` in R fails when every field of the record is zero.
2. ``on <Field>`` in R validates that field with R.
3. Each declared field is validated with its own rules; a field whose
   own rules contain ``main`` is first validated with R as well.
4. ``validate_self()`` then ``validate_self_context(ctx)`` run if defined.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

from ..errors import RequiredError, RuleFormatError, ValidationError
from ..handles import Handle
from ..hooks import ContextValidator, SelfValidator, call_hook
from ..records import FieldSpec, get_field, is_mutable_record, record_fields, replace_field
from ..tokens import ON_PREFIX, RuleSet
from ..types import Category, is_zero
from .base import Evaluator

if TYPE_CHECKING:
    from ..walk import Node, Walk

__all__ = ("RecordEvaluator", "field_handle")

MAIN = "main"


def field_handle(owner: Handle, name: str) -> Handle:
    """Handle on one field of the record held by owner.

    Mutable records are assigned in place. Read-only records are replaced
    with an updated copy through owner, when owner itself is writable.
    """
    record = owner.value
    value = getattr(record, name)
    if is_mutable_record(record):
        return Handle(value, partial(setattr, record, name))
    if owner.writable:

        def write_back(new: Any) -> None:
            owner.set(replace_field(owner.value, name, new))

        return Handle(value, write_back)
    return Handle(value)


class RecordEvaluator(Evaluator):
    category = Category.RECORD

    def evaluate(self, walk: Walk, node: Node, rules: RuleSet) -> None:
        owner = node.handle
        record = owner.value
        if record is None:
            if rules.required:
                raise RequiredError()
            return
        if rules.required and is_zero(record):
            raise RequiredError()

        tag_key = walk.config.tag_key
        tp = type(record)
        # redirected rules must not redirect again inside the target
        forwarded = rules.without_prefix(ON_PREFIX)
        for name in rules.targets:
            spec = get_field(tp, name, tag_key)
            if spec is None:
                raise RuleFormatError(f"unknown field '{name}'")
            self._descend(walk, owner, spec, forwarded)

        for spec in record_fields(tp, tag_key):
            own = walk.rules(spec.rules)
            if own.excluded:
                continue
            if own.has(MAIN):
                self._descend(walk, owner, spec, forwarded)
            self._descend(walk, owner, spec, own)

        self._run_hooks(walk, owner.value)

    def _descend(self, walk: Walk, owner: Handle, spec: FieldSpec, rules: RuleSet) -> None:
        try:
            walk.dispatch(spec.annotation, field_handle(owner, spec.name), rules)
        except ValidationError as e:
            e.prefixed(spec.name)
            raise

    def _run_hooks(self, walk: Walk, record: Any) -> None:
        if isinstance(record, SelfValidator):
            call_hook(record.validate_self)
        if isinstance(record, ContextValidator):
            call_hook(record.validate_self_context, walk.ctx)
