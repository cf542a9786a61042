# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Validator engine - applies field rules to arbitrary value graphs.

Usage:
    from dataclasses import dataclass
    from typing import Annotated

    from fieldrules import Rules, validate

    @dataclass
    class Person:
        first: Annotated[str, Rules("required,len<=32")]
        age: Annotated[int, Rules("val>=18,val<=120")]
        state: Annotated[str, Rules("len==2,default=CA")] = ""

    p = Person(first=" Jane ", age=21)
    validate(p)  # p.first == "Jane", p.state == "CA"
"""

from __future__ import annotations

import logging
from typing import Any

from .config import ValidatorConfig
from .errors import ValidationError
from .evaluators.registry import EvaluatorRegistry, get_default_registry
from .handles import Handle
from .tokens import RuleSet, parse_rules
from .walk import Walk

__all__ = (
    "Validator",
    "get_default_validator",
    "validate",
    "validate_context",
    "validate_value",
)

logger = logging.getLogger(__name__)


class Validator:
    """Validation entry point bound to a config and an evaluator registry.

    Each call builds fresh traversal state and discards it on return, so a
    Validator may be shared between threads as long as they validate
    disjoint values.
    """

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        registry: EvaluatorRegistry | None = None,
    ):
        """Initialize validator.

        Args:
            config: Engine configuration (defaults if None)
            registry: Category→Evaluator mapping (uses default if None)
        """
        self.config = config or ValidatorConfig()
        self.registry = registry or get_default_registry()

    def _run(self, annotation: Any, handle: Handle, rules: RuleSet, ctx: Any) -> None:
        walk = Walk(self.registry, self.config, ctx)
        try:
            walk.dispatch(annotation, handle, rules)
        except ValidationError as e:
            if self.config.log_failures:
                logger.info("Validation failed: %s", e)
            raise

    def validate(self, *values: Any) -> None:
        """Validate each value in order, stopping at the first failure.

        Records, lists and dicts are validated against the rules declared on
        their fields. A bare value has nowhere to write a corrected value
        back to; wrap it in ``Ref`` when defaults or normalization must be
        applied to a read-only record.

        Raises:
            ValidationError: First failure, with its path from the value root
        """
        for value in values:
            self._run(None, Handle(value), RuleSet(), None)

    def validate_context(self, ctx: Any, value: Any) -> None:
        """Validate one value, passing ctx to ``validate_self_context`` hooks.

        Raises:
            ValidationError: First failure, with its path from the value root
        """
        self._run(None, Handle(value), RuleSet(), ctx)

    def validate_value(
        self,
        value: Any,
        rules: str = "",
        *,
        annotation: Any = None,
        ctx: Any = None,
    ) -> Any:
        """Validate a standalone value against an ad-hoc rule string.

        Args:
            value: Value to validate
            rules: Rule string, as it would appear on a field
            annotation: Declared type (inferred from value if None)
            ctx: Passed to context-aware hooks

        Returns:
            The value after defaults and normalization

        Raises:
            ValidationError: If the value fails its rules
        """
        handle = Handle.scratch(value)
        self._run(annotation, handle, parse_rules(rules, cache=self.config.cache_rules), ctx)
        return handle.value

    def __repr__(self) -> str:
        return f"Validator(tag_key={self.config.tag_key!r}, categories={len(self.registry)})"


_default_validator: Validator | None = None


def get_default_validator() -> Validator:
    global _default_validator
    if _default_validator is None:
        _default_validator = Validator()
    return _default_validator


def validate(*values: Any) -> None:
    """Validate values with the default Validator. See Validator.validate."""
    get_default_validator().validate(*values)


def validate_context(ctx: Any, value: Any) -> None:
    """Validate with ctx for context-aware hooks. See Validator.validate_context."""
    get_default_validator().validate_context(ctx, value)


def validate_value(value: Any, rules: str = "", *, annotation: Any = None, ctx: Any = None) -> Any:
    """Validate one value against a rule string and return it normalized."""
    return get_default_validator().validate_value(value, rules, annotation=annotation, ctx=ctx)
