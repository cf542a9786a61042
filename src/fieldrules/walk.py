# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Type dispatcher: per-call traversal state.

A Walk is created for each top-level call and dropped when it returns.
Evaluators recurse into nested values through ``Walk.dispatch``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .handles import Handle
from .tokens import RuleSet, parse_rules
from .types import Resolved, resolve

if TYPE_CHECKING:
    from .config import ValidatorConfig
    from .evaluators.registry import EvaluatorRegistry

__all__ = ("Node", "Walk")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Node:
    """A value being evaluated: its resolved category and its handle."""

    resolved: Resolved
    handle: Handle

    @property
    def value(self) -> Any:
        return self.handle.value


class Walk:
    __slots__ = ("config", "ctx", "registry")

    def __init__(self, registry: EvaluatorRegistry, config: ValidatorConfig, ctx: Any = None):
        self.registry = registry
        self.config = config
        self.ctx = ctx

    def rules(self, text: str | None) -> RuleSet:
        return parse_rules(text, cache=self.config.cache_rules)

    def dispatch(self, annotation: Any, handle: Handle, rules: RuleSet) -> None:
        """Route a value to the evaluator of its category.

        Raises:
            ValidationError: First failure found at or below this value
        """
        resolved = resolve(annotation, handle.value)
        evaluator = self.registry.get(resolved.category)
        if evaluator is None:
            logger.debug(
                "No evaluator for %s value of type %s, skipping",
                resolved.category.value,
                type(handle.value).__name__,
            )
            return
        evaluator.evaluate(self, Node(resolved, handle), rules)
