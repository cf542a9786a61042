# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..types import Category
from .base import Evaluator

__all__ = ("EvaluatorRegistry", "get_default_registry", "reset_default_registry")


class EvaluatorRegistry:
    """Maps semantic categories to the evaluator that handles them.

    Categories without an evaluator are skipped by the dispatcher, which
    keeps unknown field types a no-op.
    """

    def __init__(self):
        self._evaluators: dict[Category, Evaluator] = {}

    def register(self, category: Category, evaluator: Evaluator, *, update: bool = False) -> None:
        if category in self._evaluators and not update:
            raise ValueError(f"Evaluator for '{category.value}' already registered")
        self._evaluators[category] = evaluator

    def unregister(self, category: Category) -> Evaluator:
        """Remove and return the evaluator for category."""
        if category not in self._evaluators:
            raise KeyError(f"No evaluator registered for '{category.value}'")
        return self._evaluators.pop(category)

    def get(self, category: Category) -> Evaluator | None:
        return self._evaluators.get(category)

    def __contains__(self, category: Category) -> bool:
        return category in self._evaluators

    def list_categories(self) -> list[Category]:
        return list(self._evaluators)

    def __len__(self) -> int:
        return len(self._evaluators)

    def __repr__(self) -> str:
        return f"EvaluatorRegistry(categories={[c.value for c in self._evaluators]})"


_default_registry: EvaluatorRegistry | None = None


def _build_default_registry() -> EvaluatorRegistry:
    from .boolean import BooleanEvaluator
    from .mapping import MappingEvaluator
    from .number import FloatEvaluator, IntEvaluator, UintEvaluator
    from .pointer import OptionalEvaluator, ReferenceEvaluator
    from .record import RecordEvaluator
    from .sequence import SequenceEvaluator
    from .temporal import DurationEvaluator, TimestampEvaluator
    from .text import TextEvaluator

    registry = EvaluatorRegistry()
    for evaluator in (
        OptionalEvaluator(),
        ReferenceEvaluator(),
        TextEvaluator(),
        IntEvaluator(),
        UintEvaluator(),
        FloatEvaluator(),
        BooleanEvaluator(),
        DurationEvaluator(),
        TimestampEvaluator(),
        RecordEvaluator(),
        SequenceEvaluator(),
        MappingEvaluator(),
    ):
        registry.register(evaluator.category, evaluator)
    return registry


def get_default_registry() -> EvaluatorRegistry:
    """Registry with every built-in evaluator (created on first use)."""
    global _default_registry
    if _default_registry is None:
        _default_registry = _build_default_registry()
    return _default_registry


def reset_default_registry() -> None:
    """Drop the default registry; the next get rebuilds it."""
    global _default_registry
    _default_registry = None
