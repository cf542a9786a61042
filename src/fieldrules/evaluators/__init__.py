# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .base import Evaluator, PrimitiveEvaluator
from .boolean import BooleanEvaluator
from .mapping import MappingEvaluator
from .number import FloatEvaluator, IntEvaluator, UintEvaluator
from .pointer import OptionalEvaluator, ReferenceEvaluator
from .record import RecordEvaluator
from .registry import EvaluatorRegistry, get_default_registry, reset_default_registry
from .sequence import SequenceEvaluator
from .temporal import DurationEvaluator, TimestampEvaluator
from .text import TextEvaluator

__all__ = (
    "BooleanEvaluator",
    "DurationEvaluator",
    "Evaluator",
    "EvaluatorRegistry",
    "FloatEvaluator",
    "IntEvaluator",
    "MappingEvaluator",
    "OptionalEvaluator",
    "PrimitiveEvaluator",
    "RecordEvaluator",
    "ReferenceEvaluator",
    "SequenceEvaluator",
    "TextEvaluator",
    "TimestampEvaluator",
    "UintEvaluator",
    "get_default_registry",
    "reset_default_registry",
)
