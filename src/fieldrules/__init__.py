# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Declarative, rule-string driven validation for Python data.

Rules are attached per field and checked recursively through optionals,
lists, dicts and nested records, applying defaults and normalization in
place:

    @dataclass
    class Person:
        first: Annotated[str, Rules("required,len<=32")]
        zip: Annotated[str, Rules("required,regexp ^[0-9]{5}$")]
        age: Annotated[int, Rules("val>=18")] = 0

    validate(person)
"""

from .config import ValidatorConfig
from .errors import (
    ComparisonError,
    FieldRulesError,
    HookError,
    MutabilityError,
    RequiredError,
    RuleFormatError,
    ValidationError,
)
from .evaluators import Evaluator, EvaluatorRegistry, PrimitiveEvaluator, get_default_registry
from .handles import Handle, Ref
from .hooks import ContextValidator, SelfValidator
from .markers import UNSIGNED, Rules, UInt, Unsigned, field
from .tokens import RuleSet, parse_rules
from .types import Category
from .validator import (
    Validator,
    get_default_validator,
    validate,
    validate_context,
    validate_value,
)

__version__ = "0.1.0"

__all__ = (
    "UNSIGNED",
    "Category",
    "ComparisonError",
    "ContextValidator",
    "Evaluator",
    "EvaluatorRegistry",
    "FieldRulesError",
    "Handle",
    "HookError",
    "MutabilityError",
    "PrimitiveEvaluator",
    "Ref",
    "RequiredError",
    "RuleFormatError",
    "RuleSet",
    "Rules",
    "SelfValidator",
    "UInt",
    "Unsigned",
    "ValidationError",
    "Validator",
    "ValidatorConfig",
    "field",
    "get_default_registry",
    "get_default_validator",
    "parse_rules",
    "validate",
    "validate_context",
    "validate_value",
)
