# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .markers import DEFAULT_TAG_KEY

__all__ = ("ValidatorConfig",)


class ValidatorConfig(BaseModel):
    """Configuration for a Validator."""

    model_config = ConfigDict(frozen=True)

    # Key holding the rule string in dataclass metadata / json_schema_extra
    tag_key: str = Field(default=DEFAULT_TAG_KEY, min_length=1)

    # Reuse tokenized rule strings across calls
    cache_rules: bool = True

    # Log every top-level failure at INFO
    log_failures: bool = False
