# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Duration (timedelta) and timestamp (datetime) evaluators."""

from __future__ import annotations

from datetime import datetime, timedelta

from ..libs import ZERO_TIME, as_utc, format_duration, is_zero_time, parse_duration, parse_timestamp
from ..types import Category
from .base import PrimitiveEvaluator

__all__ = ("DurationEvaluator", "TimestampEvaluator")


class DurationEvaluator(PrimitiveEvaluator):
    """Literals use human syntax: ``500ms``, ``2s``, ``1h30m``."""

    category = Category.DURATION
    zero = timedelta(0)

    def parse(self, literal: str) -> timedelta:
        return parse_duration(literal)

    def render(self, threshold: timedelta) -> str:
        return format_duration(threshold)


class TimestampEvaluator(PrimitiveEvaluator):
    """Zero is ``datetime.min``; naive values compare as UTC."""

    category = Category.TIMESTAMP
    zero = ZERO_TIME
    time_phrases = True

    def parse(self, literal: str) -> datetime:
        return parse_timestamp(literal)

    def is_zero(self, value: datetime) -> bool:
        return is_zero_time(value)

    def comparable(self, value: datetime) -> datetime:
        return as_utc(value)
