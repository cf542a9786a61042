# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from ._duration import format_duration, parse_duration
from ._timestamp import ZERO_TIME, as_utc, is_zero_time, parse_timestamp

__all__ = (
    "ZERO_TIME",
    "as_utc",
    "format_duration",
    "is_zero_time",
    "parse_duration",
    "parse_timestamp",
)
