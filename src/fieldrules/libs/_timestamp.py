# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import re
from datetime import UTC, datetime

ZERO_TIME = datetime.min

_RFC3339 = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})")


def _is_date_prefix(value: str) -> bool:
    return value[4] == "-" and value[7] == "-"


def _is_time_part(value: str, sep: str) -> bool:
    return value[10] == sep and value[13] == ":" and value[16] == ":"


def parse_timestamp(input_: str, /) -> datetime:
    """Parse a timestamp literal, picking the layout from its shape.

    Accepted layouts:
        YYYY-MM-DD
        YYYY-MM-DDThh:mm:ss
        YYYY-MM-DD hh:mm:ss
        RFC 3339 with offset and optional fractional seconds

    Literals without an offset are UTC. An empty literal is the zero time.

    Raises:
        ValueError: If the literal matches no layout or is not a real date
    """
    value = input_
    if value == "":
        return ZERO_TIME

    n = len(value)
    fmt = None
    if n == 10 and _is_date_prefix(value):
        fmt = "%Y-%m-%d"
    elif n == 19 and _is_date_prefix(value) and _is_time_part(value, "T"):
        fmt = "%Y-%m-%dT%H:%M:%S"
    elif n == 19 and _is_date_prefix(value) and _is_time_part(value, " "):
        fmt = "%Y-%m-%d %H:%M:%S"
    elif n >= 20 and _is_date_prefix(value) and _is_time_part(value, "T"):
        if not _RFC3339.fullmatch(value):
            raise ValueError(f"cannot parse '{value}' as a timestamp")
        return datetime.fromisoformat(value)

    if fmt is None:
        raise ValueError(f"cannot parse '{value}' as a timestamp")
    try:
        return datetime.strptime(value, fmt).replace(tzinfo=UTC)
    except ValueError as e:
        raise ValueError(f"cannot parse '{value}' as a timestamp") from e


def is_zero_time(value: datetime, /) -> bool:
    """True for ``datetime.min`` regardless of tzinfo."""
    return value.replace(tzinfo=None) == ZERO_TIME


def as_utc(value: datetime, /) -> datetime:
    """Attach UTC to naive datetimes so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
