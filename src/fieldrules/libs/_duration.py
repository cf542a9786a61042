# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

# Unit sizes in microseconds, the resolution of timedelta.
_UNITS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),
    "μs": Decimal(1),
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")

_SECOND = 1_000_000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE


def parse_duration(input_: str, /) -> timedelta:
    """Parse a human duration such as ``300ms``, ``1.5h`` or ``2h45m``.

    Args:
        input_: Optional sign followed by one or more number+unit parts.
            Units are ns, us (or µs), ms, s, m, h. A bare ``0`` is allowed.

    Returns:
        Parsed timedelta (sub-microsecond precision is truncated)

    Raises:
        ValueError: If the string is not a valid duration
    """
    text = input_
    negative = False
    if text[:1] in ("+", "-"):
        negative = text[0] == "-"
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration '{input_}'")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        m = _PART.match(text, pos)
        if m is None:
            raise ValueError(f"invalid duration '{input_}'")
        try:
            total += Decimal(m.group(1)) * _UNITS[m.group(2)]
        except InvalidOperation as e:
            raise ValueError(f"invalid duration '{input_}'") from e
        pos = m.end()

    micros = int(total)
    return timedelta(microseconds=-micros if negative else micros)


def _fraction(amount: int, unit: int) -> str:
    whole, part = divmod(amount, unit)
    if not part:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{str(part).zfill(digits).rstrip('0')}"


def format_duration(value: timedelta, /) -> str:
    """Render a timedelta in the same syntax parse_duration accepts.

    Examples: ``0s``, ``250µs``, ``1.5ms``, ``2s``, ``1m30s``, ``1h0m0s``.
    """
    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1_000:
        return f"{sign}{micros}µs"
    if micros < _SECOND:
        return f"{sign}{_fraction(micros, 1_000)}ms"

    hours, rest = divmod(micros, _HOUR)
    minutes, rest = divmod(rest, _MINUTE)
    prefix = ""
    if hours:
        prefix = f"{hours}h{minutes}m"
    elif minutes:
        prefix = f"{minutes}m"
    return f"{sign}{prefix}{_fraction(rest, _SECOND)}s"
