# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for duration and timestamp literal handling."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from fieldrules.libs import as_utc, format_duration, is_zero_time, parse_duration, parse_timestamp


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("2s", timedelta(seconds=2)),
            ("300ms", timedelta(milliseconds=300)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("1.5h", timedelta(minutes=90)),
            ("2h45m10s", timedelta(hours=2, minutes=45, seconds=10)),
            ("-1m", timedelta(minutes=-1)),
            ("+5s", timedelta(seconds=5)),
            ("0", timedelta(0)),
            ("1500us", timedelta(microseconds=1500)),
            ("7µs", timedelta(microseconds=7)),
            (".5s", timedelta(milliseconds=500)),
        ],
    )
    def test_valid(self, text, expected):
        """Test valid durations parse to timedelta."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "-", "5", "2x", "s", "1h 30m", "1..5s"])
    def test_invalid(self, text):
        """Test malformed durations raise ValueError."""
        with pytest.raises(ValueError):
            parse_duration(text)


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (timedelta(0), "0s"),
            (timedelta(seconds=2), "2s"),
            (timedelta(seconds=90), "1m30s"),
            (timedelta(hours=1), "1h0m0s"),
            (timedelta(seconds=1.5), "1.5s"),
            (timedelta(microseconds=250), "250µs"),
            (timedelta(microseconds=1500), "1.5ms"),
            (timedelta(seconds=-2), "-2s"),
        ],
    )
    def test_format(self, value, expected):
        """Test durations render in human syntax."""
        assert format_duration(value) == expected

    def test_parses_back(self):
        """Test rendered durations are accepted by parse_duration."""
        value = timedelta(hours=3, minutes=2, seconds=1, milliseconds=5)
        assert parse_duration(format_duration(value)) == value


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_date(self):
        """Test date-only literals are midnight UTC."""
        assert parse_timestamp("2024-03-01") == datetime(2024, 3, 1, tzinfo=UTC)

    def test_date_time_t(self):
        """Test T-separated literals without offset are UTC."""
        assert parse_timestamp("2024-03-01T10:20:30") == datetime(2024, 3, 1, 10, 20, 30, tzinfo=UTC)

    def test_date_time_space(self):
        """Test space-separated literals without offset are UTC."""
        assert parse_timestamp("2024-03-01 10:20:30") == datetime(2024, 3, 1, 10, 20, 30, tzinfo=UTC)

    def test_rfc3339_z(self):
        """Test RFC 3339 with Z suffix."""
        assert parse_timestamp("2024-03-01T10:20:30Z") == datetime(2024, 3, 1, 10, 20, 30, tzinfo=UTC)

    def test_rfc3339_offset_fraction(self):
        """Test RFC 3339 with offset and fractional seconds."""
        parsed = parse_timestamp("2024-03-01T10:20:30.5+02:00")
        assert parsed == datetime(2024, 3, 1, 8, 20, 30, 500000, tzinfo=UTC)
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_empty_is_zero(self):
        """Test an empty literal is the zero time."""
        assert parse_timestamp("") == datetime.min

    @pytest.mark.parametrize(
        "text",
        ["2024/03/01", "2024-13-01", "2024-03-01T10:20:30+0200", "yesterday", "2024-03-01T10:20"],
    )
    def test_invalid(self, text):
        """Test unrecognized layouts and impossible dates raise ValueError."""
        with pytest.raises(ValueError):
            parse_timestamp(text)


class TestTimeHelpers:
    """Tests for zero-time and UTC helpers."""

    def test_zero_time_ignores_tz(self):
        """Test datetime.min is zero with or without tzinfo."""
        assert is_zero_time(datetime.min)
        assert is_zero_time(datetime.min.replace(tzinfo=UTC))
        assert not is_zero_time(datetime(1970, 1, 1))

    def test_as_utc(self):
        """Test naive datetimes become UTC and aware ones are untouched."""
        assert as_utc(datetime(2024, 1, 1)).tzinfo is UTC
        aware = datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=3)))
        assert as_utc(aware) is aware
