# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for duration and timestamp rules."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from fieldrules import ComparisonError, RequiredError, RuleFormatError, validate_value


class TestDurationRules:
    """Tests for timedelta values."""

    def test_within_range(self):
        """Test a duration inside bounds passes."""
        value = timedelta(seconds=90)
        assert validate_value(value, "val>=1m,val<2m") == value

    def test_rendering(self):
        """Test thresholds render in duration syntax."""
        with pytest.raises(ComparisonError) as exc_info:
            validate_value(timedelta(seconds=30), "val>=60s")
        assert str(exc_info.value) == "must be greater than or equal to 1m0s"

    def test_default(self):
        """Test default replaces a zero duration."""
        assert validate_value(timedelta(0), "default=5s") == timedelta(seconds=5)

    def test_required(self):
        """Test a zero duration fails required."""
        with pytest.raises(RequiredError):
            validate_value(timedelta(0), "required")

    def test_unitless_literal(self):
        """Test literals without units are rule errors."""
        with pytest.raises(RuleFormatError):
            validate_value(timedelta(seconds=1), "val>5")


class TestTimestampRules:
    """Tests for datetime values."""

    def test_later_than(self):
        """Test ordering uses later/earlier wording."""
        with pytest.raises(ComparisonError, match="must be later than or equal to"):
            validate_value(datetime(2023, 1, 1, tzinfo=UTC), "val>=2024-01-01")

    def test_earlier_than(self):
        """Test an upper bound on time."""
        with pytest.raises(ComparisonError, match="must be earlier than"):
            validate_value(datetime(2025, 1, 1, tzinfo=UTC), "val<2024-01-01")

    def test_naive_value_as_utc(self):
        """Test naive datetimes compare as UTC."""
        value = datetime(2024, 6, 1)
        assert validate_value(value, "val>2024-01-01,val<2024-12-31T00:00:00Z") == value

    def test_offset_literal(self):
        """Test offsets are honored in comparisons."""
        value = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        # 2023-12-31T23:00:00Z
        assert validate_value(value, "val<2024-01-01T00:00:00Z") == value

    def test_required_zero(self):
        """Test datetime.min is the zero value."""
        with pytest.raises(RequiredError):
            validate_value(datetime.min, "required")

    def test_default(self):
        """Test default replaces the zero time with a UTC timestamp."""
        result = validate_value(datetime.min, "default=2024-01-01")
        assert result == datetime(2024, 1, 1, tzinfo=UTC)

    def test_default_for_none(self):
        """Test None declared as datetime takes the default."""
        result = validate_value(None, "default=2024-01-01 12:00:00", annotation=datetime)
        assert result == datetime(2024, 1, 1, 12, tzinfo=UTC)

    def test_bad_literal(self):
        """Test unparseable literals are rule errors."""
        with pytest.raises(RuleFormatError):
            validate_value(datetime(2024, 1, 1), "val>01/01/2024")
