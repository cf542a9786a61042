# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for integer, unsigned and float rules."""

import pytest

from fieldrules import ComparisonError, RequiredError, RuleFormatError, UInt, validate_value


class TestIntRules:
    """Tests for signed integers."""

    def test_within_range(self):
        """Test a value inside bounds passes unchanged."""
        assert validate_value(5, "val>=1,val<=10") == 5

    @pytest.mark.parametrize(
        "rules,message",
        [
            ("val<5", "must be less than 5"),
            ("val<=4", "must be less than or equal to 4"),
            ("val>5", "must be greater than 5"),
            ("val>=6", "must be greater than or equal to 6"),
            ("val!=5", "must not equal 5"),
            ("val==4", "must equal 4"),
        ],
    )
    def test_failures(self, rules, message):
        """Test each operator reports its own wording."""
        with pytest.raises(ComparisonError) as exc_info:
            validate_value(5, rules)
        assert str(exc_info.value) == message

    def test_negative_literal(self):
        """Test negative thresholds parse."""
        assert validate_value(-2, "val>-3") == -2

    def test_default(self):
        """Test default replaces zero."""
        assert validate_value(0, "default=7") == 7

    def test_required(self):
        """Test zero fails required with the non-zero wording."""
        with pytest.raises(RequiredError, match="non-zero value is required"):
            validate_value(0, "required")

    def test_rules_in_order(self):
        """Test the first failing rule is reported."""
        with pytest.raises(ComparisonError, match="must be less than 0"):
            validate_value(50, "val<0,val>100")

    @pytest.mark.parametrize("rules", ["val>abc", "val>1.5", "val>=", "val>0x10"])
    def test_invalid_literal(self, rules):
        """Test non-decimal literals are rule errors."""
        with pytest.raises(RuleFormatError):
            validate_value(5, rules)

    def test_invalid_default(self):
        """Test a bad default literal is a rule error."""
        with pytest.raises(RuleFormatError, match="default=abc"):
            validate_value(0, "default=abc")


class TestUintRules:
    """Tests for integers declared UInt."""

    def test_within_range(self):
        """Test unsigned values compare normally."""
        assert validate_value(3, "val<=5", annotation=UInt) == 3

    def test_negative_value(self):
        """Test negative values are rejected."""
        with pytest.raises(ComparisonError, match="must be greater than or equal to 0"):
            validate_value(-1, "", annotation=UInt)

    def test_negative_literal(self):
        """Test signed literals are rule errors."""
        with pytest.raises(RuleFormatError):
            validate_value(3, "val>-1", annotation=UInt)

    def test_default(self):
        """Test unsigned defaults apply."""
        assert validate_value(0, "default=9", annotation=UInt) == 9


class TestFloatRules:
    """Tests for floats."""

    def test_within_range(self):
        """Test a float inside bounds passes."""
        assert validate_value(1.5, "val>1,val<2.5") == 1.5

    def test_rendering(self):
        """Test thresholds render with six decimals."""
        with pytest.raises(ComparisonError) as exc_info:
            validate_value(1.5, "val<=1.25")
        assert str(exc_info.value) == "must be less than or equal to 1.250000"

    def test_exponent_literal(self):
        """Test exponent notation parses."""
        assert validate_value(2000.0, "val>=2e3") == 2000.0

    def test_int_value_for_float(self):
        """Test an int value declared float compares as a number."""
        assert validate_value(2, "val<2.5", annotation=float) == 2

    def test_default(self):
        """Test default replaces 0.0."""
        assert validate_value(0.0, "default=2.5") == 2.5

    def test_required(self):
        """Test 0.0 fails required."""
        with pytest.raises(RequiredError, match="non-zero value is required"):
            validate_value(0.0, "required")

    def test_invalid_literal(self):
        """Test a non-numeric literal is a rule error."""
        with pytest.raises(RuleFormatError):
            validate_value(1.0, "val>one")
