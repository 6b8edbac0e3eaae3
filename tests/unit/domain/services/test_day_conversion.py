"""
Unit tests for hours to days conversion.
"""

import pytest
from datetime import date
from decimal import Decimal

from timesheet.domain.models import PreconditionViolation
from timesheet.domain.services.aggregation_service import WeekRow
from timesheet.domain.services.day_conversion import (
    calculate_days,
    calculate_totals,
    hours_to_days,
)


class TestHoursToDays:
    """Test cases for hours_to_days."""

    @pytest.mark.parametrize("hours,expected", [
        (0, 0.0),
        (32, 4.0),
        (33, 4.25),
        (25, 3.25),
        (1, 0.25),
        (8, 1.0),
    ])
    def test_rounds_up_to_quarter_days(self, hours, expected):
        assert hours_to_days(hours) == expected

    def test_never_rounds_down(self):
        """Test a total just above a boundary moves to the next quarter."""
        assert hours_to_days(16.1) == 2.25

    def test_custom_day_length_and_granularity(self):
        assert hours_to_days(15, hours_per_day=7.5, granularity=2) == 2.0
        assert hours_to_days(16, hours_per_day=7.5, granularity=2) == 2.5
        assert hours_to_days(9, hours_per_day=8, granularity=1) == 2.0

    def test_decimal_hours(self):
        assert hours_to_days(Decimal("25")) == 3.25

    def test_decimal_hours_with_float_day_length(self):
        assert hours_to_days(Decimal("4.5"), hours_per_day=8.0) == 0.75
        assert hours_to_days(Decimal("8"), hours_per_day=7.5, granularity=2) == 1.5

    def test_mixed_row_types(self):
        rows = [
            WeekRow(date(2026, 10, 12), None, Decimal("4.5")),
            WeekRow(date(2026, 10, 13), None, 3.5),
        ]

        assert calculate_totals(rows) == Decimal("8.0")
        assert calculate_days(rows, hours_per_day=8.0) == 1.0

    def test_zero_hours_per_day_fails(self):
        with pytest.raises(PreconditionViolation, match="Hours per day") as exc_info:
            hours_to_days(8, hours_per_day=0)

        assert exc_info.value.code == "PRECONDITION_VIOLATION"
        assert exc_info.value.argument == "hours_per_day"

    def test_zero_granularity_fails(self):
        with pytest.raises(PreconditionViolation, match="Granularity"):
            hours_to_days(8, granularity=0)

    def test_negative_total_fails(self):
        with pytest.raises(PreconditionViolation, match="cannot be negative"):
            hours_to_days(-1)


class TestCalculateDays:
    """Test cases for calculate_totals and calculate_days."""

    def setup_method(self):
        """Set up test fixtures."""
        self.rows = [
            WeekRow(date(2026, 10, 12), None, 3),
            WeekRow(date(2026, 10, 13), None, 3),
            WeekRow(date(2026, 10, 14), None, 3),
        ]

    def test_totals(self):
        assert calculate_totals(self.rows) == 9
        assert calculate_totals([]) == 0

    def test_sums_before_rounding(self):
        """Test rounding applies once to the total, not per row."""
        # 9h -> 1.125 days -> 1.25; rounding each 3h row would give 3 * 0.5 = 1.5
        assert calculate_days(self.rows) == 1.25

    def test_custom_conversion(self):
        assert calculate_days(self.rows, hours_per_day=6, granularity=2) == 1.5
