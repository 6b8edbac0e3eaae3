"""
Unit tests for the entry aggregation service.
"""

import pytest
from datetime import date
from decimal import Decimal

from timesheet.domain.models import ValidationError
from timesheet.domain.services.aggregation_service import (
    EntryAggregator,
    WeekRow,
    bucket_by_week,
    by_person,
    by_project,
    group_by_dimension,
    shape_rows,
    sum_hours,
)


class TestPipelineStages:
    """Test cases for the individual aggregation stages."""

    def test_bucket_by_week_keys_are_mondays(self, make_entry):
        monday = make_entry("2026-10-12", 1)
        sunday = make_entry("2026-10-18", 2)
        next_monday = make_entry("2026-10-19", 3)

        buckets = bucket_by_week([sunday, next_monday, monday])

        assert buckets == {
            date(2026, 10, 12): [sunday, monday],
            date(2026, 10, 19): [next_monday],
        }

    def test_group_by_dimension(self, make_entry, bob, carol, alpha):
        entries = [
            make_entry("2026-10-12", 3),
            make_entry("2026-10-12", 5),
            make_entry("2026-10-12", 2, person=carol),
        ]

        groups = group_by_dimension(entries, by_person)

        assert groups == {
            (bob, date(2026, 10, 12)): [3, 5],
            (carol, date(2026, 10, 12)): [2],
        }

    def test_sum_hours_is_exact(self):
        assert sum_hours([3, 5]) == 8
        assert sum_hours([0.5, 0.25, 0.25]) == 1.0
        assert sum_hours([]) == 0

    def test_sum_hours_mixes_decimal_and_float(self):
        total = sum_hours([Decimal("1.1"), 2.2, 3])

        assert isinstance(total, Decimal)
        assert total == Decimal("6.3")
        assert sum_hours([0.5, Decimal("0.25")]) == Decimal("0.75")

    def test_sum_hours_rejects_negative(self):
        with pytest.raises(ValidationError, match="cannot be negative") as exc_info:
            sum_hours([4, -1])

        assert exc_info.value.field == "hours"

    def test_shape_rows_orders_by_date(self, bob):
        groups = {
            (bob, date(2026, 10, 14)): [1],
            (bob, date(2026, 10, 12)): [2, 2],
        }

        assert shape_rows(groups) == [
            WeekRow(date(2026, 10, 12), bob, 4),
            WeekRow(date(2026, 10, 14), bob, 1),
        ]


class TestEntryAggregator:
    """Test cases for EntryAggregator."""

    def setup_method(self):
        """Set up test fixtures."""
        self.aggregator = EntryAggregator()

    def test_empty_input(self):
        assert self.aggregator.aggregate([], by_project) == []
        assert self.aggregator.aggregate([], None) == []
        assert self.aggregator.index([]) == []

    def test_same_key_entries_are_summed(self, make_entry, alpha):
        entries = [make_entry("2026-10-13", 3), make_entry("2026-10-13", 5)]

        result = self.aggregator.aggregate(entries, by_project)

        assert len(result) == 1
        assert result[0].rows == [WeekRow(date(2026, 10, 13), alpha, 8)]

    def test_monday_and_sunday_share_week(self, make_entry):
        entries = [
            make_entry("2026-10-12", 1),
            make_entry("2026-10-18", 1),
            make_entry("2026-10-19", 1),
        ]

        result = self.aggregator.aggregate(entries, by_project)

        assert [week.week_start for week in result] == [date(2026, 10, 19), date(2026, 10, 12)]
        assert [row.date for row in result[1].rows] == [date(2026, 10, 12), date(2026, 10, 18)]

    def test_weeks_descending_rows_ascending(self, make_entry):
        entries = [
            make_entry("2026-09-30", 1),
            make_entry("2026-10-16", 1),
            make_entry("2026-10-07", 1),
            make_entry("2026-10-12", 1),
            make_entry("2026-09-28", 1),
        ]

        result = self.aggregator.aggregate(entries, by_project)

        starts = [week.week_start for week in result]
        assert starts == [date(2026, 10, 12), date(2026, 10, 5), date(2026, 9, 28)]
        for week in result:
            days = [row.date for row in week.rows]
            assert days == sorted(days)
        assert [row.date for row in result[2].rows] == [date(2026, 9, 28), date(2026, 9, 30)]

    def test_sorts_by_date_value_not_text(self, make_entry):
        """Test weeks order correctly across a year boundary and a long year span."""
        entries = [
            make_entry("2026-12-30", 1),
            make_entry("2027-01-05", 1),
            make_entry("0999-06-01", 1),
        ]

        result = self.aggregator.aggregate(entries, by_project)

        assert [week.week_start.year for week in result] == [2027, 2026, 999]

    def test_same_day_rows_tie_break_on_name(self, make_entry, alpha, beta):
        entries = [
            make_entry("2026-10-13", 1, project=beta),
            make_entry("2026-10-13", 2, project=alpha),
        ]

        rows = self.aggregator.aggregate(entries, by_project)[0].rows

        assert [row.dimension for row in rows] == [alpha, beta]

    def test_person_dimension(self, make_entry, bob, carol, beta):
        entries = [
            make_entry("2026-10-13", 4),
            make_entry("2026-10-13", 2, project=beta),
            make_entry("2026-10-13", 1, person=carol),
        ]

        rows = self.aggregator.aggregate(entries, by_person)[0].rows

        assert rows == [
            WeekRow(date(2026, 10, 13), bob, 6),
            WeekRow(date(2026, 10, 13), carol, 1),
        ]

    def test_deterministic_and_order_independent(self, make_entry, carol, beta):
        entries = [
            make_entry("2026-10-13", 4),
            make_entry("2026-10-13", 2, project=beta),
            make_entry("2026-10-06", 1, person=carol),
            make_entry("2026-10-14", 3.5),
            make_entry("2026-10-13", 1.5),
        ]

        first = self.aggregator.aggregate(entries, by_project)
        again = self.aggregator.aggregate(entries, by_project)
        reversed_input = self.aggregator.aggregate(list(reversed(entries)), by_project)

        assert first == again
        assert first == reversed_input

    def test_negative_hours_fail(self, make_entry):
        entries = [make_entry("2026-10-13", 4), make_entry("2026-10-13", -2)]

        with pytest.raises(ValidationError):
            self.aggregator.aggregate(entries, by_project)

    def test_input_not_mutated(self, make_entry):
        entries = [make_entry("2026-10-19", 1), make_entry("2026-10-12", 2)]
        snapshot = list(entries)

        self.aggregator.aggregate(entries, by_project)
        self.aggregator.index(entries)

        assert entries == snapshot


class TestIndexView:
    """Test cases for the week-only index view."""

    def setup_method(self):
        """Set up test fixtures."""
        self.aggregator = EntryAggregator()

    def test_keeps_entries_unsummed_in_input_order(self, make_entry):
        first = make_entry("2026-10-14", 3)
        second = make_entry("2026-10-14", 5)
        older = make_entry("2026-10-02", 2)

        result = self.aggregator.index([first, older, second])

        assert [week.week_start for week in result] == [date(2026, 10, 12), date(2026, 9, 28)]
        assert result[0].entries == [first, second]
        assert result[1].entries == [older]

    def test_none_dimension_selects_index(self, make_entry):
        entries = [make_entry("2026-10-14", 3)]
        assert self.aggregator.aggregate(entries, None) == self.aggregator.index(entries)
