"""Tests for date range computation, API date formatting and filter cleanup."""

from datetime import datetime

import pytest

from client_helpers.utils.dates import format_date_for_api, get_date_range, subtract_months
from client_helpers.utils.filters import build_filters

NOW = datetime(2024, 3, 15, 14, 30, 45)


class TestGetDateRange:
    def test_daily_window(self) -> None:
        result = get_date_range(1, now=NOW)

        assert result.start_date == "2024-03-15 00:00:00"
        assert result.end_date == "2024-03-16 23:59:58"

    def test_weekly_window(self) -> None:
        result = get_date_range(7, now=NOW)

        assert result.start_date == "2024-03-08 14:30:45"
        assert result.end_date == "2024-03-15 14:30:45"

    def test_monthly_window(self) -> None:
        result = get_date_range(30, now=NOW)

        assert result.start_date == "2024-02-15 14:30:45"
        assert result.end_date == "2024-03-15 14:30:45"

    @pytest.mark.parametrize("filter_days", [0, 2, 90, -1])
    def test_other_filters_fall_back_to_last_day(self, filter_days: int) -> None:
        result = get_date_range(filter_days, now=NOW)

        assert result.start_date == "2024-03-14 14:30:45"
        assert result.end_date == "2024-03-15 14:30:45"

    def test_defaults_to_current_time(self) -> None:
        result = get_date_range(7)

        assert datetime.strptime(result.end_date, "%Y-%m-%d %H:%M:%S")


class TestSubtractMonths:
    @pytest.mark.parametrize(
        ("moment", "months", "expected"),
        [
            (datetime(2024, 3, 31), 1, datetime(2024, 2, 29)),
            (datetime(2023, 3, 31), 1, datetime(2023, 2, 28)),
            (datetime(2024, 1, 15), 1, datetime(2023, 12, 15)),
            (datetime(2024, 5, 31), 13, datetime(2023, 4, 30)),
        ],
    )
    def test_clamps_day_to_month_end(self, moment: datetime, months: int, expected: datetime) -> None:
        assert subtract_months(moment, months) == expected


class TestFormatDateForApi:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-03-15", "2024-03-15"),
            ("2024-03-15T10:20:30", "2024-03-15"),
            ("2024-03-15 10:20:30", "2024-03-15"),
            ("2024-03-15T10:20:30+02:00", "2024-03-15"),
            ("  2024-03-15  ", "2024-03-15"),
        ],
    )
    def test_formats_iso_values(self, value: str, expected: str) -> None:
        assert format_date_for_api(value) == expected

    @pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01", "15/03/2024"])
    def test_unparseable_returns_empty(self, value: str) -> None:
        assert format_date_for_api(value) == ""


class TestBuildFilters:
    def test_drops_none_and_empty_strings(self) -> None:
        filters = {"status": "active", "search": "", "page": None, "limit": 20}

        assert build_filters(filters) == {"status": "active", "limit": 20}

    def test_trims_string_values(self) -> None:
        assert build_filters({"locate": "  Berlin ", "sortField": "name "}) == {
            "locate": "Berlin",
            "sortField": "name",
        }

    def test_keeps_falsy_non_empty_values(self) -> None:
        filters = {"page": 0, "archived": False, "tags": []}

        assert build_filters(filters) == filters

    def test_whitespace_only_string_kept_as_empty(self) -> None:
        assert build_filters({"q": "   "}) == {"q": ""}

    def test_does_not_mutate_input(self) -> None:
        filters = {"q": " x ", "page": None}
        build_filters(filters)

        assert filters == {"q": " x ", "page": None}
