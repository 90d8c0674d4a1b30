"""
Tests for table column formats, sorting and filtering.
"""

import math

import pandas as pd
import pytest

from overlook.core.table_columns import (
    FLIGHT_COLUMNS,
    HOUSE_PRICE_COLUMNS,
    TABLE_COLUMNS,
    WEATHER_COLUMNS,
)
from overlook.core.table_spec import (
    Badge,
    ColumnSpec,
    Currency,
    FixedDecimal,
    Grouped,
    Percentage,
    Plain,
    SortDirection,
    TableState,
    YesNo,
    apply_table_state,
    filter_rows,
    find_column,
    format_cell,
    format_currency,
    render_table,
    sort_rows,
)


class TestFormatCell:
    """Every format variant goes through format_cell."""

    @pytest.mark.parametrize(
        "value,fmt,expected",
        [
            (12.34, FixedDecimal(1, "°C"), "12.3°C"),
            (7, FixedDecimal(0, " min", signed=True), "+7 min"),
            (-4, FixedDecimal(0, " min", signed=True), "-4 min"),
            (0, FixedDecimal(0, " min", signed=True), "0 min"),
            (1234567, Currency(), "$1,234,567"),
            (-1500, Currency(), "-$1,500"),
            (65, Percentage(0), "65%"),
            (7420, Grouped(), "7,420"),
            ("furnished", Plain(), "furnished"),
            (True, YesNo(), "Yes"),
            ("Yes", YesNo(), "Yes"),
            (0, YesNo(), "No"),
            ("On Time", Badge(), "On Time"),
        ],
    )
    def test_variants(self, value, fmt, expected):
        assert format_cell(value, fmt) == expected

    def test_missing_values_render_blank(self):
        assert format_cell(None, FixedDecimal(1)) == ""
        assert format_cell(math.nan, Currency()) == ""

    def test_non_numeric_falls_back_to_text(self):
        assert format_cell("n/a", FixedDecimal(1, " mm")) == "n/a"

    def test_format_currency(self):
        assert format_currency(13300000) == "$13,300,000"
        assert format_currency(99.5, fraction_digits=2) == "$99.50"

    def test_badge_tone(self):
        badge = Badge(tones=(("Delayed", "destructive"),))
        assert badge.tone("Delayed") == "destructive"
        assert badge.tone("Unknown") == "outline"


class TestSortCycle:
    """none -> asc -> desc -> none."""

    def test_cycle_on_one_column(self):
        state = TableState()

        state.toggle_sort("price")
        assert (state.sort_key, state.direction) == ("price", SortDirection.ASC)
        state.toggle_sort("price")
        assert state.direction is SortDirection.DESC
        state.toggle_sort("price")
        assert state.direction is SortDirection.NONE
        assert state.sort_key is None

    def test_new_column_restarts_ascending(self):
        state = TableState(sort_key="price", direction=SortDirection.DESC)

        state.toggle_sort("area")

        assert (state.sort_key, state.direction) == ("area", SortDirection.ASC)

    def test_direction_next(self):
        assert SortDirection.NONE.next() is SortDirection.ASC
        assert SortDirection.DESC.next() is SortDirection.NONE


class TestSortRows:
    def setup_method(self):
        self.df = pd.DataFrame({"price": [300, None, 100, 200, 100], "tag": list("abcde")})
        self.column = ColumnSpec("price", "Price", Currency())

    def test_ascending_missing_last(self):
        result = sort_rows(self.df, self.column, SortDirection.ASC)
        assert result["tag"].tolist() == ["c", "e", "d", "a", "b"]

    def test_descending_is_stable(self):
        result = sort_rows(self.df, self.column, SortDirection.DESC)
        assert result["tag"].tolist() == ["a", "d", "c", "e", "b"]

    def test_none_keeps_load_order(self):
        result = sort_rows(self.df, self.column, SortDirection.NONE)
        assert result["tag"].tolist() == list("abcde")

    def test_mixed_types(self):
        df = pd.DataFrame({"DEP_TIME": ["9:05", 1130, "7:45"]})
        column = ColumnSpec("DEP_TIME", "Departure Time")

        result = sort_rows(df, column, SortDirection.ASC)

        assert result["DEP_TIME"].tolist() == [1130, "7:45", "9:05"]


class TestFilterRows:
    def test_case_insensitive_substring(self):
        df = pd.DataFrame({"furnishingstatus": ["furnished", "Semi-Furnished", "unfurnished"]})
        column = ColumnSpec("furnishingstatus", "Furnishing")

        result = filter_rows(df, column, "SEMI")

        assert result["furnishingstatus"].tolist() == ["Semi-Furnished"]

    def test_matches_rendered_text(self):
        df = pd.DataFrame({"RainToday": [True, False, True]})
        column = ColumnSpec("RainToday", "Rain Today", YesNo())

        assert len(filter_rows(df, column, "yes")) == 2
        assert len(filter_rows(df, column, "no")) == 1

    def test_blank_query_returns_all(self):
        df = pd.DataFrame({"FL_DATE": ["2006-01-01", "2006-01-02"]})
        column = ColumnSpec("FL_DATE", "Flight Date")

        assert len(filter_rows(df, column, "   ")) == 2


class TestTableColumns:
    def test_every_dataset_has_columns(self):
        assert set(TABLE_COLUMNS) == {"weather", "flights", "house_prices"}

    def test_status_column_is_derived(self):
        status = find_column(FLIGHT_COLUMNS, "status")

        assert status is not None
        assert status.sortable is False
        row = pd.Series({"DEP_DELAY": 20, "ARR_DELAY": 5})
        assert status.render(row) == "Late"

    def test_render_flight_table(self):
        df = pd.DataFrame(
            [
                {
                    "FL_DATE": "2006-01-01",
                    "DEP_TIME": "9:05",
                    "ARR_TIME": "11:10",
                    "DEP_DELAY": 45,
                    "ARR_DELAY": -3,
                    "AIR_TIME": 120,
                    "DISTANCE": 850,
                }
            ]
        )

        rendered = render_table(df, FLIGHT_COLUMNS)

        assert list(rendered.columns) == [c.label for c in FLIGHT_COLUMNS]
        row = rendered.iloc[0]
        assert row["Departure Delay"] == "+45 min"
        assert row["Arrival Delay"] == "-3 min"
        assert row["Distance"] == "850 miles"
        assert row["Status"] == "Delayed"

    def test_render_weather_flags(self):
        df = pd.DataFrame(
            [{"MinTemp": 8.0, "MaxTemp": 24.3, "Rainfall": 0, "WindGustSpeed": 30,
              "Humidity9am": 68, "Humidity3pm": 29, "RainToday": False, "RainTomorrow": True}]
        )

        row = render_table(df, WEATHER_COLUMNS).iloc[0]

        assert row["Max Temp"] == "24.3°C"
        assert row["Rain Today"] == "No"
        assert row["Rain Tomorrow"] == "Yes"

    def test_render_empty(self):
        rendered = render_table(pd.DataFrame(), HOUSE_PRICE_COLUMNS)
        assert rendered.empty
        assert len(rendered.columns) == len(HOUSE_PRICE_COLUMNS)


class TestApplyTableState:
    def test_filter_then_sort(self):
        df = pd.DataFrame(
            {
                "id": [1, 2, 3],
                "price": [500000, 300000, 400000],
                "area": [4000, 2000, 3000],
                "furnishingstatus": ["furnished", "unfurnished", "furnished"],
            }
        )
        state = TableState(
            sort_key="price", direction=SortDirection.ASC, filter_text="Furnished"
        )

        rendered = apply_table_state(
            df, HOUSE_PRICE_COLUMNS[:4], state, "furnishingstatus"
        )

        assert rendered["Price"].tolist() == ["$300,000", "$400,000", "$500,000"]

        state.filter_text = "unf"
        rendered = apply_table_state(
            df, HOUSE_PRICE_COLUMNS[:4], state, "furnishingstatus"
        )
        assert rendered["ID"].tolist() == ["2"]
