"""
Unit tests for number and date formatting transforms.
"""
from datetime import date, datetime, timezone

import pytest

from input_sanitizer.services.transforms.formatting import (
    format_date,
    format_php,
    number_format,
    parse_date,
    php_to_strptime,
    round_number,
)


class TestNumberFormat:
    """number_format:decimals,dec_point,thousands_sep."""

    @pytest.mark.parametrize("value,args,expected", [
        (1234567.891, [], "1,234,568"),
        (1234567.891, ["2"], "1,234,567.89"),
        ("1234.5", ["3"], "1,234.500"),
        (1234.5, ["2", ",", "."], "1.234,50"),
        (1234.5, ["1", ".", ""], "1234.5"),
        (-1234.5, ["0"], "-1,235"),
        (0.5, [], "1"),
        (999, [], "999"),
        (-0.4, [], "0"),
    ])
    def test_values(self, value, args, expected):
        assert number_format(value, args) == expected

    @pytest.mark.parametrize("value", ["abc", None, True, "", "1e"])
    def test_non_numeric_unchanged(self, value):
        assert number_format(value, ["2"]) == value

    def test_invalid_decimals_defaults_to_zero(self):
        assert number_format(1234.5, ["x"]) == "1,235"

    def test_elementwise(self):
        assert number_format(["1000", 2000], []) == ["1,000", "2,000"]


class TestRound:
    """round:precision."""

    def test_half_up(self):
        assert round_number(2.5, []) == 3.0
        assert round_number(-2.5, []) == -3.0

    def test_precision(self):
        assert round_number("3.14159", ["2"]) == 3.14

    def test_negative_precision(self):
        assert round_number(1234, ["-2"]) == 1200

    def test_int_stays_int(self):
        result = round_number(7, [])
        assert result == 7 and isinstance(result, int)

    def test_non_numeric_unchanged(self):
        assert round_number("abc", []) == "abc"


class TestPhpFormats:
    """PHP date token translation."""

    moment = datetime(2024, 1, 5, 14, 7, 9)

    @pytest.mark.parametrize("fmt,expected", [
        ("m/d/Y", "01/05/2024"),
        ("Y-m-d H:i:s", "2024-01-05 14:07:09"),
        ("j n y", "5 1 24"),
        ("D, d M Y", "Fri, 05 Jan 2024"),
        ("l F", "Friday January"),
        ("g:i A", "2:07 PM"),
        ("h a", "02 pm"),
        ("G", "14"),
        ("N w", "5 5"),
        ("\\Y\\m Y", "Ym 2024"),
    ])
    def test_format_php(self, fmt, expected):
        assert format_php(self.moment, fmt) == expected

    def test_timestamp_token(self):
        assert format_php(datetime(1970, 1, 2, tzinfo=timezone.utc), "U") == "86400"

    def test_midnight_is_twelve(self):
        assert format_php(datetime(2024, 1, 1, 0, 30), "g:i a") == "12:30 am"

    def test_php_to_strptime(self):
        assert php_to_strptime("d/m/Y H:i") == "%d/%m/%Y %H:%M"
        assert php_to_strptime("Y%m") == "%Y%%%m"


class TestParseDate:
    """Input date parsing."""

    def test_iso(self):
        assert parse_date("2024-01-05") == datetime(2024, 1, 5)

    def test_iso_datetime(self):
        assert parse_date("2024-01-05T10:30:00") == datetime(2024, 1, 5, 10, 30)

    def test_configured_formats(self):
        assert parse_date("01/05/2024") == datetime(2024, 1, 5)
        assert parse_date("05.01.2024") == datetime(2024, 1, 5)

    def test_explicit_input_format(self):
        assert parse_date("05/01/2024", "d/m/Y") == datetime(2024, 1, 5)

    def test_date_object(self):
        assert parse_date(date(2024, 1, 5)) == datetime(2024, 1, 5)

    def test_timestamp(self):
        assert parse_date(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["not a date", "", None, True, [], "2024-13-45"])
    def test_unparseable(self, value):
        assert parse_date(value) is None

    def test_env_formats(self, monkeypatch):
        monkeypatch.setenv("DATE_INPUT_FORMATS", '["d|m|Y"]')
        assert parse_date("05|01|2024") == datetime(2024, 1, 5)
        assert parse_date("01/05/2024") is None


class TestFormatDate:
    """date:format,input_format."""

    def test_reformat(self):
        assert format_date("2024-01-05", ["m/d/Y"]) == "01/05/2024"

    def test_with_input_format(self):
        assert format_date("05/01/2024", ["Y-m-d", "d/m/Y"]) == "2024-01-05"

    def test_datetime_value(self):
        assert format_date(datetime(2024, 1, 5, 9), ["d.m.Y H:i"]) == "05.01.2024 09:00"

    def test_missing_format_unchanged(self):
        assert format_date("2024-01-05", []) == "2024-01-05"

    def test_unparseable_unchanged(self):
        assert format_date("someday", ["m/d/Y"]) == "someday"

    def test_elementwise(self):
        assert format_date(["2024-01-05", "bad"], ["d/m/Y"]) == ["05/01/2024", "bad"]
