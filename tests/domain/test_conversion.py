"""Tests for legacy /Date(...)/ value conversion."""

from __future__ import annotations

from datetime import date

import pytest

from ts2date.domain.conversion import (
    UNCHANGED,
    Converted,
    Unchanged,
    convert_value,
    extract_timestamp,
    julian_date_fields,
    millis_to_local_date,
    parse_millis,
)


@pytest.mark.usefixtures("utc_local_time")
class TestConvertValue:
    def test_converts_2022(self) -> None:
        assert convert_value("/Date(1644364800000)/") == Converted("2022-02-09")

    def test_converts_1982(self) -> None:
        assert convert_value("/Date(379179912000)/") == Converted("1982-01-06")

    def test_drops_time_of_day(self) -> None:
        # 2022-02-09T23:59:59.999Z
        assert convert_value("/Date(1644451199999)/") == Converted("2022-02-09")

    def test_epoch(self) -> None:
        assert convert_value("/Date(0)/") == Converted("1970-01-01")

    def test_negative_millis(self) -> None:
        assert convert_value("/Date(-1)/") == Converted("1969-12-31")

    def test_explicit_plus_sign(self) -> None:
        assert convert_value("/Date(+1644364800000)/") == Converted("2022-02-09")

    def test_surrounding_text_allowed(self) -> None:
        assert convert_value('"/Date(1644364800000)/"') == Converted("2022-02-09")

    def test_unicode_digits(self) -> None:
        assert convert_value("/Date(\u0661\u0662\u0663)/") == Converted("1970-01-01")

    def test_gregorian_from_cutover(self) -> None:
        # 1582-10-15T00:00:00Z
        assert convert_value("/Date(-12219292800000)/") == Converted("1582-10-15")

    def test_julian_before_cutover(self) -> None:
        # One millisecond earlier is 1582-10-04 in the Julian calendar.
        assert convert_value("/Date(-12219292800001)/") == Converted("1582-10-04")

    def test_zero_padded_julian_year(self) -> None:
        # Proleptic Gregorian 0900-01-01T00:00:00Z
        assert convert_value("/Date(-33765897600000)/") == Converted("0899-12-28")

    def test_non_numeric_unchanged(self) -> None:
        assert convert_value("/Date(16443648a00000)/") is UNCHANGED

    def test_whitespace_only_unchanged(self) -> None:
        assert convert_value("/Date(   )/") is UNCHANGED

    def test_padded_number_unchanged(self) -> None:
        assert convert_value("/Date( 1644364800000 )/") is UNCHANGED

    def test_nested_parenthesis_unchanged(self) -> None:
        """First '(' to first ')' spans '1644(3648', which is not an integer."""
        assert convert_value("/Date(1644(3648))/") is UNCHANGED

    def test_empty_parentheses_unchanged(self) -> None:
        assert convert_value("/Date()/") is UNCHANGED

    def test_missing_close_unchanged(self) -> None:
        assert convert_value("/Date(1644364800000") is UNCHANGED

    def test_close_before_open_unchanged(self) -> None:
        assert convert_value(")/Date(1644364800000") is UNCHANGED

    def test_earlier_parenthesis_wins(self) -> None:
        """The scan is global: an earlier '(' ... ')' pair is used instead."""
        assert convert_value("(x) /Date(1644364800000)/") is UNCHANGED
        assert convert_value("(0) /Date(1644364800000)/") == Converted("1970-01-01")

    def test_no_token_unchanged(self) -> None:
        assert convert_value("1644364800000") is UNCHANGED
        assert convert_value("Date(1644364800000)") is UNCHANGED

    def test_empty_and_none_unchanged(self) -> None:
        assert convert_value("") is UNCHANGED
        assert convert_value(None) is UNCHANGED

    def test_overflow_unchanged(self) -> None:
        assert convert_value("/Date(9223372036854775808)/") is UNCHANGED

    def test_out_of_calendar_range_unchanged(self) -> None:
        assert convert_value("/Date(9223372036854775807)/") is UNCHANGED

    def test_idempotent(self) -> None:
        first = convert_value("/Date(1644364800000)/")
        assert isinstance(first, Converted)
        assert convert_value(first.value) is UNCHANGED


class TestLocalTimeZone:
    @pytest.mark.usefixtures("eastern_local_time")
    def test_uses_process_local_zone(self) -> None:
        # Midnight UTC is still the previous evening at UTC-5.
        assert convert_value("/Date(1644364800000)/") == Converted("2022-02-08")


class TestHelpers:
    def test_extract_timestamp(self) -> None:
        assert extract_timestamp("/Date(123)/") == "123"
        assert extract_timestamp("/Date(1644(3648))/") == "1644(3648"
        assert extract_timestamp("no parens") is None
        assert extract_timestamp(")(") is None

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("-42", -42),
            ("+7", 7),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
            ("\u0661\u0662\u0663", 123),
        ],
    )
    def test_parse_millis_valid(self, text: str, expected: int) -> None:
        assert parse_millis(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            " 1",
            "1 ",
            "1_000",
            "1.0",
            "0x10",
            "--1",
            "+",
            "\u0661.\u0662",
            "9223372036854775808",
        ],
    )
    def test_parse_millis_invalid(self, text: str) -> None:
        assert parse_millis(text) is None

    @pytest.mark.usefixtures("utc_local_time")
    def test_millis_to_local_date(self) -> None:
        assert millis_to_local_date(379179912000) == "1982-01-06"
        assert millis_to_local_date(-(2**63)) is None

    def test_julian_date_fields(self) -> None:
        assert julian_date_fields(date(1582, 10, 15).toordinal()) == (1582, 10, 5)
        assert julian_date_fields(date(2000, 1, 1).toordinal()) == (1999, 12, 19)

    def test_unchanged_is_singleton_value(self) -> None:
        assert Unchanged() == UNCHANGED
