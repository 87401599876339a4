"""Tests for the parse engine."""

from __future__ import annotations

import pytest

from datefmt.core import DateTime, LocalDate, LocalDateTime
from datefmt.errors import InvalidDateError, NoMatchError, NotImplementedFormatError
from datefmt.format import (
    InstantKind,
    formatter,
    formatter_local,
    not_implemented,
    parse,
    parse_attempts,
    parse_local,
    parse_local_date,
    unparse,
    with_default_year,
    with_locale,
    with_pivot_year,
    with_zone,
)
from datefmt.format.parse import resolve_two_digit_year
from datefmt.units import Timezone


class TestStrictParse:
    """Tests for parse with a formatter."""

    def test_basic_date(self) -> None:
        """yyyyMMdd reads fixed-width fields."""
        value = parse(formatter("yyyyMMdd"), "20100311")
        assert (value.year, value.month, value.day) == (2010, 3, 11)

    def test_result_is_utc_date_time(self) -> None:
        """UTC formatters build DateTimes at the formatter's zone."""
        value = parse(formatter("yyyy-MM-dd HH:mm"), "2010-10-03 14:05")
        assert isinstance(value, DateTime)
        assert value == DateTime(2010, 10, 3, 14, 5)
        assert value.timezone.is_utc

    def test_invalid_date(self) -> None:
        """The right shape with no real date raises InvalidDateError."""
        with pytest.raises(InvalidDateError):
            parse(formatter("yyyyMMdd"), "20100231")

    def test_invalid_time(self) -> None:
        """Out-of-range clock fields are invalid dates too."""
        with pytest.raises(InvalidDateError):
            parse(formatter("HH:mm"), "25:00")

    def test_no_match(self) -> None:
        """Text of another shape raises NoMatchError."""
        with pytest.raises(NoMatchError):
            parse(formatter("yyyyMMdd"), "abc")

    def test_empty_text(self) -> None:
        """Empty text never matches."""
        with pytest.raises(NoMatchError):
            parse(formatter("yyyy"), "")

    def test_partial_match_returns_none(self) -> None:
        """Only matching a prefix is a failure reported as None."""
        assert parse(formatter("yyyy-MM-dd"), "2010-10-03T14:05") is None

    def test_partial_match_is_not_validated(self) -> None:
        """A partial match is None even when its fields are invalid."""
        assert parse(formatter("yyyy-MM-dd"), "2010-02-31 junk") is None

    def test_trailing_z_allowed(self) -> None:
        """A trailing Z may be left over."""
        value = parse(formatter("yyyy-MM-dd'T'HH:mm:ss"), "2010-10-03T14:05:09Z")
        assert value == DateTime(2010, 10, 3, 14, 5, 9)

    def test_placeholder(self) -> None:
        """Placeholder formatters raise NotImplementedFormatError."""
        with pytest.raises(NotImplementedFormatError):
            parse(not_implemented("timeParser"), "10:00")

    def test_missing_text(self) -> None:
        """A formatter without text is a usage error."""
        with pytest.raises(TypeError):
            parse(formatter("yyyy"))  # type: ignore[call-overload]


class TestFieldReading:
    """Tests for individual token readers."""

    def test_month_and_weekday_names(self) -> None:
        """Names are matched case-insensitively."""
        value = parse(formatter("EEE, dd MMM yyyy"), "sun, 03 OCT 2010")
        assert (value.year, value.month, value.day) == (2010, 10, 3)

    def test_full_names(self) -> None:
        """MMMM and EEEE read full names."""
        value = parse(formatter("EEEE MMMM d yyyy"), "Sunday October 3 2010")
        assert value.month == 10

    def test_ordinal_day(self) -> None:
        """dth reads the day and checks its suffix."""
        f = formatter("MMMM dth yyyy")
        assert parse(f, "October 3rd 2010").day == 3
        with pytest.raises(InvalidDateError, match="ordinal suffix"):
            parse(f, "October 3th 2010")

    def test_twelve_hour_clock(self) -> None:
        """h with a resolves to the 24-hour clock."""
        f = formatter("h:mm a")
        assert parse(f, "2:05 pm").hour == 14
        assert parse(f, "12:05 am").hour == 0
        assert parse(f, "12:05 PM").hour == 12

    def test_clock_hour_out_of_range(self) -> None:
        """h must be 1 to 12."""
        with pytest.raises(InvalidDateError):
            parse(formatter("h:mm a"), "13:00 pm")

    def test_day_of_year(self) -> None:
        """DDD selects an ordinal day."""
        value = parse(formatter("yyyy-DDD"), "2010-276")
        assert (value.month, value.day) == (10, 3)

    def test_day_of_year_out_of_range(self) -> None:
        """Day 366 exists only in leap years."""
        with pytest.raises(InvalidDateError):
            parse(formatter("yyyy-DDD"), "2010-366")
        assert parse(formatter("yyyy-DDD"), "2012-366").month == 12

    def test_week_date(self) -> None:
        """ww and e pick the day inside the week window."""
        value = parse(formatter("xxxx-'W'ww-e"), "2010-W40-7")
        assert (value.month, value.day) == (10, 3)

    def test_week_without_day(self) -> None:
        """Without e the window's first day is used."""
        value = parse(formatter("xxxx-'W'ww"), "2010-W02")
        assert (value.month, value.day) == (1, 8)

    def test_variable_width_fields(self) -> None:
        """Unpadded fields read a variable number of digits."""
        value = parse(formatter("d/M/yyyy H:m"), "3/10/2010 4:5")
        assert (value.day, value.month, value.hour, value.minute) == (3, 10, 4, 5)

    def test_milliseconds(self) -> None:
        """SSS reads milliseconds."""
        value = parse(formatter("HH:mm:ss.SSS"), "14:05:09.007")
        assert value.millisecond == 7


class TestYears:
    """Tests for year resolution."""

    def test_default_year(self) -> None:
        """Patterns without a year use 1970."""
        assert parse(formatter("MM-dd"), "10-03").year == 1970

    def test_with_default_year(self) -> None:
        """with_default_year seeds the year."""
        f = with_default_year(formatter("MM-dd"), 2012)
        value = parse(f, "02-29")
        assert (value.year, value.month, value.day) == (2012, 2, 29)

    def test_default_year_decides_validity(self) -> None:
        """February 29 is invalid in the default year."""
        with pytest.raises(InvalidDateError):
            parse(formatter("MM-dd"), "02-29")

    def test_two_digit_year_window(self) -> None:
        """Without a pivot, yy lies 80 years back to 20 years ahead."""
        assert resolve_two_digit_year(10, current_year=2026) == 2010
        assert resolve_two_digit_year(45, current_year=2026) == 2045
        assert resolve_two_digit_year(46, current_year=2026) == 1946

    def test_pivot_year(self) -> None:
        """with_pivot_year centres the century window."""
        f = with_pivot_year(formatter("yy-MM-dd"), 1950)
        assert parse(f, "99-01-01").year == 1999
        assert parse(f, "00-01-01").year == 1900
        assert parse(f, "10-01-01").year == 1910

    def test_negative_year(self) -> None:
        """Full years may carry a sign."""
        assert parse(formatter("yyyy-MM-dd"), "-44-03-15").year == -44


class TestOffsets:
    """Tests for offsets in parsed text."""

    def test_positive_offset_subtracted(self) -> None:
        """+02:00 text is two hours ahead of UTC."""
        value = parse(formatter("yyyy-MM-dd'T'HH:mmZZ"), "2010-10-03T14:05+02:00")
        assert value == DateTime(2010, 10, 3, 12, 5)
        assert value.timezone.is_utc

    def test_negative_basic_offset_added(self) -> None:
        """-0530 text is five and a half hours behind UTC."""
        value = parse(formatter("HH:mmZ"), "14:05-0530")
        assert (value.hour, value.minute) == (19, 35)

    def test_zulu(self) -> None:
        """Z means no shift."""
        value = parse(formatter("HH:mmZZ"), "14:05Z")
        assert (value.hour, value.minute) == (14, 5)

    def test_result_in_formatter_zone(self) -> None:
        """The parsed moment is expressed at the formatter's zone."""
        f = with_zone(formatter("HH:mmZZ"), Timezone.from_hours(1))
        value = parse(f, "14:05Z")
        assert value.hour == 15
        assert value.offset_minutes == 60

    def test_no_offset_reads_formatter_zone(self) -> None:
        """Without an offset the wall clock is read at the formatter's zone."""
        f = formatter("yyyy-MM-dd HH:mm", "+02:00")
        value = parse(f, "2010-10-03 14:05")
        assert value.to_utc().hour == 12


class TestKinds:
    """Tests for local and date-only parsing."""

    def test_formatter_local(self) -> None:
        """Local formatters build LocalDateTimes."""
        value = parse(formatter_local("yyyy-MM-dd HH:mm"), "2010-10-03 14:05")
        assert type(value) is LocalDateTime
        assert value == LocalDateTime(2010, 10, 3, 14, 5)

    def test_parse_local_drops_zone_tokens(self) -> None:
        """parse_local strips zone tokens from the pattern."""
        f = formatter("yyyy-MM-dd'T'HH:mmZZ")
        value = parse_local(f, "2010-10-03T14:05")
        assert value == LocalDateTime(2010, 10, 3, 14, 5)

    def test_parse_local_date(self) -> None:
        """parse_local_date builds LocalDates and drops the clock."""
        value = parse_local_date(formatter("yyyy-MM-dd HH:mm"), "2010-10-03 14:05")
        assert type(value) is LocalDate
        assert value == LocalDate(2010, 10, 3)


class TestLocale:
    """Tests for parsing with other locales."""

    def test_german_month_names(self) -> None:
        """with_locale reads names from the Babel locale data."""
        f = with_locale(formatter("d. MMMM yyyy"), "de")
        value = parse(f, "3. März 2010")
        assert (value.month, value.day) == (3, 3)


class TestGuessingParse:
    """Tests for parse without a formatter."""

    def test_first_match_wins(self) -> None:
        """The first registry formatter that parses wins."""
        value = parse("20100311")
        assert (value.year, value.month, value.day) == (2010, 3, 11)

    def test_iso_date(self) -> None:
        """An ISO date is found."""
        assert parse("2010-10-03") == DateTime(2010, 10, 3)

    def test_date_time_with_offset(self) -> None:
        """Offsets are applied in guessed parses too."""
        value = parse("2010-10-03T14:05:09.007+01:00")
        assert value == DateTime(2010, 10, 3, 13, 5, 9, 7)

    def test_rfc822(self) -> None:
        """RFC-822 text is found."""
        value = parse("Sun, 03 Oct 2010 14:05:09 Z")
        assert value == DateTime(2010, 10, 3, 14, 5, 9)

    def test_nothing_matches(self) -> None:
        """Unparseable text gives None, not an error."""
        assert parse("not a date") is None

    def test_local_guess(self) -> None:
        """parse_local guesses a LocalDateTime."""
        value = parse_local("2010-10-03 14:05:09")
        assert value == LocalDateTime(2010, 10, 3, 14, 5, 9)

    def test_local_date_guess(self) -> None:
        """parse_local_date guesses a LocalDate."""
        assert parse_local_date("2010-10-03") == LocalDate(2010, 10, 3)


class TestParseAttempts:
    """Tests for the diagnostic attempt list."""

    def test_every_formatter_reported(self) -> None:
        """One attempt per registry entry, in order."""
        from datefmt.format import FORMATTERS

        attempts = parse_attempts("2010-10-03")
        assert [a.name for a in attempts] == list(FORMATTERS)

    def test_failure_kinds(self) -> None:
        """Failures carry their error kind."""
        attempts = {a.name: a for a in parse_attempts("2010-10-03")}
        assert attempts["date"].ok
        assert attempts["date"].failure is None
        assert attempts["basic_date"].failure == "parser-no-match"
        assert attempts["date_parser"].failure == "not-implemented"
        assert attempts["year"].failure == "partial-match"

    def test_invalid_date_kind(self) -> None:
        """Calendar-invalid text reports invalid-date."""
        attempts = {a.name: a for a in parse_attempts("2010-02-31")}
        assert attempts["date"].failure == "invalid-date"

    def test_kind_is_respected(self) -> None:
        """Attempts build values of the requested kind."""
        attempts = parse_attempts("2010-10-03", InstantKind.DATE)
        values = [a.value for a in attempts if a.ok]
        assert values and all(type(v) is LocalDate for v in values)


class TestLetterRuns:
    """Tests for reading letter runs by letter and count."""

    def test_three_digit_day_and_hour(self) -> None:
        """ddd and HHH read the padded digits back."""
        value = parse(formatter("yyyy-MM-ddd HHH"), "2010-10-003 014")
        assert (value.day, value.hour) == (3, 14)

    def test_two_letter_milliseconds(self) -> None:
        """SS reads milliseconds."""
        assert parse(formatter("HH:mm:ss.SS"), "14:05:09.07").millisecond == 7

    def test_long_month_run(self) -> None:
        """MMMMM reads the full month name."""
        value = parse(formatter("dd MMMMM yyyy"), "03 October 2010")
        assert value == DateTime(2010, 10, 3)

    def test_short_weekday_run(self) -> None:
        """E reads the short weekday name."""
        value = parse(formatter("E dd MMM yyyy"), "Sun 03 Oct 2010")
        assert value == DateTime(2010, 10, 3)


class TestDigitWidths:
    """Tests for the bounded width of numeric fields."""

    def test_long_digit_run_is_partial(self) -> None:
        """A digit run longer than any field only matches a prefix."""
        assert parse(formatter("yyyy"), "1" * 5000) is None

    def test_long_digit_run_does_not_match(self) -> None:
        """A long digit run cannot reach the following literal."""
        with pytest.raises(NoMatchError):
            parse(formatter("yyyy-MM-dd"), "1" * 5000)

    def test_guess_long_digit_run(self) -> None:
        """Guessing fails cleanly on a long digit run."""
        assert parse("1" * 5000) is None
        assert not any(a.ok for a in parse_attempts("1" * 5000))

    def test_nine_digit_year_is_invalid(self) -> None:
        """The widest year that fits is still range checked."""
        with pytest.raises(InvalidDateError):
            parse(formatter("yyyy"), "1" * 9)

    def test_wide_token_reads_its_count(self) -> None:
        """A run wider than nine letters reads that many digits."""
        value = parse(formatter("SSSSSSSSSS"), "0000000007")
        assert value.millisecond == 7


class TestYearLetters:
    """Tests for y, Y and C."""

    def test_single_y(self) -> None:
        """y reads a full year."""
        assert parse(formatter("y-MM-dd"), "2010-10-03") == DateTime(2010, 10, 3)

    def test_padded_year_before_1000(self) -> None:
        """yyyyMMdd reads a zero-padded year."""
        assert parse(formatter("yyyyMMdd"), "09991003") == DateTime(999, 10, 3)

    def test_century_and_two_digit_year(self) -> None:
        """CC supplies the century for yy."""
        assert parse(formatter("CCyy-MM-dd"), "2010-10-03") == DateTime(2010, 10, 3)

    def test_century_alone(self) -> None:
        """CC alone gives the first year of the century."""
        assert parse(formatter("CC"), "20").year == 2000


class TestHourLetters:
    """Tests for k (1-24) and K (0-11)."""

    def test_clock_hour_of_day(self) -> None:
        """k reads 24 as midnight."""
        f = formatter("kk:mm")
        assert parse(f, "24:00").hour == 0
        assert parse(f, "14:05").hour == 14

    def test_clock_hour_of_day_out_of_range(self) -> None:
        """k must be 1 to 24."""
        with pytest.raises(InvalidDateError):
            parse(formatter("kk:mm"), "25:00")
        with pytest.raises(InvalidDateError):
            parse(formatter("kk:mm"), "00:00")

    def test_hour_of_halfday(self) -> None:
        """K with a resolves to the 24-hour clock."""
        f = formatter("KK:mm a")
        assert parse(f, "02:05 pm").hour == 14
        assert parse(f, "00:05 am").hour == 0
        assert parse(f, "00:05 pm").hour == 12

    def test_hour_of_halfday_out_of_range(self) -> None:
        """K must be 0 to 11."""
        with pytest.raises(InvalidDateError):
            parse(formatter("KK:mm a"), "12:00 am")


class TestEras:
    """Tests for G."""

    def test_before_christ(self) -> None:
        """Y with BC counts back from 1 BC, which is year 0."""
        assert parse(formatter("Y G"), "44 BC").year == -43
        assert parse(formatter("Y G"), "1 BC").year == 0

    def test_anno_domini(self) -> None:
        """AD keeps the year of era."""
        assert parse(formatter("YYYY G"), "2010 AD").year == 2010

    def test_full_era_names(self) -> None:
        """GGGG reads the full era name."""
        value = parse(formatter("d MMMM Y GGGG"), "15 March 44 Before Christ")
        assert value == DateTime(-43, 3, 15)

    def test_signed_year_ignores_era(self) -> None:
        """y is a signed year and is not shifted by the era."""
        assert parse(formatter("y G"), "-43 BC").year == -43

    def test_unknown_era(self) -> None:
        """Era names come from the name table."""
        with pytest.raises(NoMatchError):
            parse(formatter("Y G"), "44 CE")

    def test_round_trip(self) -> None:
        """A BC date renders and reads back."""
        f = formatter("YYYY-MM-dd G")
        value = DateTime(-43, 3, 15)
        assert unparse(f, value) == "0044-03-15 BC"
        assert parse(f, "0044-03-15 BC") == value


class TestShapeCache:
    """Tests for the parse regex cache."""

    def test_cache_is_bounded(self) -> None:
        """Parse regexes are kept in a bounded LRU cache."""
        from datefmt.format.parse import _shape

        parse(formatter("yyyy"), "2010")
        assert _shape.cache_info().maxsize == 256
        assert _shape.cache_info().currsize >= 1
