"""Tests for instant and duration parsing."""

from __future__ import annotations

import importlib

import pytest

from utcalc import (
    Duration,
    EmptyInputError,
    Instant,
    InvalidFieldError,
    ParseErrorKind,
    ParseRangeError,
    Period,
    Unit,
    UnknownTokenError,
    UnsupportedFormatError,
    UtcOffset,
    parse,
    parse_duration,
    parse_with_pattern,
)

# The package-level name ``parse`` is the function; fetch the submodule explicitly
parse_pkg = importlib.import_module("utcalc.parse")


# =============================================================================
# Numeric input
# =============================================================================


class TestNumericHeuristic:
    """Tests for unit selection by digit count."""

    def test_seconds(self) -> None:
        """Up to 11 digits are seconds."""
        assert parse("1705329045") == Instant.from_seconds(1705329045)
        assert parse("99999999999") == Instant.from_seconds(99999999999)

    def test_milliseconds(self) -> None:
        """12 to 14 digits are milliseconds."""
        assert parse("1705329045123") == Instant.from_millis(1705329045123)

    def test_microseconds(self) -> None:
        """15 to 17 digits are microseconds."""
        assert parse("1705329045123456") == Instant.from_micros(1705329045123456)

    def test_nanoseconds(self) -> None:
        """18 to 20 digits are nanoseconds."""
        assert parse("1705329045123456789") == Instant(1705329045123456789)

    def test_too_many_digits(self) -> None:
        """More than 20 digits need a hint."""
        with pytest.raises(UnsupportedFormatError):
            parse("123456789012345678901")

    def test_leading_zeros_ignored(self) -> None:
        """Leading zeros do not push a number into a finer unit."""
        assert parse("0000000000000001") == Instant.from_seconds(1)

    def test_infer_unit(self) -> None:
        """infer_unit is exposed for callers that want the guess."""
        assert parse_pkg.infer_unit("123456789012") is Unit.MILLISECONDS
        assert parse_pkg.infer_unit("0") is Unit.SECONDS


class TestNumericValues:
    """Tests for signs, fractions and hints."""

    def test_hint_overrides_heuristic(self) -> None:
        """A hint fixes the unit regardless of magnitude."""
        assert parse("1705329045", Unit.MILLISECONDS) == Instant.from_millis(1705329045)
        assert parse("1705329045123", Unit.SECONDS) == Instant.from_seconds(1705329045123)

    def test_negative_fraction(self) -> None:
        """Signed fractional input is exact."""
        assert parse("-1.5") == Instant(-1_500_000_000)
        assert parse("+2") == Instant.from_seconds(2)

    def test_fraction_truncated_below_nanosecond(self) -> None:
        """Digits finer than one nanosecond are dropped."""
        assert parse("1.0000000019") == Instant(1_000_000_001)
        assert parse("1.5", Unit.NANOSECONDS) == Instant(1)

    def test_trailing_dot(self) -> None:
        """A bare trailing dot is accepted."""
        assert parse("1006.") == Instant.from_seconds(1006)

    def test_sixty_four_bit_limit(self) -> None:
        """Values beyond a signed 64-bit second count are rejected."""
        with pytest.raises(ParseRangeError) as exc_info:
            parse("9223372036854775808", Unit.SECONDS)
        assert exc_info.value.kind is ParseErrorKind.OUT_OF_RANGE

    def test_very_long_digit_run(self) -> None:
        """Thousands of digits are a range error, not a conversion failure."""
        with pytest.raises(ParseRangeError):
            parse("1" * 5000, Unit.SECONDS)
        with pytest.raises(ParseRangeError):
            parse("-" + "9" * 5000, Unit.NANOSECONDS)

    def test_thousands_of_leading_zeros(self) -> None:
        """Leading zeros count toward neither the digit limit nor the heuristic."""
        assert parse("0" * 5000 + "1") == Instant.from_seconds(1)
        assert parse("0" * 5000 + "1705329045123", Unit.MILLISECONDS) == Instant.from_millis(1705329045123)

    def test_very_long_fraction(self) -> None:
        """Fraction digits beyond the unit's resolution are dropped, however many."""
        assert parse("1." + "9" * 5000, Unit.SECONDS) == Instant(1_999_999_999)

    def test_bad_hint_type(self) -> None:
        """Hints must be Unit members."""
        with pytest.raises(TypeError):
            parse("1", "s")  # type: ignore[arg-type]


# =============================================================================
# Normalization and keywords
# =============================================================================


class TestNormalization:
    """Tests for whitespace, quotes and empty input."""

    @pytest.mark.parametrize("text", ["", "   ", "''", '" "'])
    def test_empty(self, text: str) -> None:
        """Empty input raises EmptyInputError."""
        with pytest.raises(EmptyInputError) as exc_info:
            parse(text)
        assert exc_info.value.kind is ParseErrorKind.EMPTY

    def test_quotes_stripped(self) -> None:
        """One pair of matching quotes is removed."""
        assert parse("'1705329045'") == Instant.from_seconds(1705329045)
        assert parse('  "2024-01-15T14:30:45Z"  ') == Instant.from_seconds(1705329045)

    def test_mismatched_quotes_kept(self) -> None:
        """Mismatched quotes are part of the text."""
        with pytest.raises(UnsupportedFormatError):
            parse("'2024-01-15T14:30:45Z\"")

    def test_garbage(self) -> None:
        """Unrecognized text raises UnsupportedFormatError."""
        with pytest.raises(UnsupportedFormatError):
            parse("next tuesday")


class TestNow:
    """Tests for the now keyword."""

    def test_now(self, now: Instant) -> None:
        """now returns the supplied instant, case-insensitively."""
        assert parse("now", now=now) == now
        assert parse("NOW", now=now) == now

    def test_now_required(self) -> None:
        """Without a supplied instant, now is unsupported."""
        with pytest.raises(UnsupportedFormatError):
            parse("now")


# =============================================================================
# ISO-like input
# =============================================================================


class TestIsoInput:
    """Tests for ISO 8601 style date-times."""

    @pytest.mark.parametrize(
        "text,seconds",
        [
            ("2024-01-15T14:30:45Z", 1705329045),
            ("2024-01-15t14:30:45z", 1705329045),
            ("2024-01-15 14:30:45", 1705329045),
            ("2024/01/15 14:30", 1705329000),
            ("2024-01-15", 1705276800),
            ("2024-01-15T15:30:45+01:00", 1705329045),
            ("2024-01-15T15:30:45+0100", 1705329045),
            ("2024-01-15T14:30:45 +0100", 1705325445),
            ("2024-01-15T09:30:45-05", 1705329045),
        ],
    )
    def test_forms(self, text: str, seconds: int) -> None:
        """Separators, clock precision and offset spellings vary."""
        assert parse(text) == Instant.from_seconds(seconds)

    def test_fraction(self) -> None:
        """Fractions are kept to the nanosecond."""
        assert parse("2024-01-15T14:30:45.123+05:30") == Instant(1705309245_123_000_000)
        assert parse("2024-01-15T14:30:45,5Z") == Instant(1705329045_500_000_000)
        assert parse("1970-01-01T00:00:00.000000001Z") == Instant(1)

    def test_default_offset(self) -> None:
        """Input without an offset uses default_offset."""
        offset = UtcOffset.from_hours(1)
        assert parse("2014-05-06 20:08:07", default_offset=offset) == Instant.from_seconds(1399403287)

    def test_explicit_offset_wins(self) -> None:
        """An offset in the text beats default_offset."""
        offset = UtcOffset.from_hours(1)
        assert parse("2024-01-15T14:30:45Z", default_offset=offset) == Instant.from_seconds(1705329045)

    def test_mixed_separators(self) -> None:
        """The date separator must be consistent."""
        with pytest.raises(UnsupportedFormatError):
            parse("2024-01/15")

    @pytest.mark.parametrize(
        "text,field",
        [
            ("2024-13-01", "month"),
            ("2024-00-10", "month"),
            ("2024-02-30", "day"),
            ("2023-02-29", "day"),
            ("2024-01-15T24:00:00Z", "hour"),
            ("2024-01-15T14:60:00Z", "minute"),
            ("2024-01-15T14:30:60Z", "second"),
            ("2024-01-15T14:30:45+25:00", "offset"),
        ],
    )
    def test_invalid_fields(self, text: str, field: str) -> None:
        """Out-of-range fields raise InvalidFieldError naming the field."""
        with pytest.raises(InvalidFieldError) as exc_info:
            parse(text)
        assert exc_info.value.field == field
        assert exc_info.value.kind is ParseErrorKind.INVALID_FIELD

    @pytest.mark.parametrize("text", ["0000-01-01", "10000-01-01T00:00:00Z"])
    def test_year_range(self, text: str) -> None:
        """Years outside 1-9999 raise ParseRangeError."""
        with pytest.raises(ParseRangeError):
            parse(text)

    def test_year_boundaries(self) -> None:
        """Years 1 and 9999 are accepted."""
        assert parse("0001-01-01T00:00:00Z").nanos < 0
        assert parse("9999-12-31T23:59:59Z") == Instant.from_seconds(253402300799)

    @pytest.mark.parametrize(
        "text",
        [
            "9999-12-31T23:59:59-05:00",
            "0001-01-01T00:30:00+01:00",
            "10000-01-01T05:00:00+05:00",
            "100000-01-01T00:00:00Z",
        ],
    )
    def test_offset_moves_instant_out_of_range(self, text: str) -> None:
        """The instant, not the wall-clock year, decides the range."""
        with pytest.raises(ParseRangeError):
            parse(text)

    def test_wall_clock_years_at_range_edges(self) -> None:
        """Years 0000 and 10000 are read when the offset brings the instant back in range."""
        first = Instant.from_seconds(-62135596800)
        last = Instant(253402300800 * 1_000_000_000 - 1)
        assert parse("0000-12-31T19:00:00-05:00") == first
        assert parse("10000-01-01T04:59:59.999999999+05:00") == last
        assert parse("01 Jan 10000 04:59:59 +0500") == Instant.from_seconds(253402300799)
        assert parse_with_pattern("0000-12-31 23:00 -0100", "%Y-%m-%d %H:%M %z") == first


# =============================================================================
# RFC 2822 and partial input
# =============================================================================


class TestRfc2822Input:
    """Tests for RFC 2822 style input."""

    @pytest.mark.parametrize(
        "text,seconds",
        [
            ("Mon, 15 Jan 2024 14:30:45 +0000", 1705329045),
            ("Mon, 15 Jan 2024 09:30:45 -0500", 1705329045),
            ("15 jan 2024 14:30:45 gmt", 1705329045),
            ("Mon, 15 Jan 2024 14:30 UTC", 1705329000),
        ],
    )
    def test_forms(self, text: str, seconds: int) -> None:
        """Weekday is optional and names are case-insensitive."""
        assert parse(text) == Instant.from_seconds(seconds)

    def test_weekday_mismatch(self) -> None:
        """A weekday that contradicts the date is a field error."""
        with pytest.raises(InvalidFieldError) as exc_info:
            parse("Tue, 15 Jan 2024 14:30:45 +0000")
        assert exc_info.value.field == "weekday"

    def test_unknown_month(self) -> None:
        """Unknown month names are field errors."""
        with pytest.raises(InvalidFieldError) as exc_info:
            parse("Mon, 15 Foo 2024 14:30:45 +0000")
        assert exc_info.value.field == "month"


class TestPartialInput:
    """Tests for forms completed from now."""

    def test_time_only(self, now: Instant) -> None:
        """A bare time is taken on now's date."""
        assert parse("14:30", now=now) == Instant.from_seconds(1705329000)

    def test_time_only_with_offset(self, now: Instant) -> None:
        """The time's own offset decides both date and clock."""
        assert parse("14:30+01:00", now=now) == Instant.from_seconds(1705325400)

    def test_time_only_uses_default_offset(self, now: Instant) -> None:
        """Without an offset the date is read at default_offset."""
        offset = UtcOffset.from_hours(10)
        # now is 2024-01-16 00:30 at +10:00
        assert parse("01:00", now=now, default_offset=offset) == Instant.from_seconds(1705330800)

    def test_month_day(self, now: Instant) -> None:
        """--MM-DD takes its year from now."""
        assert parse("--03-01", now=now) == Instant.from_seconds(1709251200)

    def test_year_month(self) -> None:
        """YYYY-MM is the first of the month."""
        assert parse("2024-02") == Instant.from_seconds(1706745600)

    @pytest.mark.parametrize("text", ["14:30", "--03-01"])
    def test_now_required(self, text: str) -> None:
        """Relative forms need a supplied now."""
        with pytest.raises(UnsupportedFormatError):
            parse(text)

    def test_partial_invalid_day(self, now: Instant) -> None:
        """Partial dates are still validated."""
        with pytest.raises(InvalidFieldError):
            parse("--02-30", now=now)


# =============================================================================
# Custom patterns
# =============================================================================


class TestParseWithPattern:
    """Tests for parse_with_pattern."""

    def test_basic(self) -> None:
        """Fields are read from the positions the pattern gives."""
        assert parse_with_pattern("15/01/2024 14:30", "%d/%m/%Y %H:%M") == Instant.from_seconds(1705329000)

    def test_fraction_and_offset(self) -> None:
        """%f and %z round out a full timestamp."""
        result = parse_with_pattern("2024-01-15 15:30:45.000000001 +0100", "%Y-%m-%d %H:%M:%S.%f %z")
        assert result == Instant(1705329045_000_000_001)

    def test_offset_name(self) -> None:
        """%Z accepts UTC or +HH:MM."""
        assert parse_with_pattern("2024-01-15 UTC", "%Y-%m-%d %Z") == Instant.from_seconds(1705276800)
        assert parse_with_pattern("2024-01-15 +01:00", "%Y-%m-%d %Z") == Instant.from_seconds(1705273200)

    def test_offsets_must_agree(self) -> None:
        """%z and %Z describing different offsets is a field error."""
        assert parse_with_pattern("2024-01-15 +0100 +01:00", "%Y-%m-%d %z %Z") == Instant.from_seconds(1705273200)
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_with_pattern("2024-01-15 +0100 +02:00", "%Y-%m-%d %z %Z")
        assert exc_info.value.field == "offset"

    def test_repeated_token_must_match(self) -> None:
        """A token used twice must read the same text twice."""
        assert parse_with_pattern("2024-01-15 2024", "%Y-%m-%d %Y") == Instant.from_seconds(1705276800)
        with pytest.raises(UnsupportedFormatError):
            parse_with_pattern("2024-01-15 2023", "%Y-%m-%d %Y")

    def test_literal_percent(self) -> None:
        """%% matches a literal percent sign."""
        assert parse_with_pattern("2024%01%15", "%Y%%%m%%%d") == Instant.from_seconds(1705276800)

    def test_default_offset(self) -> None:
        """Patterns without an offset use default_offset."""
        offset = UtcOffset.from_hours(1)
        assert parse_with_pattern("2024-01-15", "%Y-%m-%d", default_offset=offset) == Instant.from_seconds(1705273200)

    def test_date_tokens_required(self) -> None:
        """A pattern without year, month and day cannot be parsed."""
        with pytest.raises(UnsupportedFormatError):
            parse_with_pattern("01/15", "%m/%d")

    def test_unknown_token(self) -> None:
        """Unknown tokens are reported as UnknownTokenError."""
        with pytest.raises(UnknownTokenError):
            parse_with_pattern("2024", "%Q")

    def test_mismatch(self) -> None:
        """Text that does not fit the pattern is unsupported."""
        with pytest.raises(UnsupportedFormatError):
            parse_with_pattern("2024-01-15T00:00", "%Y-%m-%d")

    def test_field_validation(self) -> None:
        """Parsed fields are range-checked."""
        with pytest.raises(InvalidFieldError):
            parse_with_pattern("2024-02-30", "%Y-%m-%d")
        with pytest.raises(ParseRangeError):
            parse_with_pattern("0000-01-01", "%Y-%m-%d")


# =============================================================================
# Durations
# =============================================================================


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("4h5m30s", Duration(hours=4, minutes=5, seconds=30)),
            ("30s", Duration(seconds=30)),
            ("1.5h", Duration(minutes=90)),
            ("0.1s", Duration(milliseconds=100)),
            ("4h2s5ms", Duration(hours=4, seconds=2, milliseconds=5)),
            ("1 hour 30 minutes", Duration(minutes=90)),
            ("2 weeks", Duration(days=14)),
            ("1.5d", Duration(hours=36)),
            ("1H", Duration(hours=1)),
            ("250us", Duration(microseconds=250)),
            ("7ns", Duration(nanoseconds=7)),
            ("-2d", Duration(days=-2)),
            ("+3m", Duration(minutes=3)),
            ("- 1h30m", Duration(minutes=-90)),
        ],
    )
    def test_exact(self, text: str, expected: Duration) -> None:
        """Exact units produce a Duration."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1mo", Period(months=1)),
            ("1y2mo3d4h", Period(years=1, months=2, days=3, hours=4)),
            ("1mo1w", Period(months=1, days=7)),
            ("2 years", Period(years=2)),
            ("-1 month 3 hours", Period(months=-1, hours=-3)),
        ],
    )
    def test_calendar(self, text: str, expected: Period) -> None:
        """Years and months produce a Period."""
        assert parse_duration(text) == expected

    def test_fractional_month_rejected(self) -> None:
        """Calendar units must be whole."""
        with pytest.raises(InvalidFieldError) as exc_info:
            parse_duration("1.5mo")
        assert exc_info.value.field == "months"

    def test_sub_nanosecond_truncated(self) -> None:
        """Fractions finer than a nanosecond are dropped."""
        assert parse_duration("1.0000000001s") == Duration(seconds=1)

    @pytest.mark.parametrize("text", ["9" * 5000 + "s", "1" * 31 + "ns", "9" * 5000 + "mo", "1h" + "9" * 5000 + "m"])
    def test_amount_too_long(self, text: str) -> None:
        """Amounts with more digits than any range allows raise ParseRangeError."""
        with pytest.raises(ParseRangeError) as exc_info:
            parse_duration(text)
        assert exc_info.value.kind is ParseErrorKind.OUT_OF_RANGE

    def test_long_amount_with_leading_zeros(self) -> None:
        """Leading zeros do not count toward the digit limit."""
        assert parse_duration("0" * 5000 + "1h") == Duration(hours=1)

    def test_very_long_fraction(self) -> None:
        """A fraction of any length is cut to nanosecond resolution."""
        assert parse_duration("1." + "5" * 5000 + "s") == Duration(seconds=1, nanoseconds=555_555_555)
        assert parse_duration("1." + "0" * 5000 + "s") == Duration(seconds=1)

    @pytest.mark.parametrize("text", ["5 parsecs", "h", "4h 5", "-", "1h-2m"])
    def test_unsupported(self, text: str) -> None:
        """Text that is not a run of terms is unsupported."""
        with pytest.raises(UnsupportedFormatError):
            parse_duration(text)

    def test_empty(self) -> None:
        """Empty duration text raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            parse_duration("  ")
