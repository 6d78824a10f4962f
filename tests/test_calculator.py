"""Tests for the Calculator facade and its configuration."""

from __future__ import annotations

import logging

import pytest

from utcalc import (
    Calculator,
    CalculatorConfig,
    CalculatorError,
    CustomPattern,
    DurationStyle,
    EmptyInputError,
    FormatKind,
    FormatRangeError,
    Instant,
    InvalidFieldError,
    Operation,
    ParseRangeError,
    Stage,
    Unit,
    UnknownTokenError,
    UnsupportedFormatError,
    UtcOffset,
    capabilities,
)
from utcalc.format.pattern import PatternToken


@pytest.fixture
def calc() -> Calculator:
    return Calculator()


# =============================================================================
# Configuration
# =============================================================================


class TestCalculatorConfig:
    """Tests for CalculatorConfig."""

    def test_defaults(self) -> None:
        """An empty config means UTC and no hint."""
        config = CalculatorConfig()
        assert config.default_offset is None
        assert config.ambiguous_numeric_hint is None
        assert config.effective_offset == UtcOffset.utc()

    def test_effective_offset(self) -> None:
        """effective_offset returns the configured offset."""
        offset = UtcOffset.from_hours(3)
        assert CalculatorConfig(default_offset=offset).effective_offset == offset

    def test_type_checks(self) -> None:
        """Fields are type-checked on construction."""
        with pytest.raises(TypeError):
            CalculatorConfig(default_offset="+01:00")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            CalculatorConfig(ambiguous_numeric_hint="ms")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Configs are immutable."""
        config = CalculatorConfig()
        with pytest.raises(AttributeError):
            config.default_offset = UtcOffset.utc()  # type: ignore[misc]

    def test_calculator_rejects_other_config(self) -> None:
        """Calculator only accepts a CalculatorConfig."""
        with pytest.raises(TypeError):
            Calculator({"default_offset": None})  # type: ignore[arg-type]


# =============================================================================
# convert
# =============================================================================


class TestConvert:
    """Tests for Calculator.convert."""

    def test_epoch_to_iso(self, calc: Calculator) -> None:
        """The default target is ISO 8601 with an offset."""
        assert calc.convert("1705329045") == "2024-01-15T14:30:45Z"

    def test_iso_to_epoch(self, calc: Calculator) -> None:
        """Any kind can be requested."""
        assert calc.convert("2024-01-15T14:30:45Z", target_kind=FormatKind.EPOCH_MILLIS) == "1705329045000"

    def test_target_offset(self, calc: Calculator) -> None:
        """target_offset shifts the output wall clock."""
        result = calc.convert(
            "1705329045000",
            target_kind=FormatKind.RFC2822_LIKE,
            target_offset=UtcOffset.from_hours(-5),
        )
        assert result == "Mon, 15 Jan 2024 09:30:45 -0500"

    def test_hint(self, calc: Calculator) -> None:
        """An explicit hint fixes the numeric unit."""
        assert calc.convert("1705329045", Unit.MILLISECONDS) == "1970-01-20T17:42:09.045Z"

    def test_custom_pattern(self, calc: Calculator) -> None:
        """Custom patterns are accepted as the target kind."""
        assert calc.convert("1705329045", target_kind=CustomPattern("%d/%m/%Y")) == "15/01/2024"

    def test_now(self, calc: Calculator, now: Instant) -> None:
        """now is supplied by the caller."""
        assert calc.convert("now", now=now) == "2024-01-15T14:30:45Z"

    def test_config_offset_applies_to_input_and_output(self) -> None:
        """default_offset is used to read naive input and to write output."""
        calc = Calculator(CalculatorConfig(default_offset=UtcOffset.from_hours(1)))
        assert calc.convert("2024-01-15 15:30:45") == "2024-01-15T15:30:45+01:00"
        assert calc.convert("2024-01-15 15:30:45", target_kind=FormatKind.EPOCH_SECONDS) == "1705329045"

    def test_explicit_target_beats_config(self) -> None:
        """target_offset overrides the configured offset for output."""
        calc = Calculator(CalculatorConfig(default_offset=UtcOffset.from_hours(1)))
        assert calc.convert("1705329045", target_offset=UtcOffset.utc()) == "2024-01-15T14:30:45Z"

    def test_config_hint(self) -> None:
        """ambiguous_numeric_hint replaces the digit-count heuristic."""
        calc = Calculator(CalculatorConfig(ambiguous_numeric_hint=Unit.MILLISECONDS))
        assert calc.convert("1705329045") == "1970-01-20T17:42:09.045Z"
        assert calc.convert("1705329045", Unit.SECONDS) == "2024-01-15T14:30:45Z"


class TestConvertErrors:
    """Tests for stage-tagged errors from convert."""

    def test_parse_failure(self, calc: Calculator) -> None:
        """Parse failures report PARSING_INPUT_A and chain the cause."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.convert("2024-13-01")
        error = exc_info.value
        assert error.stage is Stage.PARSING_INPUT_A
        assert error.input_text == "2024-13-01"
        assert isinstance(error.cause, InvalidFieldError)
        assert error.__cause__ is error.cause

    def test_empty_input(self, calc: Calculator) -> None:
        """Empty input is a parse failure."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.convert("   ")
        assert isinstance(exc_info.value.cause, EmptyInputError)

    def test_format_range(self, calc: Calculator) -> None:
        """Unformattable results report FORMATTING_RESULT."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.convert("300000000000", Unit.SECONDS)
        assert exc_info.value.stage is Stage.FORMATTING_RESULT
        assert isinstance(exc_info.value.cause, FormatRangeError)

    def test_unknown_token(self, calc: Calculator) -> None:
        """Bad patterns are formatting failures."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.convert("0", target_kind=CustomPattern("%Y %Q"))
        assert exc_info.value.stage is Stage.FORMATTING_RESULT
        assert isinstance(exc_info.value.cause, UnknownTokenError)

    def test_message(self, calc: Calculator) -> None:
        """The message names the stage and the input."""
        with pytest.raises(CalculatorError, match="parsing input A failed on 'bogus'"):
            calc.convert("bogus")

    def test_failure_logged(self, calc: Calculator, caplog: pytest.LogCaptureFixture) -> None:
        """Stage failures are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="utcalc.calculator"):
            with pytest.raises(CalculatorError):
                calc.convert("bogus")
        assert any(record.getMessage() == "calculator_stage_failed" for record in caplog.records)


# =============================================================================
# compute
# =============================================================================


class TestCompute:
    """Tests for Calculator.compute."""

    def test_add_month_clamps(self, calc: Calculator) -> None:
        """Adding a month to January 31 clamps to February's last day."""
        assert calc.compute("2024-01-31T00:00:00Z", "1mo", Operation.ADD) == "2024-02-29T00:00:00Z"
        assert calc.compute("2023-01-31T00:00:00Z", "1mo", Operation.ADD) == "2023-02-28T00:00:00Z"

    def test_add_duration(self, calc: Calculator) -> None:
        """Exact durations are added as elapsed time."""
        assert calc.compute("1705329045", "4h5m30s", Operation.ADD, target_kind=FormatKind.EPOCH_SECONDS) == "1705343775"

    def test_subtract(self, calc: Calculator) -> None:
        """SUBTRACT moves backwards."""
        assert calc.compute("2024-03-31T00:00:00Z", "1 month", Operation.SUBTRACT) == "2024-02-29T00:00:00Z"
        assert calc.compute("0", "1.5s", Operation.SUBTRACT, target_kind=FormatKind.EPOCH_SECONDS) == "-1.5"

    def test_calendar_add_at_target_offset(self, calc: Calculator) -> None:
        """Months are counted on the wall clock of the target offset."""
        result = calc.compute(
            "2024-01-30T23:00:00Z",
            "1mo",
            Operation.ADD,
            target_offset=UtcOffset.from_hours(2),
        )
        assert result == "2024-02-29T01:00:00+02:00"

    def test_diff_seconds(self, calc: Calculator) -> None:
        """DIFF formats a Duration as decimal seconds by default."""
        assert calc.compute("2024-01-02T00:00:00Z", "2024-01-01T00:00:00Z", Operation.DIFF) == "86400"
        assert calc.compute("0", "1.25", Operation.DIFF) == "-1.25"

    def test_diff_compact(self, calc: Calculator) -> None:
        """DIFF can use the compact style."""
        result = calc.compute(
            "2024-01-15T14:30:45Z",
            "2024-01-15T10:00:00Z",
            Operation.DIFF,
            duration_style=DurationStyle.COMPACT,
        )
        assert result == "4h30m45s"

    def test_diff_with_now(self, calc: Calculator, now: Instant) -> None:
        """Both DIFF inputs may be relative to now."""
        assert calc.compute("now", "14:00", Operation.DIFF, now=now) == "1845"

    def test_operation_type(self, calc: Calculator) -> None:
        """operation must be an Operation."""
        with pytest.raises(TypeError):
            calc.compute("0", "1s", "add")  # type: ignore[arg-type]


class TestComputeErrors:
    """Tests for stage-tagged errors from compute."""

    def test_input_a(self, calc: Calculator) -> None:
        """A bad first input reports PARSING_INPUT_A."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.compute("bogus", "1h", Operation.ADD)
        assert exc_info.value.stage is Stage.PARSING_INPUT_A

    def test_input_b_duration(self, calc: Calculator) -> None:
        """A bad duration reports PARSING_INPUT_B."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.compute("0", "5 parsecs", Operation.ADD)
        assert exc_info.value.stage is Stage.PARSING_INPUT_B
        assert exc_info.value.input_text == "5 parsecs"
        assert isinstance(exc_info.value.cause, UnsupportedFormatError)

    def test_input_b_instant(self, calc: Calculator) -> None:
        """A bad second instant reports PARSING_INPUT_B."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.compute("0", "2024-02-30", Operation.DIFF)
        assert exc_info.value.stage is Stage.PARSING_INPUT_B
        assert isinstance(exc_info.value.cause, InvalidFieldError)

    def test_input_b_duration_too_long(self, calc: Calculator) -> None:
        """A duration amount with thousands of digits is a stage-tagged range error."""
        text = "9" * 5000 + "s"
        with pytest.raises(CalculatorError) as exc_info:
            calc.compute("0", text, Operation.ADD)
        assert exc_info.value.stage is Stage.PARSING_INPUT_B
        assert isinstance(exc_info.value.cause, ParseRangeError)

    def test_input_a_digits_too_long(self, calc: Calculator) -> None:
        """A numeric instant with thousands of digits is a stage-tagged range error."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.compute("1" * 5000, "1h", Operation.ADD, hint=Unit.SECONDS)
        assert exc_info.value.stage is Stage.PARSING_INPUT_A
        assert isinstance(exc_info.value.cause, ParseRangeError)

    def test_result_out_of_range(self, calc: Calculator) -> None:
        """A result past year 9999 reports FORMATTING_RESULT."""
        with pytest.raises(CalculatorError) as exc_info:
            calc.compute("9999-12-31T00:00:00Z", "1d", Operation.ADD)
        assert exc_info.value.stage is Stage.FORMATTING_RESULT
        assert isinstance(exc_info.value.cause, FormatRangeError)


# =============================================================================
# Capabilities
# =============================================================================


class TestCapabilities:
    """Tests for capability introspection."""

    def test_contents(self) -> None:
        """Every kind, token, unit, operation and style is listed."""
        caps = capabilities()
        assert set(caps.format_kinds) == set(FormatKind)
        assert set(caps.pattern_tokens) == set(PatternToken)
        assert set(caps.units) == set(Unit)
        assert set(caps.operations) == {Operation.ADD, Operation.SUBTRACT, Operation.DIFF}
        assert set(caps.duration_styles) == set(DurationStyle)
        assert (caps.min_year, caps.max_year) == (1, 9999)

    def test_method_matches_function(self, calc: Calculator) -> None:
        """Calculator.capabilities() returns the same description."""
        assert calc.capabilities() == capabilities()
