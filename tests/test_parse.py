"""Duration literal parsing tests."""

import logging

import pytest

from tomatoclock import (
    MalformedDurationLiteralError,
    Precision,
    format_time,
    parse_duration,
    parse_time_str,
)

SEC = Precision.SEC
MIN = Precision.MIN
HOUR = Precision.HOUR


class TestParseTimeStr:
    def test_minutes_seconds(self):
        assert parse_time_str("20m10s") == (1210, (MIN, SEC))

    def test_hours_minutes_seconds(self):
        assert parse_time_str("1h30m20s") == (5420, (HOUR, SEC))

    def test_hours_minutes(self):
        assert parse_time_str("2h15m") == (8100, (HOUR, MIN))

    def test_upper_bound_values(self):
        assert parse_time_str("59h59m59s") == (59 * 3600 + 59 * 60 + 59, (HOUR, SEC))

    def test_leading_zero(self):
        assert parse_time_str("05m") == (300, (MIN, MIN))

    def test_unit_without_digits_is_zero(self):
        assert parse_time_str("m30s") == (30, (MIN, SEC))

    def test_out_of_order_fields(self):
        assert parse_time_str("10s20m") == (1210, (MIN, SEC))

    def test_repeated_unit_sums(self):
        assert parse_time_str("10m10m") == (1200, (MIN, MIN))

    def test_gap_keeps_full_range(self):
        assert parse_time_str("1h20s") == (3620, (HOUR, SEC))

    @pytest.mark.parametrize(
        "text",
        ["1d", "10x", "1h 30m", "1H", "+5m", "-5m", "1.5h", ":30"],
    )
    def test_unknown_unit_rejected(self, text):
        assert parse_time_str(text) is None

    @pytest.mark.parametrize("text", ["6s", "9m", "99h", "1h70m", "30m6s"])
    def test_leading_digit_above_five_rejected(self, text):
        assert parse_time_str(text) is None

    @pytest.mark.parametrize("text", ["100s", "1h123m", "555m"])
    def test_three_digit_field_rejected(self, text):
        assert parse_time_str(text) is None

    def test_empty_rejected(self):
        assert parse_time_str("") is None

    def test_trailing_digits_rejected(self):
        assert parse_time_str("20m10") is None

    def test_rejection_logged_at_debug(self, caplog):
        caplog.set_level(logging.DEBUG, logger="tomatoclock")
        assert parse_time_str("9m") is None
        assert any("'9'" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)


class TestSingleField:
    """A lone field reports the same unit as both bounds."""

    def test_minutes_only(self):
        assert parse_time_str("25m") == (1500, (MIN, MIN))

    def test_hours_only(self):
        assert parse_time_str("1h") == (3600, (HOUR, HOUR))

    def test_seconds_only(self):
        assert parse_time_str("30s") == (30, (SEC, SEC))

    def test_lower_unit_first(self):
        assert parse_time_str("5m1h") == (3900, (HOUR, MIN))

    def test_result_formats(self):
        sec, (upper, lower) = parse_time_str("25m")
        assert format_time(sec, upper, lower) == "25"


class TestParseDuration:
    def test_returns_precision_range(self):
        sec, rng = parse_duration("1h30m")
        assert sec == 5400
        assert rng.upper is HOUR
        assert rng.lower is MIN
        assert rng.span == 2

    def test_unknown_unit_message(self):
        with pytest.raises(MalformedDurationLiteralError, match="unknown duration unit"):
            parse_duration("3d")

    def test_leading_digit_message(self):
        with pytest.raises(MalformedDurationLiteralError, match="out of range"):
            parse_duration("7m")

    def test_field_too_long_message(self):
        with pytest.raises(MalformedDurationLiteralError, match="too many digits"):
            parse_duration("120s")

    def test_missing_unit_message(self):
        with pytest.raises(MalformedDurationLiteralError, match="missing its unit"):
            parse_duration("5")

    def test_empty_message(self):
        with pytest.raises(MalformedDurationLiteralError, match="cannot be empty"):
            parse_duration("")

    def test_non_string_rejected(self):
        with pytest.raises(MalformedDurationLiteralError) as exc_info:
            parse_duration(25)
        assert "int" in exc_info.value.internal()

    def test_literal_too_long(self):
        with pytest.raises(MalformedDurationLiteralError, match="too long"):
            parse_duration("1m" * 33)

    def test_custom_literal_length(self):
        assert parse_duration("1m" * 33, max_literal_length=66) == (1980, (MIN, MIN))

    def test_custom_field_digits(self):
        assert parse_duration("120m", max_field_digits=3) == (7200, (MIN, MIN))

    def test_custom_leading_digit(self):
        assert parse_duration("90m", max_leading_digit=9) == (5400, (MIN, MIN))


class TestRoundTrip:
    @pytest.mark.parametrize("text", ["20m10s", "1h30m20s", "59m59s", "2h0m5s"])
    def test_format_then_reparse(self, text):
        sec, (upper, lower) = parse_time_str(text)
        assert lower is SEC
        fields = format_time(sec, upper, lower).split(":")
        units = [p.unit for p in (HOUR, MIN, SEC) if lower.rank <= p.rank <= upper.rank]
        rebuilt = "".join(f + u for f, u in zip(fields, units))
        assert parse_time_str(rebuilt)[0] == sec
