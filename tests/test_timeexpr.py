"""Tests for date/time expression and interval parsing."""

from datetime import datetime, timedelta

import pytest

from hrtracker.errors import ParseError
from hrtracker.timeexpr import (
    add_interval,
    format_countdown,
    format_datetime,
    format_interval,
    parse_datetime,
    parse_duration,
    parse_interval,
)


class TestParseDuration:
    """Tests for hh[:mm[:ss]] durations."""

    @pytest.mark.parametrize(
        ("text", "hours", "minutes", "seconds"),
        [
            ("0", 0, 0, 0),
            ("7", 7, 0, 0),
            ("07", 7, 0, 0),
            ("8:5", 8, 5, 0),
            ("08:30", 8, 30, 0),
            ("1:2:3", 1, 2, 3),
            ("23:59:59", 23, 59, 59),
            ("99:99:99", 99, 99, 99),
        ],
    )
    def test_total_seconds(self, text, hours, minutes, seconds):
        """Each component contributes hh*3600 + mm*60 + ss seconds."""
        delta = parse_duration(text)
        assert delta.total_seconds() == hours * 3600 + minutes * 60 + seconds

    def test_no_upper_bound(self):
        assert parse_duration("30:70") == timedelta(hours=31, minutes=10)

    @pytest.mark.parametrize(
        "text", ["", "abc", "-1", "100", "1:", ":30", "1:2:3:4", "1.5", "1:xx"]
    )
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parse_duration(text)


class TestParseDatetime:
    """Tests for relative date expressions."""

    def test_today_is_midnight(self, now):
        assert parse_datetime("today", now) == datetime(2026, 1, 12)

    def test_today_ignores_time_of_day(self):
        late = datetime(2026, 1, 12, 23, 59, 59)
        early = datetime(2026, 1, 12, 0, 0, 1)
        assert parse_datetime("today", late) == parse_datetime("today", early)

    def test_tomorrow(self, now):
        assert parse_datetime("tomorrow", now) == datetime(2026, 1, 13)

    def test_tmrw_alias(self, now):
        assert parse_datetime("tmrw", now) == parse_datetime("tomorrow", now)

    def test_tomorrow_crosses_month_and_year(self):
        assert parse_datetime("tomorrow", datetime(2026, 12, 31, 18)) == datetime(
            2027, 1, 1
        )

    def test_now_keeps_time_of_day(self, now):
        """now keeps the clock but drops sub-second precision."""
        assert parse_datetime("now", now) == datetime(2026, 1, 12, 14, 30, 15)

    def test_now_defaults_to_local_clock(self):
        before = datetime.now().replace(microsecond=0)
        result = parse_datetime("now")
        after = datetime.now()
        assert before <= result <= after
        assert result.microsecond == 0
        assert result.tzinfo is None

    def test_today_plus_hours(self, now):
        assert parse_datetime("today+8", now) == datetime(2026, 1, 12, 8)

    def test_today_plus_hh_mm_ss(self, now):
        assert parse_datetime("today+08:05:09", now) == datetime(2026, 1, 12, 8, 5, 9)

    def test_suffix_is_added_not_replaced(self, now):
        """now+1 is one hour later, not 01:00."""
        assert parse_datetime("now+1", now) == datetime(2026, 1, 12, 15, 30, 15)

    def test_today_plus_25_rolls_over(self, now):
        assert parse_datetime("today+25", now) == datetime(2026, 1, 13, 1)

    def test_tomorrow_plus_25(self, now):
        """Addition carries across the day boundary without clamping."""
        assert parse_datetime("tomorrow+25", now) == datetime(2026, 1, 14, 1)

    def test_out_of_range_components_normalize(self, now):
        assert parse_datetime("today+30:70", now) == datetime(2026, 1, 13, 7, 10)

    def test_case_and_whitespace(self, now):
        assert parse_datetime("  Tomorrow + 9:00 ", now) == datetime(2026, 1, 13, 9)

    @pytest.mark.parametrize(
        "expr",
        [
            "",
            "yesterday",
            "+5",
            "today+",
            "today+ ",
            "today+abc",
            "today+-1",
            "today+100",
            "today+1:2:3:4",
            "today+1+2",
            "today+٠٨",
            "2026-01-12",
        ],
    )
    def test_invalid(self, expr, now):
        with pytest.raises(ParseError):
            parse_datetime(expr, now)

    def test_error_names_expression(self, now):
        with pytest.raises(ParseError) as exc_info:
            parse_datetime("yesterday+8", now)
        assert exc_info.value.text == "yesterday+8"
        assert "yesterday" in str(exc_info.value)
        assert "not a valid date" in str(exc_info.value)

    def test_parse_error_is_value_error(self, now):
        with pytest.raises(ValueError):
            parse_datetime("nope", now)


class TestParseInterval:
    """Tests for interval literals."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1", timedelta(days=1)),
            ("0", timedelta(0)),
            ("14", timedelta(days=14)),
            ("2d", timedelta(days=2)),
            ("2D", timedelta(days=2)),
            ("06:00", timedelta(hours=6)),
            ("0:30:15", timedelta(minutes=30, seconds=15)),
            ("36:00", timedelta(hours=36)),
            ("1+12", timedelta(hours=36)),
            ("1d+12:00", timedelta(hours=36)),
            ("0d+0:0:1", timedelta(seconds=1)),
            (" 1 ", timedelta(days=1)),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_interval(text) == expected

    @pytest.mark.parametrize(
        "text", ["", "abc", "1h", "-1", "d", "1d+", "+12:00", "1:2:3:4", "1.5"]
    )
    def test_invalid(self, text):
        with pytest.raises(ParseError) as exc_info:
            parse_interval(text)
        assert exc_info.value.text == text

    @pytest.mark.parametrize("text", ["9999999999", "9999999999d", "999999999+99:00"])
    def test_too_large(self, text):
        with pytest.raises(ParseError, match="too large") as exc_info:
            parse_interval(text)
        assert exc_info.value.text == text

    @pytest.mark.parametrize("text", ["١", "١d", "٠٨:00", "1+٠٨"])
    def test_non_ascii_digits_rejected(self, text):
        with pytest.raises(ParseError):
            parse_interval(text)


class TestArithmeticAndFormatting:
    """Tests for interval arithmetic and display helpers."""

    def test_add_interval(self):
        start = datetime(2026, 1, 31, 22)
        assert add_interval(start, timedelta(hours=3)) == datetime(2026, 2, 1, 1)

    def test_add_interval_crosses_leap_day(self):
        start = datetime(2028, 2, 28, 8)
        assert add_interval(start, timedelta(days=1)) == datetime(2028, 2, 29, 8)

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(0), "00h00m00s"),
            (timedelta(seconds=3725), "01h02m05s"),
            (timedelta(hours=36), "36h00m00s"),
            (timedelta(minutes=-90), "-01h30m00s"),
        ],
    )
    def test_format_interval(self, delta, expected):
        assert format_interval(delta) == expected

    def test_format_countdown(self, now):
        target = now + timedelta(hours=2, minutes=5)
        assert format_countdown(target, now) == "in 02h05m00s"
        assert format_countdown(now - timedelta(seconds=30), now) == "overdue by 00h00m30s"

    def test_format_datetime(self, now):
        assert format_datetime(now) == "2026-01-12 14:30:15"
