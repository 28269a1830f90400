"""
Tests for casting and parsing helpers
"""
import pytest
from datetime import date, datetime, timedelta, timezone

from chrono.casting import (
    parse,
    parse_or_none,
    timestamp_to_datetime,
    is_valid_date_string,
    parse_weekday_name,
    set_time_of_day,
    is_valid_time_string,
    start_of_day,
    end_of_day,
)
from chrono.exceptions import ChronoError, InvalidArgument, ParseError


class TestParse:
    """Test coercion of instant-like values"""

    def test_datetime_returned_as_is(self, reference):
        assert parse(reference) is reference

    def test_date_becomes_midnight(self):
        assert parse(date(2023, 6, 15)) == datetime(2023, 6, 15, 0, 0, 0)

    def test_date_string(self):
        assert parse("2023-06-15 14:30:00") == datetime(2023, 6, 15, 14, 30)
        assert parse("2023-06-15") == datetime(2023, 6, 15)

    def test_string_with_offset_is_aware(self):
        result = parse("2023-06-15T10:00:00+02:00")
        assert result.utcoffset() == timedelta(hours=2)

    def test_numeric_timestamp(self):
        assert parse(0, tz="UTC") == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert parse(86400.0, tz="UTC") == datetime(1970, 1, 2, tzinfo=timezone.utc)

    def test_at_timestamp_string(self):
        assert parse("@3600", tz="UTC") == datetime(1970, 1, 1, 1, tzinfo=timezone.utc)

    def test_naive_string_localised_in_requested_zone(self):
        result = parse("2023-06-15 12:00", tz="Europe/Paris")
        assert result.utcoffset() == timedelta(hours=2)
        assert result.hour == 12

    def test_configured_timezone_applies(self, monkeypatch):
        monkeypatch.setenv("CHRONO_TIMEZONE", "Europe/Paris")
        result = parse("2023-01-15 12:00")
        assert result.utcoffset() == timedelta(hours=1)

    def test_relative_expression(self):
        result = parse("today")
        assert result.date() == date.today() or result.date() == date.today() - timedelta(days=1)
        assert (result.hour, result.minute, result.second) == (0, 0, 0)

    def test_dayfirst(self):
        assert parse("01-02-2020", dayfirst=True) == datetime(2020, 2, 1)

    def test_dayfirst_keeps_iso_dates_year_first(self):
        assert parse("2023-06-05", dayfirst=True) == datetime(2023, 6, 5)
        assert parse("2023-06-05 14:30", dayfirst=True) == datetime(2023, 6, 5, 14, 30)

    @pytest.mark.parametrize("bad", ["not a date", "", "   ", "2023-13-45"])
    def test_unparseable_strings_raise(self, bad):
        with pytest.raises(ParseError):
            parse(bad)

    @pytest.mark.parametrize("bad", [None, True, [2023, 6, 15], object()])
    def test_unsupported_types_raise(self, bad):
        with pytest.raises(ParseError):
            parse(bad)

    def test_parse_error_is_value_error(self):
        """Callers catching ValueError keep working"""
        with pytest.raises(ValueError):
            parse("definitely not a date")

    def test_parse_error_details(self):
        with pytest.raises(ParseError) as exc_info:
            parse("nope")
        assert isinstance(exc_info.value, ChronoError)
        assert exc_info.value.details["value"] == "nope"

    def test_parse_or_none(self, reference):
        assert parse_or_none(None) is None
        assert parse_or_none(reference) is reference


class TestTimestampToDatetime:
    """Test the lenient timestamp converter"""

    def test_negative_timestamp_gives_none(self):
        assert timestamp_to_datetime(-1) is None

    def test_epoch(self):
        assert timestamp_to_datetime(0, tz="UTC") == datetime(1970, 1, 1, tzinfo=timezone.utc)


class TestIsValidDateString:
    """Test round-trip date validation"""

    def test_real_dates(self):
        assert is_valid_date_string("2023-12-31") is True
        assert is_valid_date_string("2024-02-29") is True

    def test_impossible_dates(self):
        assert is_valid_date_string("2023-02-30") is False
        assert is_valid_date_string("2023-02-29") is False
        assert is_valid_date_string("2023-13-01") is False

    def test_non_canonical_input_rejected(self):
        """strptime accepts unpadded fields but the round trip does not match"""
        assert is_valid_date_string("2023-1-5") is False
        assert is_valid_date_string(" 2023-01-05") is False

    def test_custom_format(self):
        assert is_valid_date_string("31/12/2023", "%d/%m/%Y") is True
        assert is_valid_date_string("2023-12-31", "%d/%m/%Y") is False

    def test_non_string(self):
        assert is_valid_date_string(None) is False


class TestParseWeekdayName:
    """Test weekday name lookup"""

    @pytest.mark.parametrize("name,expected", [
        ("Monday", 1),
        ("mon", 1),
        ("TUESDAY", 2),
        ("Wed", 3),
        ("thursday", 4),
        (" fri ", 5),
        ("Sat", 6),
        ("SUN", 7),
        ("3", 3),
        ("7", 7),
    ])
    def test_valid_names(self, name, expected):
        assert parse_weekday_name(name) == expected

    @pytest.mark.parametrize("name", ["funday", "0", "8", "", "mo", "\u00b9", "\u0663", "\uff13"])
    def test_invalid_names(self, name):
        with pytest.raises(InvalidArgument):
            parse_weekday_name(name)


class TestSetTimeOfDay:
    """Test replacing the time of day"""

    def test_hours_minutes(self):
        original = datetime(2023, 6, 15, 8, 0, 0, 123)
        result = set_time_of_day(original, "14:30")
        assert result == datetime(2023, 6, 15, 14, 30, 0)
        assert original == datetime(2023, 6, 15, 8, 0, 0, 123)

    def test_with_seconds_and_single_digit_hour(self):
        assert set_time_of_day("2023-06-15", "9:05:07") == datetime(2023, 6, 15, 9, 5, 7)

    @pytest.mark.parametrize("bad", ["24:00", "12:60", "12:00:60", "abc", "12:5", "", "12:00 ", "1\u0663:00", "\uff11\uff12:00"])
    def test_invalid_times(self, bad):
        with pytest.raises(InvalidArgument):
            set_time_of_day("2023-06-15", bad)

    def test_keeps_dst_offset_correct(self, paris):
        winter = paris.localize(datetime(2023, 3, 26, 0, 30))
        result = set_time_of_day(winter, "12:00")
        assert result.utcoffset() == timedelta(hours=2)


class TestIsValidTimeString:
    """Test strict 24-hour time validation"""

    @pytest.mark.parametrize("text", ["00:00", "09:15", "23:59", "23:59:59", "12:00:00"])
    def test_valid(self, text):
        assert is_valid_time_string(text) is True

    @pytest.mark.parametrize("text", ["9:00", "24:00", "12:60", "12:00:60", " 12:00", "12:00\n", "1200", "1\u0663:00", "12:\u0660\u0660", None])
    def test_invalid(self, text):
        assert is_valid_time_string(text) is False


class TestDayEdges:
    """Test start/end of day helpers"""

    def test_start_and_end_of_day(self):
        assert start_of_day("2023-06-15 14:30:45") == datetime(2023, 6, 15, 0, 0, 0)
        assert end_of_day("2023-06-15 14:30:45") == datetime(2023, 6, 15, 23, 59, 59)

    def test_offset_recomputed_across_dst(self, paris):
        summer_noon = paris.localize(datetime(2023, 3, 26, 12, 0))
        assert summer_noon.utcoffset() == timedelta(hours=2)

        midnight = start_of_day(summer_noon)
        assert midnight.utcoffset() == timedelta(hours=1)
        assert midnight.tzinfo.zone == "Europe/Paris"
