"""Test date parsing, locale date patterns and validation."""
import pytest
from datetime import date, datetime, timezone
from intl_datetime.international import date_parsing
from intl_datetime.international.date_parsing import (
    get_date_pattern, parse, validate, validate_by_locale, validate_iso8601,
)
from tests.factories import LOCALE_CASES


class TestParse:
    def test_plain_date_string(self):
        assert parse("2004-08-03") == datetime(2004, 8, 3)

    def test_single_digit_fields(self):
        assert parse("2004-8-3") == datetime(2004, 8, 3)

    def test_leap_day(self):
        assert parse("2000-2-29") == datetime(2000, 2, 29)

    def test_non_leap_year_rejected(self):
        assert parse("2001-2-29") is None

    def test_month_out_of_range(self):
        assert parse("2004-13-03") is None

    def test_day_overflow(self):
        assert parse("2004-8-32") is None

    def test_trailing_segment_rejected(self):
        assert parse("2014-04-08-dump") is None

    def test_trailing_newline_rejected(self):
        assert parse("2014-04-08\n") is None

    def test_garbage(self):
        assert parse("Zac Xu") is None

    def test_epoch_milliseconds(self):
        expected = datetime(2004, 8, 3, tzinfo=timezone.utc)
        assert parse(1091491200000) == expected

    def test_nan_rejected(self):
        assert parse(float("nan")) is None

    def test_bool_rejected(self):
        assert parse(True) is None

    def test_datetime_passthrough(self):
        now = datetime(1986, 1, 15, 10, 30)
        assert parse(now) is now

    def test_date_becomes_midnight(self):
        assert parse(date(1986, 1, 15)) == datetime(1986, 1, 15)

    def test_unsupported_type(self):
        assert parse(["2004", "8", "3"]) is None

    def test_oversized_digit_run(self):
        assert parse("9" * 5000 + "-1-1") is None


class TestGetDatePattern:
    @pytest.mark.parametrize("case", LOCALE_CASES, ids=lambda c: c.locale)
    def test_pattern_by_locale(self, case):
        assert get_date_pattern(case.locale) == case.pattern

    def test_accepts_posix_identifier(self):
        assert get_date_pattern("en_GB") == "dd/mm/yyyy"

    def test_defaults_to_ambient_locale(self):
        assert get_date_pattern() == "mm/dd/yyyy"

    def test_pure(self):
        assert get_date_pattern("de-DE") == get_date_pattern("de-DE")

    def test_unmapped_letters_kept(self, monkeypatch):
        monkeypatch.setattr(date_parsing, "numeric_date_pattern", lambda locale: "y.M.d l")
        assert get_date_pattern("de-DE") == "yyyy.mm.dd l"


class TestValidate:
    def test_iso_like_default(self):
        assert validate("2004-8-3")
        assert validate("2000-2-29")
        assert validate("2004-08-03") == datetime(2004, 8, 3)

    def test_invalid_dates(self):
        assert validate("2001-2-29") is False
        assert validate("2004-13-03") is False
        assert validate("2004-8-32") is False
        assert validate("Zac Xu") is False

    def test_non_string(self):
        assert validate(None) is False
        assert validate(20040803) is False

    def test_too_few_groups(self):
        assert validate("2004-08") is False

    def test_oversized_digit_run(self):
        huge = "9" * 5000 + "-1-1"
        assert validate(huge) is False
        assert validate_by_locale(huge, "en-GB") is False
        assert validate_iso8601(huge) is False

    def test_trailing_groups_ignored(self):
        # only the first three digit groups are read
        assert validate("2014-04-08-dump") == parse("2014-04-08")
        assert validate("2014-04-08 99") == parse("2014-04-08")

    def test_configured_validation_locale(self, monkeypatch):
        monkeypatch.setenv("INTL_DATETIME_VALIDATION_LOCALE", "en-GB")
        assert validate("31/12/2022")
        assert validate("2022-12-31") is False


class TestValidateByLocale:
    @pytest.mark.parametrize("case", LOCALE_CASES, ids=lambda c: c.locale)
    def test_numeric_date_valid_in_own_locale(self, case):
        assert validate_by_locale(case.numeric_date, case.locale) == datetime(2004, 8, 3)

    def test_day_month_order(self):
        assert validate_by_locale("31/12/2022", "en-GB")
        assert validate_by_locale("12/31/2022", "en-GB") is False

    def test_month_day_order(self):
        assert validate_by_locale("12/31/2022", "en-US")
        assert validate_by_locale("31/12/2022", "en-US") is False

    def test_year_first_order(self):
        assert validate_by_locale("2022/12/31", "zh-CN")
        assert validate_by_locale("31/12/2022", "zh-CN") is False

    def test_validate_with_locale_matches(self):
        assert validate("12/31/2022", "en-US") == validate_by_locale("12/31/2022", "en-US")


class TestValidateIso8601:
    def test_valid(self):
        assert validate_iso8601("2004-08-03") == datetime(2004, 8, 3)
        assert validate_iso8601("2004-8-3") == datetime(2004, 8, 3)

    def test_trailing_content_rejected(self):
        assert validate_iso8601("2014-04-08-dump") is False

    def test_other_field_orders_rejected(self):
        assert validate_iso8601("03/08/2004") is False
        assert validate_iso8601("04-08-03") is False

    def test_invalid_calendar_date(self):
        assert validate_iso8601("2001-02-29") is False

    def test_non_string(self):
        assert validate_iso8601(None) is False
