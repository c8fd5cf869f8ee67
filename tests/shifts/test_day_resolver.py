from datetime import date, datetime

from event_payroll.core.enums import DayToken
from event_payroll.shifts.days import matching_day_count


def test_weekday_range_over_one_week():
    # 2024-01-01 is a Monday
    assert matching_day_count("weekday-range", date(2024, 1, 1), date(2024, 1, 7)) == 5


def test_weekend_range_over_one_week():
    assert matching_day_count("weekend-range", date(2024, 1, 1), date(2024, 1, 7)) == 2


def test_specific_weekday_counts_each_occurrence():
    assert matching_day_count("monday", date(2024, 1, 1), date(2024, 1, 14)) == 2
    assert matching_day_count(DayToken.SUNDAY, date(2024, 1, 1), date(2024, 1, 6)) == 0


def test_legacy_tokens_are_understood():
    assert matching_day_count("lunedi", date(2024, 1, 1), date(2024, 1, 14)) == 2
    assert matching_day_count("lunedi-venerdi", date(2024, 1, 1), date(2024, 1, 7)) == 5
    assert matching_day_count("sabato-domenica", date(2024, 1, 1), date(2024, 1, 7)) == 2
    assert matching_day_count("tutti", date(2024, 1, 1), date(2024, 1, 7)) == 7


def test_all_days_uses_inclusive_span():
    assert matching_day_count("all-days", datetime(2024, 1, 1, 23, 0), datetime(2024, 1, 2, 1, 0)) == 2
    assert matching_day_count("all-days", date(2024, 1, 1), date(2024, 1, 1)) == 1


def test_unknown_token_matches_nothing():
    assert matching_day_count("funday", date(2024, 1, 1), date(2024, 1, 7)) == 0
    assert matching_day_count(None, date(2024, 1, 1), date(2024, 1, 7)) == 0


def test_day_token_parse_is_case_insensitive():
    assert DayToken.parse(" Weekday-Range ") is DayToken.WEEKDAYS
    assert DayToken.parse("Domenica") is DayToken.SUNDAY
    assert DayToken.parse("holiday") is None
