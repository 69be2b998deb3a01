"""Tests for the trigger predicate — time fields and OR/AND day matching."""

from __future__ import annotations

from datetime import datetime

import pytest

from minicron.core.expression import parse, trigger

# 2024-01-01 is a Monday
MON_1ST = datetime(2024, 1, 1, 4, 30)
TUE_2ND = datetime(2024, 1, 2, 4, 30)
FRI_5TH = datetime(2024, 1, 5, 4, 30)
SUN_7TH = datetime(2024, 1, 7, 4, 30)
MON_15TH = datetime(2024, 1, 15, 4, 30)


class TestTimeFields:
    def test_every_minute_fires_always(self) -> None:
        expr = parse("* * * * *")
        for dt in (MON_1ST, TUE_2ND, SUN_7TH, datetime(2023, 12, 31, 23, 59, 59)):
            assert trigger(expr, dt)

    def test_minute_and_hour_must_match(self) -> None:
        expr = parse("30 4 * * *")
        assert expr.trigger(TUE_2ND)
        assert not expr.trigger(TUE_2ND.replace(minute=31))
        assert not expr.trigger(TUE_2ND.replace(hour=5))

    def test_seconds_are_ignored(self) -> None:
        assert parse("30 4 * * *").trigger(TUE_2ND.replace(second=42))

    def test_step_minutes(self) -> None:
        expr = parse("*/15 * * * *")
        assert expr.trigger(TUE_2ND.replace(minute=45))
        assert not expr.trigger(TUE_2ND.replace(minute=50))

    def test_numeric_month(self) -> None:
        expr = parse("* * * 3 *")
        assert expr.trigger(datetime(2024, 3, 10, 12, 0))
        assert not expr.trigger(datetime(2024, 4, 10, 12, 0))

    @pytest.mark.parametrize("month", ["jan", "JAN", "1"])
    def test_january_by_keyword_or_number(self, month: str) -> None:
        expr = parse(f"* * * {month} *")
        assert expr.trigger(datetime(2024, 1, 10, 12, 0))
        assert not expr.trigger(datetime(2024, 2, 10, 12, 0))

    def test_shortcut_hourly(self) -> None:
        expr = parse("@hourly")
        assert expr.trigger(datetime(2024, 6, 3, 17, 0))
        assert not expr.trigger(datetime(2024, 6, 3, 17, 1))


class TestDayFields:
    def test_or_mode_when_both_day_fields_restricted(self) -> None:
        expr = parse("30 4 1,15 * 5")
        assert expr.day_match_or
        assert expr.trigger(MON_1ST)  # date match, not a Friday
        assert expr.trigger(MON_15TH)
        assert expr.trigger(FRI_5TH)  # Friday, not 1st/15th
        assert not expr.trigger(TUE_2ND)
        assert not expr.trigger(FRI_5TH.replace(minute=31))

    def test_or_mode_with_keywords_and_month(self) -> None:
        expr = parse("32 18 17,21,29 11 mon,wed")
        assert expr.trigger(datetime(2024, 11, 17, 18, 32))  # Sunday the 17th
        assert expr.trigger(datetime(2024, 11, 4, 18, 32))  # Monday
        assert expr.trigger(datetime(2024, 11, 6, 18, 32))  # Wednesday
        assert not expr.trigger(datetime(2024, 11, 5, 18, 32))  # Tuesday
        assert not expr.trigger(datetime(2024, 12, 2, 18, 32))  # Monday in December

    def test_and_mode_weekday_only(self) -> None:
        expr = parse("30 4 * * 1")
        assert not expr.day_match_or
        assert expr.trigger(MON_1ST)
        assert expr.trigger(MON_15TH)
        assert not expr.trigger(TUE_2ND)

    def test_and_mode_day_of_month_only(self) -> None:
        expr = parse("30 4 15 * *")
        assert expr.trigger(MON_15TH)
        assert not expr.trigger(MON_1ST)

    @pytest.mark.parametrize("dow", ["0", "7", "sun", "SUN"])
    def test_sunday_spellings(self, dow: str) -> None:
        expr = parse(f"30 4 * * {dow}")
        assert expr.trigger(SUN_7TH)
        assert not expr.trigger(MON_1ST)

    def test_weekly_fires_sunday_midnight(self) -> None:
        expr = parse("@weekly")
        assert expr.trigger(datetime(2024, 1, 7, 0, 0))
        assert not expr.trigger(datetime(2024, 1, 8, 0, 0))

    def test_weekday_range_keyword_list(self) -> None:
        expr = parse("0 9 * * mon,tue,wed,thu,fri")
        assert expr.trigger(datetime(2024, 1, 5, 9, 0))
        assert not expr.trigger(datetime(2024, 1, 6, 9, 0))
