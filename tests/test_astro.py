"""
Tests for the astrology and numerology calculators.
"""

from datetime import date, timedelta

import pytest

from lucky.astro.numerology import MASTER_NUMBERS, life_path_number, reduce_number
from lucky.astro.zodiac import (
    ZODIAC_RANGES,
    ChineseZodiac,
    ZodiacSign,
    chinese_zodiac_for,
    zodiac_for,
    zodiac_sign_for,
)


class TestZodiac:
    """Sun sign lookup."""

    @pytest.mark.parametrize(
        "month, day, sign",
        [
            (1, 28, ZodiacSign.AQUARIUS),
            (12, 25, ZodiacSign.CAPRICORN),
            (3, 21, ZodiacSign.ARIES),
            (3, 20, ZodiacSign.PISCES),
            (1, 1, ZodiacSign.CAPRICORN),
            (1, 19, ZodiacSign.CAPRICORN),
            (1, 20, ZodiacSign.AQUARIUS),
            (2, 29, ZodiacSign.PISCES),
            (7, 23, ZodiacSign.LEO),
            (12, 31, ZodiacSign.CAPRICORN),
        ],
    )
    def test_known_dates(self, month, day, sign):
        assert zodiac_for(month, day).sign == sign
        assert zodiac_sign_for(month, day) is sign

    def test_every_day_of_leap_year_matches_exactly_one_range(self):
        """All 366 (month, day) pairs are covered with no overlap."""
        day = date(2024, 1, 1)
        while day.year == 2024:
            key = (day.month, day.day)
            matches = [s for s, start, end in ZODIAC_RANGES if start <= key <= end]
            assert len(matches) == 1, f"{key} matched {matches}"
            day += timedelta(days=1)

    def test_info_has_trait_and_compliment(self):
        info = zodiac_for(8, 1)
        assert info.sign == "狮子座"
        assert info.lucky_trait
        assert info.compliment


class TestChineseZodiac:
    """Chinese zodiac lookup and calibration."""

    @pytest.mark.parametrize(
        "year, animal",
        [
            (2000, ChineseZodiac.DRAGON),
            (2024, ChineseZodiac.DRAGON),
            (1990, ChineseZodiac.HORSE),
            (2020, ChineseZodiac.RAT),
            (2021, ChineseZodiac.OX),
            (1995, ChineseZodiac.PIG),
        ],
    )
    def test_reference_years(self, year, animal):
        assert chinese_zodiac_for(year).animal == animal

    @pytest.mark.parametrize("year", range(1900, 2100, 7))
    def test_period_is_twelve(self, year):
        assert chinese_zodiac_for(year) == chinese_zodiac_for(year + 12)

    def test_all_animals_reachable(self):
        animals = {chinese_zodiac_for(y).animal for y in range(2000, 2012)}
        assert animals == {a.value for a in ChineseZodiac}


class TestNumerology:
    """Life path number reduction."""

    def test_reference_date(self):
        # 1+9+9+0+0+1+2+8 = 30 -> 3
        result = life_path_number("1990-01-28")
        assert result.number == "3"
        assert result.meaning

    def test_master_number_not_reduced(self):
        # 2+0+0+9+0+9+0+2 = 22
        assert life_path_number("2009-09-02").number == "22"

    def test_master_number_reached_mid_reduction(self):
        # 1+9+9+9+0+9+1+9 = 47 -> 11
        assert life_path_number("1999-09-19").number == "11"

    def test_separators_ignored(self):
        assert life_path_number("1990-01-28") == life_path_number("19900128")

    def test_result_always_in_range(self):
        allowed = {str(n) for n in range(1, 10)} | {str(n) for n in MASTER_NUMBERS}
        day = date(1950, 1, 1)
        while day.year < 2030:
            assert life_path_number(day.isoformat()).number in allowed
            day += timedelta(days=37)

    def test_reduce_number(self):
        assert reduce_number(7) == 7
        assert reduce_number(29) == 11
        assert reduce_number(38) == 11
        assert reduce_number(99) == 9
        assert reduce_number(33) == 33

    def test_unmapped_value_gets_default_meaning(self):
        result = life_path_number("0000-00-00")
        assert result.number == "0"
        assert "神秘" in result.meaning
