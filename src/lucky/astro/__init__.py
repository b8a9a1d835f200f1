"""Astrology and numerology calculators."""

from lucky.astro.zodiac import (
    ZodiacSign,
    ChineseZodiac,
    zodiac_for,
    zodiac_sign_for,
    chinese_zodiac_for,
)
from lucky.astro.numerology import life_path_number, reduce_number, MASTER_NUMBERS

__all__ = [
    "ZodiacSign",
    "ChineseZodiac",
    "zodiac_for",
    "zodiac_sign_for",
    "chinese_zodiac_for",
    "life_path_number",
    "reduce_number",
    "MASTER_NUMBERS",
]
