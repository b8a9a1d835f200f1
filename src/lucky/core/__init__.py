"""Core types for the Lucky engine."""

from .exceptions import LuckyError, InvalidInputError, RemoteUnavailableError
from .models import (
    UserProfile,
    ZodiacInfo,
    ChineseZodiacInfo,
    LifePathNumber,
    CelebrityMatch,
    FortuneResult,
)

__all__ = [
    "LuckyError",
    "InvalidInputError",
    "RemoteUnavailableError",
    "UserProfile",
    "ZodiacInfo",
    "ChineseZodiacInfo",
    "LifePathNumber",
    "CelebrityMatch",
    "FortuneResult",
]
