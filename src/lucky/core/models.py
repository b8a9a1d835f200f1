"""Data model for profiles and fortune reports.

The report models are immutable pydantic models. Attributes are snake_case in
Python and serialize to the camelCase keys the rendering layer consumes
(``luckyTrait``, ``celebrityMatch``, ``isFallback`` ...). The same schema is
used to validate output of the remote generator before it is merged.
"""

import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from lucky.core.exceptions import InvalidInputError

CELEBRITY_MATCH_COUNT = 5

_MBTI_PATTERN = re.compile(r"^[EI][SN][TF][JP]$")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class UserProfile:
    """Profile captured at intake.

    The engine consumes it read-only and does not validate it; use
    ``UserProfile.create`` at the intake boundary.
    """

    name: str
    birth_date: str  # YYYY-MM-DD
    mbti: Optional[str] = None

    @classmethod
    def create(cls, name: str, birth_date: str, mbti: Optional[str] = None) -> "UserProfile":
        """Validate raw intake values and build a profile.

        Raises:
            InvalidInputError: empty name, non-ISO or impossible date,
                or a malformed MBTI code.
        """
        name = (name or "").strip()
        if not name:
            raise InvalidInputError("name must not be empty")

        birth_date = (birth_date or "").strip()
        # fromisoformat also takes compact and week dates on 3.11+
        if not _DATE_PATTERN.match(birth_date):
            raise InvalidInputError(f"birth date must be YYYY-MM-DD: {birth_date!r}")
        try:
            date.fromisoformat(birth_date)
        except ValueError as e:
            raise InvalidInputError(f"birth date must be YYYY-MM-DD: {birth_date!r}") from e

        code = (mbti or "").strip().upper() or None
        if code is not None and not _MBTI_PATTERN.match(code):
            raise InvalidInputError(f"not an MBTI type: {mbti!r}")

        return cls(name=name, birth_date=birth_date, mbti=code)

    @property
    def birth_parts(self) -> Tuple[int, int, int]:
        """(year, month, day) parsed from ``birth_date``."""
        year, month, day = self.birth_date.split("-")
        return int(year), int(month), int(day)


class ReportModel(BaseModel):
    """Base for report facets: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        str_strip_whitespace=True,
        str_min_length=1,
    )


class ZodiacInfo(ReportModel):
    sign: str
    lucky_trait: str
    compliment: str


class ChineseZodiacInfo(ReportModel):
    animal: str
    secret_strength: str
    compliment: str


class LifePathNumber(ReportModel):
    number: str
    meaning: str


class AstralChart(ReportModel):
    analysis: str
    planetary_influence: str
    key_aspect: str
    lucky_house: str


class TarotReading(ReportModel):
    card_name: str
    meaning: str
    advice: str


class MbtiAnalysis(ReportModel):
    type: str
    superpower: str
    social_vibe: str


class Constellation(ReportModel):
    star_name: str
    guidance: str


class LuckyItems(ReportModel):
    color: str
    number: str
    item: str


class CelebrityMatch(ReportModel):
    name: str
    desc: str
    reason: str
    romantic_vibe: str


class LuckyFood(ReportModel):
    food: str
    reason: str


class LuckyActivity(ReportModel):
    action: str
    benefit: str


class CompatibleAnimal(ReportModel):
    animal: str
    trait: str
    reason: str


class DailyMovie(ReportModel):
    title: str
    reason: str


class DailyMusic(ReportModel):
    title: str
    artist: str
    vibe: str


class FortuneResult(ReportModel):
    """Complete fortune report.

    ``is_fallback`` is True when the report was synthesized locally, False
    (or unset) when it came from the remote generator.
    """

    zodiac: ZodiacInfo
    chinese_zodiac: ChineseZodiacInfo
    astral_chart: AstralChart
    tarot: TarotReading
    mbti_analysis: MbtiAnalysis
    constellation: Constellation
    lucky_items: LuckyItems
    celebrity_match: List[CelebrityMatch] = Field(
        min_length=CELEBRITY_MATCH_COUNT, max_length=CELEBRITY_MATCH_COUNT
    )
    lucky_food: LuckyFood
    lucky_activity: LuckyActivity
    compatible_animal: CompatibleAnimal
    daily_movie: DailyMovie
    daily_music: DailyMusic
    daily_affirmation: str = Field(min_length=1)
    is_fallback: Optional[bool] = None

    @field_validator("celebrity_match")
    @classmethod
    def _distinct_celebrities(cls, matches: List[CelebrityMatch]) -> List[CelebrityMatch]:
        names = [m.name for m in matches]
        if len(set(names)) != len(names):
            raise ValueError(f"celebrity matches must be distinct: {names}")
        return matches

    @classmethod
    def from_remote(cls, payload: Dict[str, Any]) -> "FortuneResult":
        """Validate a remote payload against the report schema.

        Raises:
            pydantic.ValidationError: if any facet is missing or malformed.
        """
        return cls.model_validate(payload)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(by_alias=True, exclude_none=True)
