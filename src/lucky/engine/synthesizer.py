"""Local fortune synthesis.

Builds a complete report from the profile and the calendar day without any
I/O. The same (profile, day) always produces the same report, so a user's
fortune does not change on refresh.
"""

import logging
from dataclasses import dataclass
from datetime import date

from lucky.astro.numerology import life_path_number
from lucky.astro.zodiac import ZodiacSign, chinese_zodiac_for, zodiac_for
from lucky.content.mbti import mbti_analysis_for
from lucky.content.pools import DEFAULT_POOLS, ContentPools
from lucky.content.selector import make_rng, pick, pick_distinct
from lucky.core.models import (
    CELEBRITY_MATCH_COUNT,
    AstralChart,
    CelebrityMatch,
    ChineseZodiacInfo,
    CompatibleAnimal,
    Constellation,
    DailyMovie,
    DailyMusic,
    FortuneResult,
    LifePathNumber,
    LuckyActivity,
    LuckyFood,
    LuckyItems,
    TarotReading,
    UserProfile,
    ZodiacInfo,
)

logger = logging.getLogger(__name__)

# Local astral chart is templated, only the remote generator personalises it.
ASTRAL_ANALYSIS_TEMPLATE = (
    "{name}，你的{sign}星盘显示，此刻木星正温柔地驻留在你的第五宫（创造与快乐之宫），"
    "这为你带来了源源不断的灵感与好运。无论是表达自我还是享受生活，"
    "现在都是宇宙为你开绿灯的最佳时刻。"
)
PLANETARY_INFLUENCE = "金星正在为你加持魅力"
KEY_ASPECT = "木星拱太阳 (Jupiter Trine Sun)"
LUCKY_HOUSE = "第五宫-创造宫"


@dataclass(frozen=True)
class BirthFacts:
    """Seed-independent facts derived from the birth date."""

    zodiac: ZodiacInfo
    chinese_zodiac: ChineseZodiacInfo
    life_path: LifePathNumber

    @property
    def sign(self) -> ZodiacSign:
        return ZodiacSign(self.zodiac.sign)


def birth_facts(profile: UserProfile) -> BirthFacts:
    """Compute zodiac, Chinese zodiac and life path number for a profile."""
    year, month, day = profile.birth_parts
    return BirthFacts(
        zodiac=zodiac_for(month, day),
        chinese_zodiac=chinese_zodiac_for(year),
        life_path=life_path_number(profile.birth_date),
    )


def build_seed(profile: UserProfile, today: date, sign: str) -> str:
    """Daily seed: ``YYYY-MM-DD-<name>-<sign>``."""
    return f"{today.isoformat()}-{profile.name}-{sign}"


def synthesize_local(
    profile: UserProfile,
    today: date,
    pools: ContentPools = DEFAULT_POOLS,
) -> FortuneResult:
    """Synthesize a full report from static pools.

    Draw order is fixed: tarot, lunar mansion, food, activity, movie, music,
    color, object, animal, five distinct celebrities, affirmation. Reordering
    the draws changes every user's report for the day.
    """
    facts = birth_facts(profile)
    seed = build_seed(profile, today, facts.zodiac.sign)
    rng = make_rng(seed)

    card = pick(pools.tarot, rng)
    mansion = pick(pools.lunar_mansions, rng)
    food = pick(pools.foods, rng)
    activity = pick(pools.activities, rng)
    movie = pick(pools.movies, rng)
    song = pick(pools.music, rng)
    color = pick(pools.colors, rng)
    item = pick(pools.objects, rng)
    animal = pick(pools.animals, rng)
    celebrities = pick_distinct(pools.celebrities, CELEBRITY_MATCH_COUNT, rng)
    affirmation = pick(pools.affirmations, rng)

    logger.debug(f"Local synthesis seed={seed!r} content_version={pools.version}")

    return FortuneResult(
        zodiac=facts.zodiac,
        chinese_zodiac=facts.chinese_zodiac,
        astral_chart=AstralChart(
            analysis=ASTRAL_ANALYSIS_TEMPLATE.format(name=profile.name, sign=facts.zodiac.sign),
            planetary_influence=PLANETARY_INFLUENCE,
            key_aspect=KEY_ASPECT,
            lucky_house=LUCKY_HOUSE,
        ),
        tarot=TarotReading(card_name=card.name, meaning=card.meaning, advice=card.advice),
        mbti_analysis=mbti_analysis_for(profile.mbti, facts.sign),
        constellation=Constellation(star_name=mansion.name, guidance=mansion.guidance),
        lucky_items=LuckyItems(color=color, number=facts.life_path.number, item=item),
        celebrity_match=[
            CelebrityMatch(
                name=c.name,
                desc=c.desc,
                reason=c.reason,
                romantic_vibe=c.romantic_vibe,
            )
            for c in celebrities
        ],
        lucky_food=LuckyFood(food=food.food, reason=food.reason),
        lucky_activity=LuckyActivity(action=activity.action, benefit=activity.benefit),
        compatible_animal=CompatibleAnimal(
            animal=animal.animal, trait=animal.trait, reason=animal.reason
        ),
        daily_movie=DailyMovie(title=movie.title, reason=movie.reason),
        daily_music=DailyMusic(title=song.title, artist=song.artist, vibe=song.vibe),
        daily_affirmation=affirmation,
        is_fallback=True,
    )
