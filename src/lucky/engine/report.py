"""Fortune report generation: remote first, local fallback.

``generate_fortune_report`` never raises for a well-formed profile. With no
credential it goes straight to local synthesis; otherwise it makes one
remote attempt and falls back on any failure. Zodiac, Chinese zodiac and the
lucky number are always the locally computed values.
"""

import logging
from datetime import date
from typing import Optional

from lucky.ai.fortune import FortuneService
from lucky.config import get_settings
from lucky.core.models import FortuneResult, UserProfile
from lucky.engine.synthesizer import BirthFacts, birth_facts, synthesize_local

logger = logging.getLogger(__name__)


def merge_remote(remote: FortuneResult, facts: BirthFacts) -> FortuneResult:
    """Overwrite the deterministic facts in a remote report with local values."""
    return remote.model_copy(
        update={
            "zodiac": facts.zodiac,
            "chinese_zodiac": facts.chinese_zodiac,
            "lucky_items": remote.lucky_items.model_copy(
                update={"number": facts.life_path.number}
            ),
            "is_fallback": False,
        }
    )


async def generate_fortune_report(
    profile: UserProfile,
    today: Optional[date] = None,
    service: Optional[FortuneService] = None,
) -> FortuneResult:
    """Generate the report for ``profile`` on ``today``.

    Args:
        profile: Intake profile
        today: Calendar day; defaults to today in the configured timezone
        service: Remote generator; anything with ``is_available`` and an
            async ``generate(profile, today)`` works

    Returns:
        Remote report merged with local facts, or the local report
        (``is_fallback=True``) when remote is unavailable or fails
    """
    if today is None:
        today = get_settings().today()
    if service is None:
        service = FortuneService()

    if not service.is_available:
        logger.info("Remote generation not configured, synthesizing locally")
        return synthesize_local(profile, today)

    facts = birth_facts(profile)
    try:
        remote = await service.generate(profile, today)
    except Exception as e:
        logger.warning(f"Remote generation failed, falling back to local synthesis: {e}")
        return synthesize_local(profile, today)

    if remote.zodiac.sign != facts.zodiac.sign:
        logger.info(
            f"Remote zodiac {remote.zodiac.sign!r} replaced with {facts.zodiac.sign!r}"
        )
    return merge_remote(remote, facts)
