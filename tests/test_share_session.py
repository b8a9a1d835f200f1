"""
Tests for share text and the session cache.
"""

from typing import Optional, get_type_hints

import pytest

from conftest import FakeFortuneService
from lucky.ai.fortune import FortuneService
from lucky.content.pools import SHARE_HOOKS
from lucky.engine.session import FortuneSession
from lucky.engine.share import build_share_text
from lucky.engine.synthesizer import synthesize_local


class TestShareText:
    """Share message composition."""

    def test_contents(self, profile, today):
        result = synthesize_local(profile, today)
        text = build_share_text(profile, result, today)
        lines = text.split("\n")

        assert lines[0] == "✨ 幸运点点 · 好运投递 📨"
        assert lines[2] in SHARE_HOOKS
        assert profile.name in text
        assert result.daily_affirmation in text
        assert result.celebrity_match[0].name in text
        assert result.astral_chart.key_aspect in text
        assert result.lucky_food.food in text

    def test_stable_for_the_day(self, profile, today):
        result = synthesize_local(profile, today)
        assert build_share_text(profile, result, today) == build_share_text(profile, result, today)

    def test_url_appended(self, profile, today):
        result = synthesize_local(profile, today)
        text = build_share_text(profile, result, today, url="https://lucky.example")
        assert text.endswith("https://lucky.example")

    def test_no_url(self, profile, today):
        result = synthesize_local(profile, today)
        assert "👇" not in build_share_text(profile, result, today)

    def test_match_index_wraps(self, profile, today):
        result = synthesize_local(profile, today)
        text = build_share_text(profile, result, today, match_index=6)
        assert result.celebrity_match[1].name in text


class TestFortuneSession:
    """One report per session."""

    @pytest.mark.asyncio
    async def test_requires_profile(self, today):
        session = FortuneSession(service=FakeFortuneService(available=False))
        with pytest.raises(RuntimeError):
            await session.get_fortune(today)

    @pytest.mark.asyncio
    async def test_generated_once(self, profile, today, remote_result):
        service = FakeFortuneService(result=remote_result)
        session = FortuneSession(service=service)
        session.start(profile)

        first = await session.get_fortune(today)
        second = await session.get_fortune(today)

        assert first is second
        assert len(service.calls) == 1

    @pytest.mark.asyncio
    async def test_start_clears_previous_report(self, profile, mbti_profile, today):
        session = FortuneSession(service=FakeFortuneService(available=False))
        session.start(profile)
        first = await session.get_fortune(today)

        session.start(mbti_profile)
        second = await session.get_fortune(today)

        assert first.zodiac != second.zodiac

    @pytest.mark.asyncio
    async def test_reset(self, profile, today):
        session = FortuneSession(service=FakeFortuneService(available=False))
        session.start(profile)
        await session.get_fortune(today)

        session.reset()

        assert session.profile is None
        assert session.fortune is None

    def test_service_parameter_typed(self):
        hints = get_type_hints(FortuneSession.__init__)
        assert hints["service"] == Optional[FortuneService]
