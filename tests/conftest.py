"""
Pytest Configuration and Fixtures

Shared fixtures for the Lucky engine tests. Remote collaborators are
replaced by small fakes; nothing here touches the network.
"""

from datetime import date
from typing import Any, Dict, List, Optional

import pytest

from lucky.core.exceptions import RemoteUnavailableError
from lucky.core.models import FortuneResult, UserProfile
from lucky.engine.synthesizer import synthesize_local


class FakeFortuneService:
    """Stands in for FortuneService: returns a canned result or raises."""

    def __init__(
        self,
        result: Optional[FortuneResult] = None,
        error: Optional[Exception] = None,
        available: bool = True,
    ):
        self.result = result
        self.error = error
        self.available = available
        self.calls: List[tuple] = []

    @property
    def is_available(self) -> bool:
        return self.available

    async def generate(self, profile: UserProfile, today: date) -> FortuneResult:
        self.calls.append((profile, today))
        if self.error is not None:
            raise self.error
        if self.result is None:
            raise RemoteUnavailableError("no canned result")
        return self.result


class FakeGeminiClient:
    """Stands in for GeminiClient with canned text responses."""

    def __init__(self, text: Optional[str] = None, available: bool = True, error: Optional[Exception] = None):
        self.text = text
        self.available = available
        self.error = error
        self.structured_calls: List[Dict[str, Any]] = []
        self.text_calls: List[Dict[str, Any]] = []

    @property
    def is_available(self) -> bool:
        return self.available

    async def generate_structured(self, **kwargs) -> Optional[str]:
        self.structured_calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.text

    async def generate_text(self, **kwargs) -> Optional[str]:
        self.text_calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(name="小明", birth_date="1990-01-28")


@pytest.fixture
def mbti_profile() -> UserProfile:
    return UserProfile(name="Alice", birth_date="2000-07-15", mbti="INFP")


@pytest.fixture
def today() -> date:
    return date(2024, 5, 1)


@pytest.fixture
def remote_payload(profile, today) -> Dict[str, Any]:
    """A schema-valid remote response with deliberately wrong astrology facts."""
    payload = synthesize_local(profile, today).to_dict()
    payload.pop("isFallback")
    payload["zodiac"] = {"sign": "狮子座", "luckyTrait": "耀眼", "compliment": "你好闪亮"}
    payload["chineseZodiac"] = {"animal": "猫", "secretStrength": "九条命", "compliment": "好可爱"}
    payload["luckyItems"] = {"color": "银色", "number": "42", "item": "月光宝盒"}
    payload["astralChart"] = {
        "analysis": "太阳拱木星为你带来源源不断的自信。",
        "planetaryInfluence": "木星正在扩张你的好运",
        "keyAspect": "太阳拱木星 (Sun Trine Jupiter)",
        "luckyHouse": "第十一宫-愿望宫",
    }
    return payload


@pytest.fixture
def remote_result(remote_payload) -> FortuneResult:
    return FortuneResult.from_remote(remote_payload)
