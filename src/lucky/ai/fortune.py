"""Remote fortune generation using Gemini.

Asks the model for a complete report as JSON and validates it against the
``FortuneResult`` schema. Merging with locally computed facts happens in
``lucky.engine.report``; this service only produces or rejects.
"""

import json
import logging
from datetime import date
from typing import Any, Dict, Optional

from pydantic import ValidationError

from lucky.ai.client import GeminiClient, get_gemini_client
from lucky.core.exceptions import RemoteUnavailableError
from lucky.core.models import CELEBRITY_MATCH_COUNT, FortuneResult, UserProfile

logger = logging.getLogger(__name__)


FORTUNE_SYSTEM_PROMPT = """
你是「幸运点点」(Lucky) 的好运引擎，一位专业又温柔的占星师和占卜师。

核心要求：
你必须根据用户提供的具体生日，准确计算太阳星座和生肖，不要猜测或随机。
例：生日 1990-01-28 的用户是水瓶座、属马。
分析必须结合这个生日的星盘能量与今天的能量，做到真正的个性化。

规则：
1. 绝对不要任何负面内容。没有警告，没有"坏运气"。
2. 语气：可爱、温暖、支持、安全，像最好的朋友或温柔的小精灵。
3. 语言：简体中文。
4. 如果用户没有提供 MBTI，请根据其星座特质推测一个可能的人格类型。
5. 一切都解读为"幸运点"。即使是困难相位，也要解读为"成长的机会"或"隐藏的力量"。
6. 电影和音乐推荐要贴合其星座的气质（例如巨蟹座偏温馨治愈，狮子座偏宏大励志）。
7. 幸运食物要平衡其星座元素（火/土/风/水）或符合时令。
8. 幸运行动必须简单、免费、不需要消费（例如"抬头看天空"）。
9. "明星匹配"必须生成 5 个不同的人选，选择与用户星座或气质相合的名人。
10. 星盘分析必须提到真实存在的占星相位或宫位（例如太阳拱木星、月亮在第五宫），并说明这股能量如何赋能用户。
""".strip()


def _string(description: Optional[str] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "STRING"}
    if description:
        schema["description"] = description
    return schema


def _object(**properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "OBJECT",
        "properties": properties,
        "required": list(properties),
    }


FORTUNE_RESPONSE_SCHEMA: Dict[str, Any] = _object(
    zodiac=_object(
        sign=_string("根据生日准确计算的太阳星座"),
        luckyTrait=_string("这个星座的性格优点"),
        compliment=_string("一句关于这个星座的甜甜的夸奖"),
    ),
    astralChart=_object(
        analysis=_string("50-80字的星盘深度分析，必须提到具体相位或宫位"),
        planetaryInfluence=_string("今天帮助用户的行星，例如'金星正在为你带来爱'"),
        keyAspect=_string("具体相位，例如'太阳拱木星 (Sun Trine Jupiter)'"),
        luckyHouse=_string("具体宫位，例如'第五宫-真爱宫'"),
    ),
    chineseZodiac=_object(
        animal=_string("根据出生年份准确计算的生肖"),
        secretStrength=_string(),
        compliment=_string(),
    ),
    tarot=_object(
        cardName=_string(),
        meaning=_string("严格正面的解读"),
        advice=_string("温柔、可执行的建议"),
    ),
    mbtiAnalysis=_object(
        type=_string(),
        superpower=_string("独特的认知优势"),
        socialVibe=_string("如何让别人感觉美好"),
    ),
    constellation=_object(
        starName=_string("一颗幸运星或星宿"),
        guidance=_string(),
    ),
    luckyItems=_object(
        color=_string(),
        number=_string(),
        item=_string(),
    ),
    celebrityMatch={
        "type": "ARRAY",
        "minItems": CELEBRITY_MATCH_COUNT,
        "maxItems": CELEBRITY_MATCH_COUNT,
        "items": _object(
            name=_string("名人的名字"),
            desc=_string("简短描述，例如'温柔诗人'"),
            reason=_string("从占星角度说明为什么合拍"),
            romanticVibe=_string("一个关键词，例如'灵魂伴侣'、'挚友'"),
        ),
    },
    luckyFood=_object(
        food=_string("一种具体的治愈系食物"),
        reason=_string("为什么今天它带来好运"),
    ),
    luckyActivity=_object(
        action=_string("一个简单、免费的积极行动"),
        benefit=_string("情绪或身体上的好处"),
    ),
    compatibleAnimal=_object(
        animal=_string("一种可爱的动物"),
        trait=_string("这种动物的可爱特质，例如'呆萌治愈'"),
        reason=_string("为什么今天和用户相配"),
    ),
    dailyMovie=_object(
        title=_string(),
        reason=_string("为什么这部温暖的电影适合今天"),
    ),
    dailyMusic=_object(
        title=_string(),
        artist=_string(),
        vibe=_string("这首歌带来的情绪能量"),
    ),
    dailyAffirmation=_string("一句今天的能量金句"),
)


class FortuneService:
    """Produces schema-valid fortune reports from the remote model."""

    def __init__(self, client: Optional[GeminiClient] = None):
        self._client = client or get_gemini_client()

    @property
    def is_available(self) -> bool:
        """Check if a remote credential is configured."""
        return self._client.is_available

    def build_prompt(self, profile: UserProfile, today: date) -> str:
        """Build the user prompt for one profile and day."""
        mbti = profile.mbti or "未知（请根据生日推测）"
        return (
            "用户资料：\n"
            f"名字：{profile.name}\n"
            f"生日：{profile.birth_date}\n"
            f"MBTI：{mbti}\n"
            f"今天：{today.isoformat()}\n\n"
            "任务：\n"
            f"1. 先准确计算 {profile.birth_date} 对应的太阳星座和生肖。\n"
            "2. 分析这个人今天的星象能量。\n"
            "3. 生成一个包含全面正面分析的 JSON 对象。\n\n"
            f"重要：'celebrityMatch' 必须是包含 {CELEBRITY_MATCH_COUNT} 个不同对象的数组。\n"
            "重要：'astralChart' 中要给出与此人相关的 'keyAspect'（如太阳拱木星）和 'luckyHouse'（如第十一宫）。"
        )

    async def generate(self, profile: UserProfile, today: date) -> FortuneResult:
        """Generate a report remotely, exactly one attempt.

        Raises:
            RemoteUnavailableError: no credential, no response, invalid JSON,
                or a payload that does not match the report schema.
        """
        if not self.is_available:
            raise RemoteUnavailableError("no remote credential configured")

        text = await self._client.generate_structured(
            prompt=self.build_prompt(profile, today),
            system_instruction=FORTUNE_SYSTEM_PROMPT,
            response_schema=FORTUNE_RESPONSE_SCHEMA,
        )
        if not text:
            raise RemoteUnavailableError("no data received from the remote generator")

        return self.parse_response(text)

    @staticmethod
    def parse_response(text: str) -> FortuneResult:
        """Parse and validate raw model JSON.

        Raises:
            RemoteUnavailableError: malformed JSON or schema violation.
        """
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise RemoteUnavailableError(f"remote response is not JSON: {e}") from e

        if not isinstance(payload, dict):
            raise RemoteUnavailableError(
                f"remote response is {type(payload).__name__}, expected an object"
            )

        try:
            return FortuneResult.from_remote(payload)
        except ValidationError as e:
            raise RemoteUnavailableError(
                f"remote response failed schema validation ({e.error_count()} errors)"
            ) from e
