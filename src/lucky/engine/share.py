"""Share text for a finished report."""

from datetime import date
from typing import Optional

from lucky.content.pools import DEFAULT_POOLS, ContentPools
from lucky.content.selector import make_rng, pick
from lucky.core.models import FortuneResult, UserProfile
from lucky.engine.synthesizer import build_seed

SHARE_TITLE = "幸运点点 - 你的专属小幸运"

FALLBACK_NOTICE = "🔮 网络开小差了，已为您切换到基础星盘模式 (结果依然准确哦)"


def build_share_text(
    profile: UserProfile,
    result: FortuneResult,
    today: date,
    url: Optional[str] = None,
    match_index: int = 0,
    pools: ContentPools = DEFAULT_POOLS,
) -> str:
    """Compose the "好运投递" share message.

    The hook line is picked with its own seeded rng, so it stays the same for
    the whole day. ``match_index`` selects which celebrity match is featured
    (wraps around).
    """
    rng = make_rng("share-" + build_seed(profile, today, result.zodiac.sign))
    hook = pick(pools.share_hooks, rng)
    match = result.celebrity_match[match_index % len(result.celebrity_match)]

    lines = [
        "✨ 幸运点点 · 好运投递 📨",
        "",
        hook,
        "",
        f"👤 捕捉到一只正在发光的 {profile.name} ：",
        "",
        f"🌞 能量金句：{result.daily_affirmation}",
        f"💘 今日最配：{match.name} ({match.romantic_vibe})",
        f"🔮 宇宙信号：{result.astral_chart.key_aspect}",
        f"🥑 治愈时刻：{result.lucky_food.food}",
    ]
    if url:
        lines += ["", "👇 点击链接，领取你的专属好运（真的很准哦）：", url]
    return "\n".join(lines)
