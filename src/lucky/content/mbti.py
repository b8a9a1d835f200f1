"""MBTI personality facet tables."""

from typing import Dict, Optional, Tuple

from lucky.astro.zodiac import ZodiacSign
from lucky.core.models import MbtiAnalysis

# type -> (superpower, social vibe)
MBTI_TRAITS: Dict[str, Tuple[str, str]] = {
    "INTJ": ("看透全局的战略眼光", "安静可靠的军师，让人觉得一切尽在掌握"),
    "INTP": ("无限延展的好奇心", "有趣的脑洞制造机，聊天永远有新话题"),
    "ENTJ": ("让梦想落地的执行力", "天生的领队，跟着你就很安心"),
    "ENTP": ("点子源源不断的创造力", "派对上的灵感火花，总能逗笑所有人"),
    "INFJ": ("看见人心的洞察力", "温柔的树洞，让人愿意说出心里话"),
    "INFP": ("把平凡变成诗的想象力", "柔软的小太阳，让人感到被理解"),
    "ENFJ": ("点亮他人的感染力", "温暖的引路人，让每个人都发光"),
    "ENFP": ("感染力", "快乐小狗"),
    "ISTJ": ("说到做到的可靠", "稳稳的靠山，让人放心托付"),
    "ISFJ": ("无微不至的守护力", "贴心的暖宝宝，默默照顾所有人"),
    "ESTJ": ("把混乱变有序的组织力", "靠谱的队长，事情交给你就搞定"),
    "ESFJ": ("让大家聚在一起的凝聚力", "热情的小管家，让每个人都被照顾到"),
    "ISTP": ("化繁为简的动手能力", "酷酷的救场王，关键时刻总能搞定"),
    "ISFP": ("发现美的艺术直觉", "安静的治愈系，陪伴本身就是礼物"),
    "ESTP": ("说走就走的行动力", "气氛担当，和你在一起永远不无聊"),
    "ESFP": ("让当下闪闪发光的魅力", "快乐发射器，走到哪里笑声就到哪里"),
}

GENERIC_TRAITS: Tuple[str, str] = ("独一无二的闪光点", "让身边的人感到轻松又温暖")

# Used when the profile carries no MBTI code.
ZODIAC_DEFAULT_MBTI: Dict[ZodiacSign, str] = {
    ZodiacSign.ARIES: "ESTP",
    ZodiacSign.TAURUS: "ISFJ",
    ZodiacSign.GEMINI: "ENTP",
    ZodiacSign.CANCER: "INFJ",
    ZodiacSign.LEO: "ENFJ",
    ZodiacSign.VIRGO: "ISTJ",
    ZodiacSign.LIBRA: "ESFJ",
    ZodiacSign.SCORPIO: "INTJ",
    ZodiacSign.SAGITTARIUS: "ENFP",
    ZodiacSign.CAPRICORN: "ESTJ",
    ZodiacSign.AQUARIUS: "INTP",
    ZodiacSign.PISCES: "INFP",
}


def mbti_analysis_for(mbti: Optional[str], sign: ZodiacSign) -> MbtiAnalysis:
    """Describe the given MBTI type, or one inferred from the sun sign."""
    code = (mbti or "").strip().upper() or ZODIAC_DEFAULT_MBTI[sign]
    superpower, social_vibe = MBTI_TRAITS.get(code, GENERIC_TRAITS)
    return MbtiAnalysis(type=code, superpower=superpower, social_vibe=social_vibe)
