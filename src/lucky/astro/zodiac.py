"""Western and Chinese zodiac lookups.

Both lookups are pure table functions; they never raise for a syntactically
valid date and never consult the network.
"""

from enum import Enum
from typing import Dict, List, Tuple

from lucky.core.models import ChineseZodiacInfo, ZodiacInfo


class ZodiacSign(str, Enum):
    """Sun signs, valued by their display name."""

    ARIES = "白羊座"
    TAURUS = "金牛座"
    GEMINI = "双子座"
    CANCER = "巨蟹座"
    LEO = "狮子座"
    VIRGO = "处女座"
    LIBRA = "天秤座"
    SCORPIO = "天蝎座"
    SAGITTARIUS = "射手座"
    CAPRICORN = "摩羯座"
    AQUARIUS = "水瓶座"
    PISCES = "双鱼座"


class ChineseZodiac(str, Enum):
    """Chinese zodiac animals, valued by their display name."""

    RAT = "鼠"
    OX = "牛"
    TIGER = "虎"
    RABBIT = "兔"
    DRAGON = "龙"
    SNAKE = "蛇"
    HORSE = "马"
    GOAT = "羊"
    MONKEY = "猴"
    ROOSTER = "鸡"
    DOG = "狗"
    PIG = "猪"


# (sign, (start_month, start_day), (end_month, end_day)), both ends inclusive.
# Capricorn straddles the new year and is split in two.
ZODIAC_RANGES: List[Tuple[ZodiacSign, Tuple[int, int], Tuple[int, int]]] = [
    (ZodiacSign.CAPRICORN, (1, 1), (1, 19)),
    (ZodiacSign.AQUARIUS, (1, 20), (2, 18)),
    (ZodiacSign.PISCES, (2, 19), (3, 20)),
    (ZodiacSign.ARIES, (3, 21), (4, 19)),
    (ZodiacSign.TAURUS, (4, 20), (5, 20)),
    (ZodiacSign.GEMINI, (5, 21), (6, 21)),
    (ZodiacSign.CANCER, (6, 22), (7, 22)),
    (ZodiacSign.LEO, (7, 23), (8, 22)),
    (ZodiacSign.VIRGO, (8, 23), (9, 22)),
    (ZodiacSign.LIBRA, (9, 23), (10, 23)),
    (ZodiacSign.SCORPIO, (10, 24), (11, 22)),
    (ZodiacSign.SAGITTARIUS, (11, 23), (12, 21)),
    (ZodiacSign.CAPRICORN, (12, 22), (12, 31)),
]

# sign -> (lucky trait, compliment)
ZODIAC_TRAITS: Dict[ZodiacSign, Tuple[str, str]] = {
    ZodiacSign.ARIES: ("勇往直前的小太阳", "你的热情像火花一样，总能点亮身边每一个人。"),
    ZodiacSign.TAURUS: ("稳稳的幸福感", "和你在一起，连空气都变得安心又温柔。"),
    ZodiacSign.GEMINI: ("闪闪发光的好奇心", "你的有趣灵魂让世界永远不会无聊。"),
    ZodiacSign.CANCER: ("温柔的守护力", "你的怀抱是大家最想回去的港湾。"),
    ZodiacSign.LEO: ("天生的主角光环", "你一出场，整个舞台都亮了起来。"),
    ZodiacSign.VIRGO: ("细腻的体贴", "你总能发现别人忽略的小美好，并悄悄守护它。"),
    ZodiacSign.LIBRA: ("优雅的平衡感", "你让每一个相处的瞬间都刚刚好。"),
    ZodiacSign.SCORPIO: ("深邃的洞察力", "你的真诚和专注，是世间少有的珍贵宝藏。"),
    ZodiacSign.SAGITTARIUS: ("自由自在的乐观", "你的笑声是带着风的，能吹散所有乌云。"),
    ZodiacSign.CAPRICORN: ("闪闪发光的坚持", "你一步一个脚印，未来一定会为你鼓掌。"),
    ZodiacSign.AQUARIUS: ("独一无二的灵感", "你的奇思妙想，正在悄悄改变这个世界。"),
    ZodiacSign.PISCES: ("梦幻的共情力", "你的温柔像月光，轻轻照进每个人的心里。"),
}

# Ordered by ``year % 12``: 2000 % 12 == 8 -> Dragon, 1990 % 12 == 10 -> Horse.
CHINESE_ZODIAC_TABLE: List[Tuple[ChineseZodiac, str, str]] = [
    (ChineseZodiac.MONKEY, "机灵百变的聪明劲儿", "你的点子总是又快又妙，让人忍不住为你喝彩。"),
    (ChineseZodiac.ROOSTER, "闪耀的自信", "你认真起来的样子，真的会发光。"),
    (ChineseZodiac.DOG, "无条件的真诚", "有你这样的朋友，是大家最大的幸运。"),
    (ChineseZodiac.PIG, "满满的福气", "你的善良和大方，会让好运源源不断地找上门。"),
    (ChineseZodiac.RAT, "敏锐的机遇雷达", "你总能第一个发现生活里的小惊喜。"),
    (ChineseZodiac.OX, "踏实的力量", "你的可靠，是身边人最安心的依靠。"),
    (ChineseZodiac.TIGER, "勇敢的王者气场", "你的勇气会为你打开一扇又一扇的门。"),
    (ChineseZodiac.RABBIT, "柔软的治愈力", "你的温柔能抚平所有小小的不开心。"),
    (ChineseZodiac.DRAGON, "天生好运", "你拥有改变周围气氛的神奇力量。"),
    (ChineseZodiac.SNAKE, "安静的智慧", "你的通透和优雅，让人忍不住靠近。"),
    (ChineseZodiac.HORSE, "奔腾的行动力", "你向前跑的样子，就是最好的风景。"),
    (ChineseZodiac.GOAT, "温暖的艺术感", "你让平凡的日子也变得像诗一样柔软。"),
]


def zodiac_for(month: int, day: int) -> ZodiacInfo:
    """Get the sun sign for a calendar day.

    The ranges cover all 366 (month, day) pairs, so there is no error path.
    """
    key = (month, day)
    for sign, start, end in ZODIAC_RANGES:
        if start <= key <= end:
            break
    else:
        # Unreachable for real dates; out-of-range input lands on the last range.
        sign = ZODIAC_RANGES[-1][0]

    lucky_trait, compliment = ZODIAC_TRAITS[sign]
    return ZodiacInfo(sign=sign.value, lucky_trait=lucky_trait, compliment=compliment)


def zodiac_sign_for(month: int, day: int) -> ZodiacSign:
    """Get the sign enum for a calendar day."""
    return ZodiacSign(zodiac_for(month, day).sign)


def chinese_zodiac_for(year: int) -> ChineseZodiacInfo:
    """Get the Chinese zodiac animal for a birth year.

    Year-range validation is the caller's job; any integer maps to some animal.
    """
    animal, secret_strength, compliment = CHINESE_ZODIAC_TABLE[year % 12]
    return ChineseZodiacInfo(
        animal=animal.value,
        secret_strength=secret_strength,
        compliment=compliment,
    )
