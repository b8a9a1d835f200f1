"""Life path numerology."""

from typing import Dict

from lucky.core.models import LifePathNumber

MASTER_NUMBERS = (11, 22, 33)

LIFE_PATH_MEANINGS: Dict[int, str] = {
    1: "天生的开拓者，你的勇气会带你走向属于自己的舞台。",
    2: "温柔的连接者，你让身边的关系都变得和谐又温暖。",
    3: "快乐的创造者，你的表达力是送给世界的礼物。",
    4: "可靠的建造者，你一点点搭起的，都是坚固的幸福。",
    5: "自由的冒险家，新鲜的体验会不断为你带来好运。",
    6: "爱的守护者，你的关怀让每一个人都感到被珍惜。",
    7: "智慧的探索者，你的直觉和思考总能找到答案。",
    8: "丰盛的掌舵人，你的努力正在悄悄积攒成果。",
    9: "博爱的理想家，你的善意会像涟漪一样扩散开来。",
    11: "大师数字11：闪耀的灵感之光，你的直觉是宇宙的信号。",
    22: "大师数字22：梦想的建筑师，你能把远大的愿景变成现实。",
    33: "大师数字33：温暖的疗愈者，你的爱能照亮很多人。",
}

UNKNOWN_MEANING = "神秘的能量正在你身上汇聚，等待被你发现。"


def reduce_number(number: int) -> int:
    """Digit-sum until a single digit or a master number remains."""
    while number > 9 and number not in MASTER_NUMBERS:
        number = sum(int(digit) for digit in str(number))
    return number


def life_path_number(birth_date: str) -> LifePathNumber:
    """Calculate the life path number for a ``YYYY-MM-DD`` date string.

    Every decimal digit counts; separators are ignored.
    """
    total = reduce_number(sum(int(ch) for ch in birth_date if ch.isdigit()))
    return LifePathNumber(
        number=str(total),
        meaning=LIFE_PATH_MEANINGS.get(total, UNKNOWN_MEANING),
    )
