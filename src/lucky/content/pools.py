"""Curated content pools for local fortune synthesis.

Every pool is an ordered, immutable tuple of display records. Order is part of
the data: changing it changes which entry a given seed selects, so bump
``CONTENT_VERSION`` whenever a pool is edited.
"""

from dataclasses import dataclass
from typing import Tuple

CONTENT_VERSION = 4


@dataclass(frozen=True)
class TarotCard:
    name: str
    meaning: str
    advice: str


@dataclass(frozen=True)
class LunarMansion:
    name: str
    guidance: str


@dataclass(frozen=True)
class Food:
    food: str
    reason: str


@dataclass(frozen=True)
class Activity:
    action: str
    benefit: str


@dataclass(frozen=True)
class Movie:
    title: str
    reason: str


@dataclass(frozen=True)
class Song:
    title: str
    artist: str
    vibe: str


@dataclass(frozen=True)
class SpiritAnimal:
    animal: str
    trait: str
    reason: str


@dataclass(frozen=True)
class Celebrity:
    name: str
    desc: str
    reason: str
    romantic_vibe: str


# =============================================================================
# TAROT - the 22 major arcana, upright and strictly positive
# =============================================================================

TAROT: Tuple[TarotCard, ...] = (
    TarotCard("愚者 (The Fool)", "崭新的开始，纯真的勇气正在为你开路", "大胆迈出第一步，宇宙会接住你。"),
    TarotCard("魔术师 (The Magician)", "你拥有实现愿望所需的一切资源", "相信自己的双手，今天就动手创造吧。"),
    TarotCard("女祭司 (The High Priestess)", "内在的智慧与直觉正在苏醒", "安静下来，听听心里最温柔的声音。"),
    TarotCard("皇后 (The Empress)", "丰盛、滋养与美好正围绕着你", "好好照顾自己，你值得被温柔以待。"),
    TarotCard("皇帝 (The Emperor)", "稳定的力量与清晰的方向", "为自己定一个小目标，你一定能做到。"),
    TarotCard("教皇 (The Hierophant)", "来自智者的指引与温暖的传承", "向信任的人请教，会有意想不到的收获。"),
    TarotCard("恋人 (The Lovers)", "真诚的连接与和谐的选择", "跟随内心做选择，爱会给你答案。"),
    TarotCard("战车 (The Chariot)", "意志坚定，胜利就在前方", "保持专注，一路向前冲吧！"),
    TarotCard("力量 (Strength)", "温柔而坚韧的内在力量", "用温柔代替用力，你会发现一切都变简单了。"),
    TarotCard("隐士 (The Hermit)", "独处带来的光亮与觉察", "给自己一点安静的时间，灵感会悄悄降临。"),
    TarotCard("命运之轮 (Wheel of Fortune)", "好运的齿轮正在为你转动", "抓住今天出现的小机会，它会带来大惊喜。"),
    TarotCard("正义 (Justice)", "平衡与公正，付出终将得到回报", "做你认为对的事，宇宙都看在眼里。"),
    TarotCard("倒吊人 (The Hanged Man)", "换个角度，世界豁然开朗", "放慢脚步，从新的视角看看生活吧。"),
    TarotCard("转变 (Death)", "旧的篇章温柔落幕，新的美好即将开启", "放下不再需要的东西，为好运腾出位置。"),
    TarotCard("节制 (Temperance)", "恰到好处的平衡与疗愈", "今天适合慢慢来，一切都会刚刚好。"),
    TarotCard("恶魔 (The Devil)", "认清束缚，就是获得自由的开始", "对自己诚实一点，你比想象中更自由。"),
    TarotCard("高塔 (The Tower)", "突破旧框架，迎来焕然一新的自己", "拥抱变化，惊喜往往藏在意外之后。"),
    TarotCard("星星 (The Star)", "希望、疗愈与闪闪发光的愿望", "许一个愿吧，星星正在倾听。"),
    TarotCard("月亮 (The Moon)", "想象力与直觉在夜里开花", "相信你的感觉，它会带你找到答案。"),
    TarotCard("太阳 (The Sun)", "纯粹的快乐与成功", "大胆去展示你自己吧！"),
    TarotCard("审判 (Judgement)", "觉醒与重生，你听见了内心的召唤", "回应心里的那个声音，它一直在等你。"),
    TarotCard("世界 (The World)", "圆满与完成，全世界都在为你庆祝", "为自己的一路成长鼓个掌吧。"),
)


# =============================================================================
# LUNAR MANSIONS - the 28 xiu, in traditional order
# =============================================================================

LUNAR_MANSIONS: Tuple[LunarMansion, ...] = (
    LunarMansion("角宿", "东方苍龙的龙角闪耀，今天适合开启新计划。"),
    LunarMansion("亢宿", "龙颈昂扬，你的坚持会被看见。"),
    LunarMansion("氐宿", "稳稳扎根，好运从脚下慢慢生长。"),
    LunarMansion("房宿", "温暖的星光守护着你的小家。"),
    LunarMansion("心宿", "心之所向，便是光芒所在。"),
    LunarMansion("尾宿", "好运像龙尾一样轻轻摇摆着靠近你。"),
    LunarMansion("箕宿", "清风吹来新消息，记得留意身边的好事。"),
    LunarMansion("斗宿", "南斗星辉照耀，你的努力正在积累福气。"),
    LunarMansion("牛宿", "踏实前行，丰收就在不远处。"),
    LunarMansion("女宿", "细腻的心思会为你编织出美好的缘分。"),
    LunarMansion("虚宿", "留一点空白给自己，灵感会自己找上门。"),
    LunarMansion("危宿", "站得高看得远，今天的你格外清醒通透。"),
    LunarMansion("室宿", "星光照亮你的房间，家是最温暖的能量站。"),
    LunarMansion("壁宿", "书香与智慧相伴，适合学点新东西。"),
    LunarMansion("奎宿", "文曲之光落在你身上，表达会特别顺利。"),
    LunarMansion("娄宿", "收获的季节，你付出的都会回来。"),
    LunarMansion("胃宿", "好好吃饭，满满的元气就是最大的好运。"),
    LunarMansion("昴宿", "七姊妹星团眨着眼睛，朋友会带来快乐。"),
    LunarMansion("毕宿", "细雨润物，温柔的坚持会开出花来。"),
    LunarMansion("觜宿", "小小的星光也很耀眼，别小看你的每一步。"),
    LunarMansion("参宿", "猎户的腰带闪亮，今天的你勇气满满。"),
    LunarMansion("井宿", "源源不断的清泉，象征你用不完的灵感。"),
    LunarMansion("鬼宿", "神秘的星光守护，直觉会为你指路。"),
    LunarMansion("柳宿", "像柳枝一样柔软，也像柳枝一样充满生机。"),
    LunarMansion("星宿", "满天星辰都在为你点亮前行的路。"),
    LunarMansion("张宿", "张开双臂，拥抱今天的每一份惊喜。"),
    LunarMansion("翼宿", "朱雀展翼，你的梦想正在起飞。"),
    LunarMansion("轸宿", "星车启程，好运正载着你驶向远方。"),
)


# =============================================================================
# DAILY PICKS
# =============================================================================

FOODS: Tuple[Food, ...] = (
    Food("热燕麦粥", "温暖的谷物香气能抚平内心的褶皱。"),
    Food("草莓大福", "软糯香甜，像被生活轻轻抱了一下。"),
    Food("番茄炒蛋", "最家常的味道，藏着最踏实的幸福。"),
    Food("桂花酒酿圆子", "一口下去，甜蜜和好运一起滚进心里。"),
    Food("牛油果吐司", "满满的能量，让你元气一整天。"),
    Food("热可可", "暖暖的巧克力香，能融化所有小疲惫。"),
    Food("小笼包", "皮薄汁多，幸福就在咬开的那一瞬间。"),
    Food("芒果西米露", "清甜的阳光味道，让心情跟着亮起来。"),
    Food("烤红薯", "朴素又香甜，提醒你简单就是美好。"),
    Food("蜂蜜柚子茶", "酸酸甜甜，给今天加一点清爽的好运。"),
    Food("鲜虾馄饨", "一碗热汤下肚，整个人都被治愈了。"),
    Food("抹茶冰淇淋", "微苦回甘，像所有努力终会变甜。"),
    Food("糖炒栗子", "捧在手心的温暖，是冬日里的小确幸。"),
    Food("水果酸奶碗", "五颜六色的元气，唤醒满满活力。"),
    Food("葱油拌面", "香气扑鼻的简单快乐，值得好好享受。"),
    Food("蛋挞", "酥脆外皮包着柔软的心，就像温柔的你。"),
    Food("银耳莲子羹", "润润的甜汤，滋养身体也滋养心情。"),
    Food("饭团", "把好运紧紧捏在一起，一口一个满足。"),
    Food("奶黄包", "金灿灿的内馅，象征今天的好运满满。"),
    Food("清蒸鱼", "年年有余，好运源源不断。"),
    Food("菠萝包", "外皮酥甜，笑容也会跟着变甜。"),
    Food("南瓜汤", "暖黄色的温柔，让心安定下来。"),
    Food("手冲咖啡", "一杯香气，为你的灵感充满电。"),
    Food("汤圆", "圆圆满满，今天的一切都会顺顺利利。"),
)

ACTIVITIES: Tuple[Activity, ...] = (
    Activity("抬头看云", "在云朵的变幻中感受自由和轻松。"),
    Activity("给老朋友发一条问候", "一句简单的问候，会换回满满的温暖。"),
    Activity("散步二十分钟", "让脚步带走烦恼，让风吹来灵感。"),
    Activity("写下三件感恩的小事", "感恩会让好运越来越多。"),
    Activity("晒十分钟太阳", "阳光是宇宙免费发放的快乐能量。"),
    Activity("听一首喜欢的歌", "音乐会帮你把心情调到最舒服的频道。"),
    Activity("整理书桌", "清爽的空间会为好运腾出位置。"),
    Activity("对镜子里的自己微笑", "你的笑容是今天最好的护身符。"),
    Activity("伸个大大的懒腰", "舒展身体，也舒展心情。"),
    Activity("给植物浇水", "看着生命慢慢生长，内心也会变得柔软。"),
    Activity("早睡半小时", "好好休息，明天的你会更闪亮。"),
    Activity("拍一张天空的照片", "记录今天的美好，它会成为未来的小惊喜。"),
    Activity("深呼吸十次", "每一次呼吸都在为身体充满好运。"),
    Activity("读几页喜欢的书", "文字会带你去一个温柔的世界。"),
    Activity("给家人一个拥抱", "拥抱能让幸福感加倍。"),
    Activity("夸奖一个身边的人", "善意会绕一圈，再回到你身边。"),
    Activity("在纸上随手涂鸦", "放松的笔触会唤醒你的创造力。"),
    Activity("慢慢喝一杯温水", "简单的照顾，是对自己最好的爱。"),
    Activity("去公园看看小狗", "毛茸茸的快乐最治愈。"),
    Activity("安静地看一次日落", "温柔的晚霞会告诉你：今天你已经很棒了。"),
    Activity("换一条路回家", "小小的改变会带来新鲜的发现。"),
    Activity("哼一首小时候的歌", "童年的旋律能唤醒最纯粹的快乐。"),
    Activity("给自己写一张小纸条", "未来的你会被今天的温柔打动。"),
    Activity("把手机静音半小时", "和自己独处，是最奢侈的充电。"),
)

MOVIES: Tuple[Movie, ...] = (
    Movie("普罗旺斯的夏天", "感受阳光与亲情的治愈力量。"),
    Movie("千与千寻", "勇气和善良会带你穿过所有迷雾。"),
    Movie("龙猫", "最纯真的快乐，就藏在雨天的等待里。"),
    Movie("天使爱美丽", "用小小的善意点亮世界，就像你一样。"),
    Movie("寻梦环游记", "被爱记住的人，永远闪闪发光。"),
    Movie("怦然心动", "有些人浅薄，有些人金玉其外，而你是彩虹般绚丽的存在。"),
    Movie("海蒂和爷爷", "山野的风和纯净的心，最能治愈疲惫。"),
    Movie("小森林", "好好吃饭，好好生活，就是最大的幸福。"),
    Movie("帕丁顿熊", "礼貌和善良，总能打动所有人。"),
    Movie("白日梦想家", "勇敢跨出一步，世界会比想象更辽阔。"),
    Movie("触不可及", "真诚的友谊能跨越一切不同。"),
    Movie("魔女宅急便", "每个人都会遇到低谷，而你的魔法从未消失。"),
    Movie("头脑特工队", "每一种情绪都值得被拥抱。"),
    Movie("海洋奇缘", "心中的声音会带你找到真正的自己。"),
    Movie("心灵奇旅", "生活本身，就是最值得期待的火花。"),
    Movie("布达佩斯大饭店", "优雅与幽默，是面对生活最好的姿态。"),
    Movie("飞屋环游记", "冒险不在远方，就在每个平凡的日子里。"),
    Movie("疯狂动物城", "每个人都可以成为任何想成为的样子。"),
    Movie("奇迹男孩", "善良是一种选择，而你一直在选择它。"),
    Movie("哈尔的移动城堡", "被爱的人会变得勇敢又美丽。"),
    Movie("请以你的名字呼唤我", "夏日的光影里，藏着最温柔的心动。"),
    Movie("小妇人", "每一种人生都值得被认真书写。"),
    Movie("熊出没·原始时代", "热闹又温暖，笑着笑着就充满了电。"),
    Movie("美食总动员", "任何人都可以烹饪，任何梦想都值得坚持。"),
)

MUSIC: Tuple[Song, ...] = (
    Song("Happy", "Pharrell Williams", "把快乐因子注入每一个细胞。"),
    Song("晴天", "周杰伦", "熟悉的旋律会把你带回最明亮的午后。"),
    Song("小幸运", "田馥甄", "原来你是我最想留住的幸运。"),
    Song("Here Comes the Sun", "The Beatles", "太阳出来了，一切都会好起来。"),
    Song("Lemon", "米津玄师", "温柔的旋律，让回忆都变得闪闪发光。"),
    Song("Walking on Sunshine", "Katrina and the Waves", "走在阳光里，连脚步都变轻快了。"),
    Song("稻香", "周杰伦", "回到最初的美好，幸福其实很简单。"),
    Song("Count on Me", "Bruno Mars", "你永远不会孤单，总有人在身边。"),
    Song("平凡之路", "朴树", "平凡的每一步，都是闪光的旅程。"),
    Song("Dynamite", "BTS", "点燃今天的快乐能量，闪耀全场。"),
    Song("Lovely Day", "Bill Withers", "只要想到美好的事，今天就是可爱的一天。"),
    Song("追光者", "岑宁儿", "你就是自己的那束光。"),
    Song("Shake It Off", "Taylor Swift", "甩掉烦恼，做最自在的自己。"),
    Song("起风了", "买辣椒也用券", "风起的时候，也是梦想起飞的时候。"),
    Song("What a Wonderful World", "Louis Armstrong", "世界真美好，而你是其中最美的风景。"),
    Song("孤勇者", "陈奕迅", "你的勇敢，值得所有人鼓掌。"),
    Song("Good Day", "IU", "清亮的歌声，为你的一天开个好头。"),
    Song("后来的我们", "五月天", "所有的遇见，都是为了更好的自己。"),
    Song("Best Day of My Life", "American Authors", "也许今天就是你人生中最棒的一天。"),
    Song("微微", "傅如乔", "轻快的节奏，让嘴角忍不住上扬。"),
    Song("Don't Worry Be Happy", "Bobby McFerrin", "别担心，快乐起来就好。"),
    Song("夜空中最亮的星", "逃跑计划", "你就是那颗指引方向的星星。"),
    Song("Sunflower", "Post Malone & Swae Lee", "像向日葵一样，永远朝着阳光。"),
    Song("送你一朵小红花", "赵英俊", "奖励一下认真生活的你。"),
)

COLORS: Tuple[str, ...] = (
    "金色",
    "奶油白",
    "樱花粉",
    "薄荷绿",
    "天空蓝",
    "橘子橙",
    "薰衣草紫",
    "柠檬黄",
    "珊瑚红",
    "雾霾蓝",
    "森林绿",
    "香槟色",
    "蜜桃色",
    "宝石蓝",
    "燕麦色",
    "玫瑰金",
)

OBJECTS: Tuple[str, ...] = (
    "向日葵",
    "四叶草书签",
    "小铃铛",
    "星星发夹",
    "红绳手链",
    "月亮吊坠",
    "香薰蜡烛",
    "马克杯",
    "帆布包",
    "玻璃弹珠",
    "幸运硬币",
    "手写信",
    "小熊玩偶",
    "彩色铅笔",
    "水晶手串",
    "小雏菊",
)

ANIMALS: Tuple[SpiritAnimal, ...] = (
    SpiritAnimal("水豚", "情绪稳定", "今天的你拥有让人安心的治愈磁场。"),
    SpiritAnimal("柯基", "元气满满", "你的活力像小短腿一样停不下来。"),
    SpiritAnimal("小熊猫", "软萌可爱", "你不经意的小动作总能萌化所有人。"),
    SpiritAnimal("海獭", "手牵手睡觉", "你懂得珍惜身边的每一份陪伴。"),
    SpiritAnimal("企鹅", "认真努力", "一步一摇也要坚定向前，就像你。"),
    SpiritAnimal("小兔子", "温柔敏感", "你细腻的心能感受到别人的情绪。"),
    SpiritAnimal("猫咪", "优雅自在", "你懂得照顾好自己，也懂得享受生活。"),
    SpiritAnimal("树懒", "慢慢来", "今天适合放慢节奏，一切都来得及。"),
    SpiritAnimal("柴犬", "微笑天使", "你的笑容有让人瞬间开心的魔力。"),
    SpiritAnimal("仓鼠", "囤积快乐", "你总能从小事里收集到满满的幸福。"),
    SpiritAnimal("考拉", "抱抱治愈", "你的拥抱是别人最需要的温暖。"),
    SpiritAnimal("小鹿", "灵动纯真", "你眼里有光，心里有森林。"),
    SpiritAnimal("海豚", "聪明友善", "你的善意和聪明会带来好运的浪花。"),
    SpiritAnimal("羊驼", "呆萌治愈", "你的松弛感是今天最大的超能力。"),
    SpiritAnimal("鹦鹉", "能说会道", "今天的你表达力满分，说什么都动听。"),
    SpiritAnimal("刺猬", "外刚内柔", "你的坚强背后，藏着最柔软的心。"),
)

CELEBRITIES: Tuple[Celebrity, ...] = (
    Celebrity("奥黛丽·赫本", "优雅的灵魂", "你们都拥有一颗温暖善良的心，能发现生活细微处的美好。", "灵魂共鸣"),
    Celebrity("小王子", "B612星球的旅人", "你们都保持着纯真的童心，能看懂大人看不懂的事情。", "纯真守护"),
    Celebrity("周杰伦", "音乐才子", "你们的感性频率一致，都能在旋律中找到最深的情感。", "浪漫听众"),
    Celebrity("宫崎骏", "造梦师", "你们都相信魔法的存在，愿意温柔地对待这个世界。", "梦想伙伴"),
    Celebrity("林黛玉", "世外仙姝", "你们拥有同样细腻的感知力，能读懂风的语言。", "知己"),
    Celebrity("苏东坡", "乐天派诗人", "你们都能在平凡日子里找到诗意和美食。", "人生搭子"),
    Celebrity("泰勒·斯威夫特", "创作型歌手", "你们都擅长把心事写成动人的故事。", "闺蜜级默契"),
    Celebrity("李白", "浪漫诗仙", "你们都有一颗向往自由、仰望星空的心。", "星空知音"),
    Celebrity("易烊千玺", "安静的少年", "你们都用沉稳和努力默默发光。", "温柔守望"),
    Celebrity("哈利·波特", "勇敢的巫师", "你们都相信友情和勇气能战胜一切。", "冒险搭档"),
    Celebrity("刘亦菲", "神仙姐姐", "你们身上都有一种不染尘埃的清澈感。", "仙气相投"),
    Celebrity("孙悟空", "齐天大圣", "你们都有打破常规、守护所爱的勇气。", "热血伙伴"),
    Celebrity("梵高", "星空画家", "你们都能看见世界上别人看不见的色彩。", "灵感缪斯"),
    Celebrity("王一博", "酷盖少年", "你们都对热爱的事情全力以赴。", "并肩追梦"),
    Celebrity("龙猫", "森林守护者", "你们都能给身边的人带来安心的拥抱。", "治愈系伙伴"),
    Celebrity("杨绛", "温润的学者", "你们都懂得在岁月里保持从容与温柔。", "灵魂导师"),
    Celebrity("蜡笔小新", "快乐小孩", "你们都能把普通的一天过得妙趣横生。", "开心果"),
    Celebrity("爱因斯坦", "好奇的天才", "你们都对世界充满无穷的好奇心。", "思想共振"),
    Celebrity("张国荣", "风华绝代", "你们都拥有真诚而独特的魅力。", "心动瞬间"),
    Celebrity("赫敏·格兰杰", "聪明的女巫", "你们都相信努力和知识是最强的魔法。", "学霸同盟"),
    Celebrity("新垣结衣", "治愈系笑容", "你们的笑容都能让人瞬间放松下来。", "阳光恋人"),
    Celebrity("海绵宝宝", "比奇堡乐天派", "你们都能用乐观感染身边的每一个人。", "快乐搭子"),
    Celebrity("王菲", "天籁女神", "你们都活得通透自在，不被外界定义。", "自由灵魂"),
    Celebrity("彼得·潘", "永不长大的少年", "你们都守护着心里那个爱做梦的小孩。", "童心同盟"),
)

AFFIRMATIONS: Tuple[str, ...] = (
    "我值得拥有这世间所有的美好。",
    "今天的我，正在一点点变成更好的自己。",
    "我是被宇宙偏爱的小孩。",
    "所有的好运都在奔向我的路上。",
    "我温柔、勇敢，而且闪闪发光。",
    "我允许自己慢慢来，一切都来得及。",
    "我的存在本身，就是一份礼物。",
    "今天，我选择快乐。",
    "我有能力让平凡的日子变得特别。",
    "我被爱着，也有能力去爱。",
    "我相信自己的直觉，它会带我去对的地方。",
    "每一个今天，都是崭新的开始。",
    "我的努力正在悄悄开花。",
    "我已经足够好了，而且还会更好。",
    "我拥抱所有的可能性。",
    "我是自己最好的朋友。",
    "今天的阳光，是专门为我而来的。",
    "我把烦恼交给风，把快乐留给自己。",
    "我的心里住着一整片星空。",
    "我正在成为我想成为的人。",
)

SHARE_HOOKS: Tuple[str, ...] = (
    "你今天的运气好像开了挂！🚀",
    "全宇宙的星星都在为你眨眼睛 ✨",
    "检测到你的快乐指数正在飙升 📈",
    "今日运势：宜快乐，宜暴富，宜被爱 💖",
    "这是什么神仙运气呀？😍",
    "快来看，这里有一份满分好运试卷 💯",
    "滴！你有一份来自宇宙的快递请查收 📦",
    "没想到吧，好运竟然藏在这里！🎉",
)


@dataclass(frozen=True)
class ContentPools:
    """One versioned bundle of every pool the synthesizer draws from."""

    tarot: Tuple[TarotCard, ...] = TAROT
    lunar_mansions: Tuple[LunarMansion, ...] = LUNAR_MANSIONS
    foods: Tuple[Food, ...] = FOODS
    activities: Tuple[Activity, ...] = ACTIVITIES
    movies: Tuple[Movie, ...] = MOVIES
    music: Tuple[Song, ...] = MUSIC
    colors: Tuple[str, ...] = COLORS
    objects: Tuple[str, ...] = OBJECTS
    animals: Tuple[SpiritAnimal, ...] = ANIMALS
    celebrities: Tuple[Celebrity, ...] = CELEBRITIES
    affirmations: Tuple[str, ...] = AFFIRMATIONS
    share_hooks: Tuple[str, ...] = SHARE_HOOKS
    version: int = CONTENT_VERSION


DEFAULT_POOLS = ContentPools()
