"""
Category suggestion from free text.

Table order is priority: the first category with a keyword present in the
text wins, and within a category keywords are tried in order.
"""

from typing import Optional

CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("餐饮", ("餐厅", "饭店", "火锅", "咖啡", "茶", "外卖", "吃", "喝")),
    ("购物", ("超市", "商店", "购物", "买")),
    ("交通", ("加油", "停车", "地铁", "公交", "出租", "滴滴", "油费")),
    ("娱乐", ("电影", "影城", "KTV", "游戏", "娱乐")),
    ("医疗", ("医院", "药店", "看病", "买药", "体检")),
    ("日用品", ("日用", "生活用品", "洗漱", "清洁")),
    ("服装", ("衣服", "鞋子", "包", "服装")),
    ("美容", ("美容", "理发", "化妆品", "护肤")),
    ("健身", ("健身", "运动", "游泳", "瑜伽")),
    ("教育", ("学费", "培训", "书籍", "教育")),
)

CATEGORY_NAMES: tuple[str, ...] = tuple(name for name, _ in CATEGORY_KEYWORDS)


def suggest_category(text: str) -> Optional[str]:
    """Return the first category whose keyword occurs in text (case-insensitive)."""
    if not text:
        return None

    text_lower = text.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword.lower() in text_lower for keyword in keywords):
            return category
    return None
