"""卡牌系统模块
定义八种卡牌、标准牌堆构成和牌堆类
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from enum import Enum
from functools import total_ordering
from typing import Any, Protocol

from .exceptions import ConfigurationError
from .i18n import card_name

logger = logging.getLogger(__name__)


@total_ordering
class Card(Enum):
    """卡牌枚举，值即点数（1-8）"""

    GUARD = 1  # 卫兵
    PRIEST = 2  # 牧师
    BARON = 3  # 男爵
    HANDMAID = 4  # 侍女
    PRINCE = 5  # 王子
    KING = 6  # 国王
    COUNTESS = 7  # 伯爵夫人
    PRINCESS = 8  # 公主

    @property
    def rank(self) -> int:
        """点数"""
        return self.value

    @property
    def requires_target(self) -> bool:
        """效果是否需要指定目标"""
        return self in _TARGETED_CARDS

    @property
    def display_name(self) -> str:
        """获取本地化显示名称"""
        return card_name(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return self.display_name

    @classmethod
    def from_value(cls, value: Any) -> Card:
        """从卡牌、点数或名称（不区分大小写）解析卡牌"""
        if isinstance(value, Card):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().upper()
            if key.isdigit():
                return cls(int(key))
            try:
                return cls[key]
            except KeyError:
                raise ValueError(f"Unknown card: {value!r}") from None
        raise ValueError(f"Unknown card: {value!r}")


_TARGETED_CARDS = frozenset({Card.GUARD, Card.PRIEST, Card.BARON, Card.PRINCE, Card.KING})


# 标准牌堆构成（共 16 张）
DECK_COMPOSITION: dict[Card, int] = {
    Card.GUARD: 5,
    Card.PRIEST: 2,
    Card.BARON: 2,
    Card.HANDMAID: 2,
    Card.PRINCE: 2,
    Card.KING: 1,
    Card.COUNTESS: 1,
    Card.PRINCESS: 1,
}

DECK_SIZE = sum(DECK_COMPOSITION.values())


def canonical_cards() -> list[Card]:
    """按点数升序返回标准 16 张牌"""
    return [card for card, count in DECK_COMPOSITION.items() for _ in range(count)]


def validate_composition(cards: Iterable[Card]) -> list[str]:
    """校验一组牌是否恰好构成标准牌堆

    Returns:
        错误列表（空表示验证通过）
    """
    errors: list[str] = []
    counts = Counter(cards)

    for card, expected in DECK_COMPOSITION.items():
        actual = counts.get(card, 0)
        if actual != expected:
            errors.append(f"{card.name}: expected {expected}, got {actual}")

    for card, count in counts.items():
        if card not in DECK_COMPOSITION:
            errors.append(f"unexpected card: {card!r} (count={count})")

    return errors


class Shuffler(Protocol):
    """洗牌器协议：原地产生均匀随机排列（``random.Random`` 即满足）"""

    def shuffle(self, x: list[Any]) -> None: ...


class Deck:
    """牌堆类
    管理摸牌堆，列表末尾为牌堆顶
    """

    def __init__(self, shuffler: Shuffler | None = None):
        """初始化牌堆

        Args:
            shuffler: 注入的洗牌器，不使用全局随机源
        """
        self._shuffler = shuffler
        self.draw_pile: list[Card] = canonical_cards()

    def reset(self) -> None:
        """恢复为标准顺序的 16 张牌"""
        self.draw_pile = canonical_cards()

    def shuffle(self, shuffler: Shuffler | None = None) -> None:
        """洗牌

        Args:
            shuffler: 本次使用的洗牌器，缺省使用构造时注入的洗牌器

        Raises:
            ConfigurationError: 没有可用的洗牌器
        """
        shuffler = shuffler or self._shuffler
        if shuffler is None:
            raise ConfigurationError("Deck has no shuffler", config_key="shuffler")
        shuffler.shuffle(self.draw_pile)
        logger.debug("Deck shuffled (%d cards)", len(self.draw_pile))

    def draw(self) -> Card | None:
        """从牌堆顶摸一张牌，牌堆为空时返回 None"""
        if not self.draw_pile:
            return None
        return self.draw_pile.pop()

    @property
    def cards(self) -> list[Card]:
        """牌堆内容副本（末尾为牌堆顶）"""
        return list(self.draw_pile)

    @property
    def remaining(self) -> int:
        """摸牌堆剩余牌数"""
        return len(self.draw_pile)

    @property
    def is_empty(self) -> bool:
        """摸牌堆是否耗尽"""
        return not self.draw_pile

    def __len__(self) -> int:
        return self.remaining

    def __str__(self) -> str:
        return f"Deck(remaining={self.remaining})"
