"""
玩家系统模块
定义每个座位的手牌、弃牌、保护与在局状态
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import Card
from .exceptions import CardNotHeldError
from .i18n import t as _t


@dataclass
class Player:
    """
    玩家类

    出局只会把 ``active`` 置为 False，玩家不会从座位列表中移除，
    座位号在整局游戏中保持稳定。

    Attributes:
        seat: 座位号（0 起）
        hand: 手牌（出牌阶段外为 0 或 1 张，摸牌后短暂为 2 张）
        discards: 按时间顺序记录的弃牌
        protected: 是否受侍女保护（自己回合开始时解除）
        active: 是否在局
    """
    seat: int
    hand: list[Card] = field(default_factory=list)
    discards: list[Card] = field(default_factory=list)
    protected: bool = False
    active: bool = True

    @property
    def name(self) -> str:
        """显示名称"""
        return _t("player.label", seat=self.seat)

    @property
    def hand_count(self) -> int:
        return len(self.hand)

    @property
    def is_protected(self) -> bool:
        return self.protected

    @property
    def is_active(self) -> bool:
        return self.active

    # ==================== 手牌操作 ====================

    def receive(self, card: Card) -> None:
        """获得一张牌（不校验手牌上限，由引擎保证）"""
        self.hand.append(card)

    def discard(self, card: Card) -> None:
        """
        将手中的一张指定牌移入弃牌区

        Raises:
            CardNotHeldError: 手中没有这张牌
        """
        if card not in self.hand:
            raise CardNotHeldError(self.seat, card)
        self.hand.remove(card)
        self.discards.append(card)

    def holds(self, card: Card) -> bool:
        return card in self.hand

    def solo_card(self) -> Card | None:
        """手牌恰为一张时返回该牌，否则返回 None"""
        if len(self.hand) == 1:
            return self.hand[0]
        return None

    def take_card(self) -> Card | None:
        """取走唯一的手牌，不计入弃牌（用于国王交换）"""
        if len(self.hand) != 1:
            return None
        return self.hand.pop()

    def take_solo_card(self) -> Card | None:
        """取走唯一的手牌并放入弃牌区（出局亮牌、王子弃牌）"""
        card = self.take_card()
        if card is not None:
            self.discards.append(card)
        return card

    def discard_value_sum(self) -> int:
        """弃牌点数之和，用于牌堆耗尽时的平局判定"""
        return sum(card.rank for card in self.discards)

    # ==================== 状态标记 ====================

    def protect(self) -> None:
        self.protected = True

    def unprotect(self) -> None:
        self.protected = False

    def eliminate(self) -> None:
        """出局（不可恢复）"""
        self.active = False

    def __str__(self) -> str:
        flags = []
        if not self.active:
            flags.append("out")
        if self.protected:
            flags.append("protected")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        return f"Player {self.seat}: hand={[c.name for c in self.hand]}{suffix}"
