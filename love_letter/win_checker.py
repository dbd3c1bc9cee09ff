"""胜利条件检查器模块
负责判定一轮是否结束并确定获胜者

一轮在以下两种情况下结束（按此顺序判断）：
- 只剩一名在局玩家 → 该玩家获胜
- 牌堆耗尽 → 比较在局玩家的手牌点数，点数相同再比较弃牌点数之和
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import InternalStateError
from .player import Player


class RoundEndReason(Enum):
    """一轮结束的原因"""

    NOT_OVER = "not_over"
    LAST_STANDING = "last_standing"  # 只剩一人
    DECK_EXHAUSTED = "deck_exhausted"  # 牌堆耗尽


@dataclass(slots=True)
class RoundResult:
    """一轮结束信息"""

    is_over: bool
    reason: RoundEndReason
    winners: list[int] = field(default_factory=list)


def active_seats(players: Sequence[Player]) -> list[int]:
    """按座位升序返回在局玩家"""
    return [p.seat for p in players if p.active]


def sole_survivor(players: Sequence[Player]) -> int | None:
    """只剩一名在局玩家时返回其座位号"""
    seats = active_seats(players)
    return seats[0] if len(seats) == 1 else None


def score_key(player: Player) -> tuple[int, int]:
    """平局判定键：(手牌点数, 弃牌点数之和)，越大越好

    Raises:
        InternalStateError: 在局玩家的手牌不是恰好一张
    """
    card = player.solo_card()
    if card is None:
        raise InternalStateError(
            f"player {player.seat} should hold exactly one card, holds {player.hand_count}"
        )
    return card.rank, player.discard_value_sum()


def calculate_winners(players: Sequence[Player]) -> list[int]:
    """牌堆耗尽时计算获胜者

    所有与最高判定键相同的在局玩家共同获胜，按座位升序返回。
    """
    scores = [(score_key(p), p.seat) for p in players if p.active]
    if not scores:
        raise InternalStateError("no active players left to score")
    best = max(key for key, _ in scores)
    return sorted(seat for key, seat in scores if key == best)


def check_round_over(players: Sequence[Player], deck_empty: bool) -> RoundResult:
    """检查一轮是否结束

    Args:
        players: 全部座位上的玩家
        deck_empty: 摸牌堆是否已耗尽
    """
    survivor = sole_survivor(players)
    if survivor is not None:
        return RoundResult(True, RoundEndReason.LAST_STANDING, [survivor])

    if deck_empty:
        return RoundResult(True, RoundEndReason.DECK_EXHAUSTED, calculate_winners(players))

    return RoundResult(False, RoundEndReason.NOT_OVER)
