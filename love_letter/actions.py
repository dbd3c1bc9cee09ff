"""
动作系统
定义调用方可以提交给引擎的动作：开始游戏与出牌

摸牌不算动作，而是引擎“发牌”给玩家；开始一局新游戏也是动作。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from .card import Card


class ActionType(Enum):
    """动作类型枚举"""
    START_GAME = "start_game"  # 开始（或重新开始）游戏
    PLAY_CARD = "play_card"    # 出牌


# ==================== 出牌细节 ====================


@dataclass(frozen=True)
class PlayCardDetails:
    """出牌细节基类：标识打出的牌及其目标/猜测"""
    card: ClassVar[Card]

    @property
    def target(self) -> int | None:
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"card": self.card.name.lower(), "target": self.target}


@dataclass(frozen=True)
class PlayGuard(PlayCardDetails):
    """卫兵：猜测目标手牌"""
    card: ClassVar[Card] = Card.GUARD
    target_idx: int | None
    guess: Card

    @property
    def target(self) -> int | None:
        return self.target_idx

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["guess"] = self.guess.name.lower()
        return data


@dataclass(frozen=True)
class PlayPriest(PlayCardDetails):
    """牧师：查看目标手牌"""
    card: ClassVar[Card] = Card.PRIEST
    target_idx: int | None = None

    @property
    def target(self) -> int | None:
        return self.target_idx


@dataclass(frozen=True)
class PlayBaron(PlayCardDetails):
    """男爵：与目标比较手牌"""
    card: ClassVar[Card] = Card.BARON
    target_idx: int | None = None

    @property
    def target(self) -> int | None:
        return self.target_idx


@dataclass(frozen=True)
class PlayHandmaid(PlayCardDetails):
    card: ClassVar[Card] = Card.HANDMAID


@dataclass(frozen=True)
class PlayPrince(PlayCardDetails):
    """王子：令一名玩家（可以是自己）弃牌重摸"""
    card: ClassVar[Card] = Card.PRINCE
    target_idx: int | None = None

    @property
    def target(self) -> int | None:
        return self.target_idx


@dataclass(frozen=True)
class PlayKing(PlayCardDetails):
    """国王：与目标交换手牌"""
    card: ClassVar[Card] = Card.KING
    target_idx: int | None = None

    @property
    def target(self) -> int | None:
        return self.target_idx


@dataclass(frozen=True)
class PlayCountess(PlayCardDetails):
    card: ClassVar[Card] = Card.COUNTESS


@dataclass(frozen=True)
class PlayPrincess(PlayCardDetails):
    card: ClassVar[Card] = Card.PRINCESS


DETAILS_BY_CARD: dict[Card, type[PlayCardDetails]] = {
    Card.GUARD: PlayGuard,
    Card.PRIEST: PlayPriest,
    Card.BARON: PlayBaron,
    Card.HANDMAID: PlayHandmaid,
    Card.PRINCE: PlayPrince,
    Card.KING: PlayKing,
    Card.COUNTESS: PlayCountess,
    Card.PRINCESS: PlayPrincess,
}

assert set(DETAILS_BY_CARD) == set(Card), "every card needs a PlayCardDetails variant"


def details_for(card: Card, target: int | None = None, guess: Card | None = None) -> PlayCardDetails:
    """
    为指定的牌构造出牌细节

    Args:
        card: 打出的牌
        target: 目标座位号（仅对需要目标的牌有效）
        guess: 卫兵的猜测

    Raises:
        ValueError: 打出卫兵却没有给出猜测
    """
    if card is Card.GUARD:
        if guess is None:
            raise ValueError("A Guard play needs a guess")
        return PlayGuard(target_idx=target, guess=guess)
    cls = DETAILS_BY_CARD[card]
    if card.requires_target:
        return cls(target_idx=target)
    return cls()


# ==================== 动作 ====================


@dataclass(frozen=True)
class StartGame:
    """开始一局新游戏（任何状态下都可以重新开始）"""
    action_type: ClassVar[ActionType] = ActionType.START_GAME
    players: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.action_type.value, "players": self.players}


@dataclass(frozen=True)
class PlayCard:
    """某位玩家打出一张牌"""
    action_type: ClassVar[ActionType] = ActionType.PLAY_CARD
    player_idx: int
    details: PlayCardDetails

    @property
    def card(self) -> Card:
        return self.details.card

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.action_type.value,
            "player": self.player_idx,
            **self.details.to_dict(),
        }


Action = Union[StartGame, PlayCard]


def action_from_dict(data: dict[str, Any]) -> Action:
    """从字典创建动作（``to_dict`` 的逆操作）

    Raises:
        ValueError: 动作类型或卡牌未知
    """
    action_type = ActionType(data["type"])
    if action_type is ActionType.START_GAME:
        return StartGame(players=int(data["players"]))

    card = Card.from_value(data["card"])
    target = data.get("target")
    guess = data.get("guess")
    details = details_for(
        card,
        target=int(target) if target is not None else None,
        guess=Card.from_value(guess) if guess is not None else None,
    )
    return PlayCard(player_idx=int(data["player"]), details=details)
