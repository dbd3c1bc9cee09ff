"""
事件系统
定义引擎在处理动作后产生的全部事件

事件是已经发生的事实，只由引擎创建，创建后不可修改。
其中一部分（例如“轮到某玩家出牌”）不对应具体的规则操作，
只是方便调用方跟踪游戏流程。
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Any, ClassVar

from .card import Card


class EventType(Enum):
    """游戏事件类型枚举"""
    # 开局
    NEW_GAME = auto()
    REGISTER_PLAYER = auto()
    BURN_CARD = auto()
    REMOVE_CARD_FROM_GAME = auto()

    # 回合
    DEAL_CARD = auto()
    READY_TO_PLAY = auto()
    PLAY_CARD = auto()

    # 卡牌效果
    GUESS = auto()
    SHOW_CARD = auto()
    COMPARE_HANDS = auto()
    DISCARD_CARD = auto()
    SWAP_HANDS = auto()

    # 出局与结束
    ELIMINATE_PLAYER = auto()
    REVEAL_CARD = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class GameEvent:
    """游戏事件基类"""
    event_type: ClassVar[EventType]

    def to_dict(self) -> dict[str, Any]:
        """转换为字典，卡牌以小写名称表示"""
        data: dict[str, Any] = {"type": self.event_type.name.lower()}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Card):
                value = value.name.lower()
            elif isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        return data


@dataclass(frozen=True)
class NewGame(GameEvent):
    event_type: ClassVar[EventType] = EventType.NEW_GAME
    players: int


@dataclass(frozen=True)
class RegisterPlayer(GameEvent):
    event_type: ClassVar[EventType] = EventType.REGISTER_PLAYER
    player_idx: int


@dataclass(frozen=True)
class BurnCard(GameEvent):
    """一张牌被面朝下放到一边（内容不公开）"""
    event_type: ClassVar[EventType] = EventType.BURN_CARD


@dataclass(frozen=True)
class RemoveCardFromGame(GameEvent):
    """两人局开局时公开移出的牌"""
    event_type: ClassVar[EventType] = EventType.REMOVE_CARD_FROM_GAME
    card: Card


@dataclass(frozen=True)
class DealCard(GameEvent):
    event_type: ClassVar[EventType] = EventType.DEAL_CARD
    player_idx: int
    card: Card


@dataclass(frozen=True)
class ReadyToPlay(GameEvent):
    event_type: ClassVar[EventType] = EventType.READY_TO_PLAY
    player_idx: int


@dataclass(frozen=True)
class PlayCard(GameEvent):
    event_type: ClassVar[EventType] = EventType.PLAY_CARD
    player_idx: int
    card: Card


@dataclass(frozen=True)
class Guess(GameEvent):
    event_type: ClassVar[EventType] = EventType.GUESS
    target_idx: int
    guess: Card


@dataclass(frozen=True)
class ShowCard(GameEvent):
    """目标向出牌者展示手牌（是否对其他人隐藏由调用方决定）"""
    event_type: ClassVar[EventType] = EventType.SHOW_CARD
    player_idx: int
    target_idx: int
    card: Card


@dataclass(frozen=True)
class CompareHands(GameEvent):
    event_type: ClassVar[EventType] = EventType.COMPARE_HANDS
    player_idx: int
    player_card: Card
    target_idx: int
    target_card: Card


@dataclass(frozen=True)
class DiscardCard(GameEvent):
    event_type: ClassVar[EventType] = EventType.DISCARD_CARD
    target_idx: int
    card: Card


@dataclass(frozen=True)
class SwapHands(GameEvent):
    """交换手牌，记录双方交换前的牌"""
    event_type: ClassVar[EventType] = EventType.SWAP_HANDS
    player_idx: int
    player_card: Card
    target_idx: int
    target_card: Card


@dataclass(frozen=True)
class EliminatePlayer(GameEvent):
    event_type: ClassVar[EventType] = EventType.ELIMINATE_PLAYER
    player_idx: int


@dataclass(frozen=True)
class RevealCard(GameEvent):
    event_type: ClassVar[EventType] = EventType.REVEAL_CARD
    player_idx: int
    card: Card


@dataclass(frozen=True)
class GameOver(GameEvent):
    event_type: ClassVar[EventType] = EventType.GAME_OVER
    winner_indices: tuple[int, ...]


EVENT_CLASSES: dict[EventType, type[GameEvent]] = {
    cls.event_type: cls
    for cls in (
        NewGame, RegisterPlayer, BurnCard, RemoveCardFromGame, DealCard, ReadyToPlay,
        PlayCard, Guess, ShowCard, CompareHands, DiscardCard, SwapHands,
        EliminatePlayer, RevealCard, GameOver,
    )
}

assert set(EVENT_CLASSES) == set(EventType), "every EventType needs an event class"
