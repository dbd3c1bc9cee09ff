"""卡牌效果解析器

从 engine.py 分离出的八种卡牌效果。每个方法只负责效果本身，
返回效果产生的事件（追加在 PlayCard 事件之后）；
合法性校验已经在引擎中完成。

需要目标的牌在没有合法目标时可以不指定目标打出，此时不产生效果。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .actions import PlayCardDetails, PlayGuard
from .card import Card
from .events import (
    CompareHands,
    DiscardCard,
    GameEvent,
    Guess,
    ShowCard,
    SwapHands,
)
from .exceptions import InternalStateError

if TYPE_CHECKING:
    from .engine import Game

logger = logging.getLogger(__name__)

EffectHandler = Callable[[int, PlayCardDetails], list[GameEvent]]


class CardResolver:
    """卡牌效果解析器，处理所有卡牌打出后的效果。"""

    def __init__(self, game: Game) -> None:
        self.game = game
        self._handlers: dict[Card, EffectHandler] = {
            Card.GUARD: self.play_guard,
            Card.PRIEST: self.play_priest,
            Card.BARON: self.play_baron,
            Card.HANDMAID: self.play_handmaid,
            Card.PRINCE: self.play_prince,
            Card.KING: self.play_king,
            Card.COUNTESS: self.play_countess,
            Card.PRINCESS: self.play_princess,
        }
        assert set(self._handlers) == set(Card), "every card needs an effect handler"

    def resolve(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """结算一张已经打出的牌"""
        if details.card.requires_target and details.target is None:
            logger.debug("%s played by %d without a target: no effect", details.card.name, player_idx)
            return []
        return self._handlers[details.card](player_idx, details)

    # ==================== 单张效果 ====================

    def play_guard(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """卫兵：猜中目标手牌则目标出局并亮牌"""
        assert isinstance(details, PlayGuard)
        target_idx = details.target_idx
        events: list[GameEvent] = [Guess(target_idx=target_idx, guess=details.guess)]

        if self.game.player(target_idx).holds(details.guess):
            events.append(self.game.eliminate_player(target_idx))
            events.append(self.game.reveal_eliminated_card(target_idx))
        return events

    def play_priest(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """牧师：目标向出牌者展示手牌"""
        target_idx = details.target
        card = self._held_card(target_idx)
        return [ShowCard(player_idx=player_idx, target_idx=target_idx, card=card)]

    def play_baron(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """男爵：比较手牌，点数严格较小者出局；点数相同无事发生"""
        target_idx = details.target
        player_card = self._held_card(player_idx)
        target_card = self._held_card(target_idx)
        events: list[GameEvent] = [
            CompareHands(
                player_idx=player_idx,
                player_card=player_card,
                target_idx=target_idx,
                target_card=target_card,
            )
        ]

        loser: int | None = None
        if player_card < target_card:
            loser = player_idx
        elif target_card < player_card:
            loser = target_idx

        if loser is not None:
            events.append(self.game.eliminate_player(loser))
            events.append(self.game.reveal_eliminated_card(loser))
        return events

    def play_handmaid(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """侍女：直到自己下个回合开始前不能成为目标"""
        self.game.player(player_idx).protect()
        return []

    def play_prince(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """王子：目标弃掉手牌；弃掉公主则出局，否则重新摸一张"""
        target_idx = details.target
        card = self.game.player(target_idx).take_solo_card()
        if card is None:
            raise InternalStateError(f"player {target_idx} has no single card to discard")
        events: list[GameEvent] = [DiscardCard(target_idx=target_idx, card=card)]

        if card is Card.PRINCESS:
            events.append(self.game.eliminate_player(target_idx))
        else:
            events.append(self.game.deal_card(target_idx))
        return events

    def play_king(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """国王：与目标交换手牌"""
        target_idx = details.target
        player = self.game.player(player_idx)
        target = self.game.player(target_idx)

        player_card = player.take_card()
        target_card = target.take_card()
        if player_card is None or target_card is None:
            raise InternalStateError(f"players {player_idx} and {target_idx} cannot swap hands")
        player.receive(target_card)
        target.receive(player_card)
        return [
            SwapHands(
                player_idx=player_idx,
                player_card=player_card,
                target_idx=target_idx,
                target_card=target_card,
            )
        ]

    def play_countess(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        return []

    def play_princess(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """公主：打出即出局"""
        return [self.game.eliminate_player(player_idx)]

    # ==================== 工具方法 ====================

    def _held_card(self, player_idx: int) -> Card:
        card = self.game.player(player_idx).solo_card()
        if card is None:
            raise InternalStateError(f"player {player_idx} should hold exactly one card")
        return card
