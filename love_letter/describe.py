"""事件描述模块

把事件转换为一句本地化的文字，供终端界面和日志使用。
``reveal=False`` 时隐藏只应由当事人看到的牌面
（摸到的牌、牧师查看的牌、男爵比较的牌）。
"""

from __future__ import annotations

from collections.abc import Callable

from .events import EventType, GameEvent
from .i18n import card_name
from .i18n import t as _t


def _seat(seat: int) -> str:
    return _t("player.label", seat=seat)


def _winners(event: GameEvent) -> str:
    return ", ".join(_seat(s) for s in event.winner_indices)


_Describer = Callable[[GameEvent, bool], str]

_DESCRIBERS: dict[EventType, _Describer] = {
    EventType.NEW_GAME: lambda e, r: _t("event.new_game", players=e.players),
    EventType.REGISTER_PLAYER: lambda e, r: _t("event.register_player", player=_seat(e.player_idx)),
    EventType.BURN_CARD: lambda e, r: _t("event.burn_card"),
    EventType.REMOVE_CARD_FROM_GAME: lambda e, r: _t("event.remove_card", card=card_name(e.card)),
    EventType.DEAL_CARD: lambda e, r: (
        _t("event.deal_card", player=_seat(e.player_idx), card=card_name(e.card))
        if r
        else _t("event.deal_card.hidden", player=_seat(e.player_idx))
    ),
    EventType.READY_TO_PLAY: lambda e, r: _t("event.ready_to_play", player=_seat(e.player_idx)),
    EventType.PLAY_CARD: lambda e, r: _t(
        "event.play_card", player=_seat(e.player_idx), card=card_name(e.card)
    ),
    EventType.GUESS: lambda e, r: _t(
        "event.guess", target=_seat(e.target_idx), guess=card_name(e.guess)
    ),
    EventType.SHOW_CARD: lambda e, r: (
        _t(
            "event.show_card",
            player=_seat(e.player_idx),
            target=_seat(e.target_idx),
            card=card_name(e.card),
        )
        if r
        else _t("event.show_card.hidden", player=_seat(e.player_idx), target=_seat(e.target_idx))
    ),
    EventType.COMPARE_HANDS: lambda e, r: (
        _t(
            "event.compare_hands",
            player=_seat(e.player_idx),
            player_card=card_name(e.player_card),
            target=_seat(e.target_idx),
            target_card=card_name(e.target_card),
        )
        if r
        else _t(
            "event.compare_hands.hidden", player=_seat(e.player_idx), target=_seat(e.target_idx)
        )
    ),
    EventType.DISCARD_CARD: lambda e, r: _t(
        "event.discard_card", target=_seat(e.target_idx), card=card_name(e.card)
    ),
    EventType.SWAP_HANDS: lambda e, r: _t(
        "event.swap_hands", player=_seat(e.player_idx), target=_seat(e.target_idx)
    ),
    EventType.ELIMINATE_PLAYER: lambda e, r: _t(
        "event.eliminate_player", player=_seat(e.player_idx)
    ),
    EventType.REVEAL_CARD: lambda e, r: _t(
        "event.reveal_card", player=_seat(e.player_idx), card=card_name(e.card)
    ),
    EventType.GAME_OVER: lambda e, r: _t("event.game_over", winners=_winners(e)),
}

assert set(_DESCRIBERS) == set(EventType), "every EventType needs a description"


def describe_event(event: GameEvent, reveal: bool = True) -> str:
    """生成事件的本地化描述

    Args:
        event: 引擎产生的事件
        reveal: 是否显示私密的牌面
    """
    return _DESCRIBERS[event.event_type](event, reveal)
