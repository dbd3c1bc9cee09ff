"""Shared fixtures: a shuffler that stacks the deck in a chosen draw order."""

from __future__ import annotations

import pytest

from love_letter.actions import StartGame
from love_letter.config import GameConfig, reset_config
from love_letter.engine import Game
from love_letter.i18n import get_locale, set_locale


class StackedShuffler:
    """把指定的牌按顺序放到牌堆顶部，其余的牌保持原顺序压在下面。

    牌堆从列表末尾摸牌，因此 ``draw_order[0]`` 最先被摸到。
    开局摸牌顺序：暗牌、（两人局）三张移出的牌、座位 0..n-1、座位 0 的第二张。
    """

    def __init__(self, draw_order):
        self.draw_order = list(draw_order)

    def shuffle(self, cards):
        rest = list(cards)
        for card in self.draw_order:
            rest.remove(card)
        cards[:] = rest + list(reversed(self.draw_order))


@pytest.fixture
def stacked():
    return StackedShuffler


@pytest.fixture
def make_game():
    """工厂：按指定摸牌顺序开始一局，返回 (game, 开局事件)"""

    def _make(players, draw_order, config=None):
        game = Game(shuffler=StackedShuffler(draw_order), config=config or GameConfig())
        events = game.perform_action(StartGame(players=players))
        return game, events

    return _make


@pytest.fixture(autouse=True)
def _isolate_globals():
    """每个测试结束后恢复语言和全局配置"""
    original = get_locale()
    yield
    set_locale(original)
    reset_config()
