"""
情书 (Love Letter) 规则引擎
包含卡牌、牌堆、玩家、动作/事件词汇表和裁决整局游戏的引擎

用法::

    from love_letter import StartGame, PlayCard, PlayGuard, Card, new_game

    game = new_game(seed=42)
    events = game.perform_action(StartGame(players=3))
"""

from .actions import (
    Action, ActionType, PlayBaron, PlayCard, PlayCardDetails, PlayCountess,
    PlayGuard, PlayHandmaid, PlayKing, PlayPriest, PlayPrince, PlayPrincess,
    StartGame, action_from_dict, details_for,
)
from .card import DECK_COMPOSITION, Card, Deck, Shuffler
from .config import GameConfig, get_config
from .describe import describe_event
from .engine import Game, new_game
from .enums import GameState
from .events import EventType, GameEvent
from .exceptions import GameError, InternalStateError
from .player import Player

__all__ = [
    # 卡牌与牌堆
    'Card', 'Deck', 'DECK_COMPOSITION', 'Shuffler',
    # 玩家
    'Player',
    # 动作
    'Action', 'ActionType', 'StartGame', 'PlayCard', 'PlayCardDetails',
    'PlayGuard', 'PlayPriest', 'PlayBaron', 'PlayHandmaid', 'PlayPrince',
    'PlayKing', 'PlayCountess', 'PlayPrincess', 'details_for', 'action_from_dict',
    # 事件
    'EventType', 'GameEvent', 'describe_event',
    # 引擎
    'Game', 'GameState', 'new_game', 'GameConfig', 'get_config',
    # 异常
    'GameError', 'InternalStateError',
]

__version__ = '1.0.0'
