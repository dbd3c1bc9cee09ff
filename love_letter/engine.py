"""
游戏引擎模块
负责一整局情书游戏的裁决：校验动作、修改状态并返回事件

引擎基于“动作”和“事件”两个概念工作：动作由外部发起（开始游戏、出牌），
事件由引擎在处理动作时产生（发牌、出局、游戏结束……）。
调用 ``perform_action`` 提交一个动作，得到按顺序排列的全部事件；
如何解读这些事件、向哪个座位展示哪些事件，由调用方负责。

单个 ``Game`` 实例不加锁，调用方需保证同一时刻只有一个写者。
"""

from __future__ import annotations

import logging
import random

from .actions import Action, PlayCard, PlayCardDetails, StartGame
from .card import Card, Deck, Shuffler, validate_composition
from .card_resolver import CardResolver
from .config import GameConfig, get_config
from .enums import GameState
from .events import (
    BurnCard,
    DealCard,
    EliminatePlayer,
    GameEvent,
    GameOver,
    NewGame,
    ReadyToPlay,
    RegisterPlayer,
    RemoveCardFromGame,
    RevealCard,
)
from .events import PlayCard as PlayCardEvent
from .exceptions import (
    CannotTargetSelfError,
    CardNotHeldError,
    CountessLockError,
    EliminatedTargetError,
    GameError,
    GameNotInProgressError,
    InternalStateError,
    InvalidPlayerCountError,
    MustProvideTargetError,
    NotPlayerTurnError,
    PlayerNotFoundError,
    ProtectedTargetError,
)
from .player import Player
from .win_checker import check_round_over

logger = logging.getLogger(__name__)

# 规则规定的人数范围
MIN_PLAYERS = 2
MAX_PLAYERS = 4

# 两人局开局时额外公开移出的牌数
TWO_PLAYER_REMOVED_CARDS = 3

# 手持伯爵夫人时不能打出的牌
COUNTESS_LOCKED_CARDS = frozenset({Card.PRINCE, Card.KING})


class Game:
    """
    游戏引擎类

    持有牌堆、被移开的暗牌、按座位索引的玩家列表、当前回合指针和游戏状态。
    """

    def __init__(self, shuffler: Shuffler | None = None, config: GameConfig | None = None):
        """
        初始化游戏引擎

        Args:
            shuffler: 洗牌器；缺省时使用以 ``config.seed`` 为种子的 ``random.Random``
            config: 引擎配置；缺省时使用全局配置
        """
        self.config = config or get_config()
        if shuffler is None:
            shuffler = random.Random(self.config.seed)
        self.deck = Deck(shuffler)
        self.burned_card: Card | None = None
        self.removed_cards: list[Card] = []
        self._players: list[Player] = []
        self.turn_counter: int = 0
        self.state: GameState = GameState.NOT_STARTED
        self.resolver = CardResolver(self)

    # ==================== 只读访问 ====================

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def turn(self) -> int:
        """当前回合玩家的座位号"""
        return self.turn_counter

    @property
    def deck_remaining(self) -> int:
        return self.deck.remaining

    @property
    def has_burned_card(self) -> bool:
        return self.burned_card is not None

    @property
    def is_over(self) -> bool:
        return self.state == GameState.COMPLETE

    def player(self, seat: int) -> Player:
        """根据座位号获取玩家

        Raises:
            PlayerNotFoundError: 座位不存在
        """
        if not self._seat_exists(seat):
            raise PlayerNotFoundError(seat)
        return self._players[seat]

    def active_players(self) -> list[int]:
        """按座位升序返回在局玩家"""
        return [p.seat for p in self._players if p.active]

    def legal_targets(self, seat: int, card: Card) -> list[int]:
        """某玩家打出某张牌时的合法目标

        在局且未受保护的玩家；只有王子可以以自己为目标。
        """
        return [
            p.seat
            for p in self._players
            if p.active and not p.protected and (p.seat != seat or card is Card.PRINCE)
        ]

    def check_conservation(self) -> list[str]:
        """校验牌数守恒：牌堆 + 暗牌 + 移出的牌 + 手牌 + 弃牌 = 标准牌堆

        Returns:
            错误列表（空表示守恒）
        """
        cards = self.deck.cards + list(self.removed_cards)
        if self.burned_card is not None:
            cards.append(self.burned_card)
        for p in self._players:
            cards.extend(p.hand)
            cards.extend(p.discards)
        return validate_composition(cards)

    # ==================== 动作入口 ====================

    def perform_action(self, action: Action) -> list[GameEvent]:
        """
        执行一个动作

        Args:
            action: ``StartGame`` 或 ``PlayCard``

        Returns:
            动作导致的全部事件（按发生顺序）

        Raises:
            GameError: 动作不合法，此时状态不变
            InternalStateError: 引擎内部不变量被破坏
        """
        try:
            if isinstance(action, StartGame):
                events = self.start_game(action.players)
            elif isinstance(action, PlayCard):
                events = self.play_card(action.player_idx, action.details)
            else:
                raise TypeError(f"Unsupported action: {action!r}")
        except GameError as e:
            logger.warning("Rejected %r: %s", action, e)
            raise

        if self.config.debug_mode:
            self._assert_conservation()
        return events

    # ==================== 开始游戏 ====================

    def start_game(self, players: int) -> list[GameEvent]:
        """开始（或重新开始）一局游戏，任何状态下都合法"""
        if not MIN_PLAYERS <= players <= MAX_PLAYERS:
            raise InvalidPlayerCountError(players, MIN_PLAYERS, MAX_PLAYERS)

        events: list[GameEvent] = [NewGame(players=players)]

        # 重置并洗牌
        self.deck.reset()
        self.deck.shuffle()
        self.burned_card = None
        self.removed_cards = []

        # 注册玩家
        self._players = []
        for seat in range(players):
            self._players.append(Player(seat=seat))
            events.append(RegisterPlayer(player_idx=seat))

        # 面朝下移开一张牌
        self.burned_card = self._draw_from_deck()
        events.append(BurnCard())

        # 两人局额外公开移出三张牌
        if players == 2:
            for _ in range(TWO_PLAYER_REMOVED_CARDS):
                card = self._draw_from_deck()
                self.removed_cards.append(card)
                events.append(RemoveCardFromGame(card=card))

        # 每人发一张牌
        for seat in range(players):
            events.append(self.deal_card(seat))

        # 首位玩家额外摸一张并开始回合
        events.append(self.deal_card(0))
        events.append(self._start_player_turn(0))

        self.state = GameState.IN_PROGRESS
        logger.info("Game started with %d players (deck=%d)", players, self.deck.remaining)
        return events

    # ==================== 出牌 ====================

    def play_card(self, player_idx: int, details: PlayCardDetails) -> list[GameEvent]:
        """打出一张牌并推进游戏"""
        card = details.card

        # 所有校验都在修改状态之前完成
        self._require_in_progress()
        self._require_seat(player_idx)
        self._require_turn(player_idx)
        self._require_holds(player_idx, card)
        self._validate_target(player_idx, details.target, card)
        self._validate_countess(player_idx, card)

        events: list[GameEvent] = [self._play_from_hand(player_idx, card)]
        events.extend(self.resolver.resolve(player_idx, details))

        result = check_round_over(self._players, self.deck.is_empty)
        if result.is_over:
            events.append(self._end_game(result.winners))
            logger.info("Game over (%s), winners=%s", result.reason.value, result.winners)
        else:
            next_seat = self._next_player()
            events.append(self.deal_card(next_seat))
            events.append(self._start_player_turn(next_seat))

        return events

    # ==================== 校验 ====================

    def _seat_exists(self, seat: int) -> bool:
        return 0 <= seat < len(self._players)

    def _require_in_progress(self) -> None:
        if self.state != GameState.IN_PROGRESS:
            raise GameNotInProgressError(self.state.value)

    def _require_seat(self, player_idx: int) -> None:
        if not self._seat_exists(player_idx):
            raise PlayerNotFoundError(player_idx)

    def _require_turn(self, player_idx: int) -> None:
        if player_idx != self.turn_counter:
            raise NotPlayerTurnError(player_idx, self.turn_counter)

    def _require_holds(self, player_idx: int, card: Card) -> None:
        if not self._players[player_idx].holds(card):
            raise CardNotHeldError(player_idx, card)

    def _validate_target(self, player_idx: int, target_idx: int | None, card: Card) -> None:
        # 存在合法目标时，需要目标的牌必须指定目标
        if card.requires_target and target_idx is None:
            if self.legal_targets(player_idx, card):
                raise MustProvideTargetError(card)
            return

        if target_idx is None:
            return

        # 只有王子可以以自己为目标
        if target_idx == player_idx and card is not Card.PRINCE:
            raise CannotTargetSelfError(card, player_idx)

        if not self._seat_exists(target_idx):
            raise PlayerNotFoundError(target_idx)

        target = self._players[target_idx]
        if target.protected:
            raise ProtectedTargetError(target_idx)
        if not target.active:
            raise EliminatedTargetError(target_idx)

    def _validate_countess(self, player_idx: int, card: Card) -> None:
        if card in COUNTESS_LOCKED_CARDS and self._players[player_idx].holds(Card.COUNTESS):
            raise CountessLockError(card, player_idx)

    # ==================== 状态修改 ====================

    def _draw_from_deck(self) -> Card:
        card = self.deck.draw()
        if card is None:
            raise InternalStateError("deck exhausted during setup")
        return card

    def deal_card(self, seat: int) -> DealCard:
        """给玩家发一张牌；牌堆耗尽时使用被移开的暗牌"""
        card = self.deck.draw()
        if card is None:
            card, self.burned_card = self.burned_card, None
        if card is None:
            raise InternalStateError(f"no card left to deal to player {seat}")
        self._players[seat].receive(card)
        logger.debug("Dealt %s to player %d", card.name, seat)
        return DealCard(player_idx=seat, card=card)

    def eliminate_player(self, seat: int) -> EliminatePlayer:
        self._players[seat].eliminate()
        logger.debug("Player %d eliminated", seat)
        return EliminatePlayer(player_idx=seat)

    def reveal_eliminated_card(self, seat: int) -> RevealCard:
        """出局玩家亮出并弃掉手牌"""
        card = self._players[seat].take_solo_card()
        if card is None:
            raise InternalStateError(f"eliminated player {seat} should hold exactly one card")
        return RevealCard(player_idx=seat, card=card)

    def _play_from_hand(self, player_idx: int, card: Card) -> PlayCardEvent:
        try:
            self._players[player_idx].discard(card)
        except CardNotHeldError as e:
            raise InternalStateError(str(e)) from e
        logger.debug("Player %d plays %s", player_idx, card.name)
        return PlayCardEvent(player_idx=player_idx, card=card)

    def _start_player_turn(self, seat: int) -> ReadyToPlay:
        self.turn_counter = seat
        self._players[seat].unprotect()
        return ReadyToPlay(player_idx=seat)

    def _next_player(self) -> int:
        """顺时针寻找下一位在局玩家

        Raises:
            InternalStateError: 没有在局玩家（调用前应已结束游戏）
        """
        count = len(self._players)
        for step in range(1, count + 1):
            seat = (self.turn_counter + step) % count
            if self._players[seat].active:
                return seat
        raise InternalStateError("no active player to pass the turn to")

    def _end_game(self, winners: list[int]) -> GameOver:
        self.state = GameState.COMPLETE
        return GameOver(winner_indices=tuple(winners))

    def _assert_conservation(self) -> None:
        errors = self.check_conservation()
        if errors:
            raise InternalStateError(f"card conservation violated: {errors}")

    def __str__(self) -> str:
        return (
            f"Game(state={self.state.value}, turn={self.turn_counter}, "
            f"players={len(self._players)}, deck={self.deck.remaining})"
        )


def new_game(shuffler: Shuffler | None = None, seed: int | None = None) -> Game:
    """创建一个未开始的游戏

    Args:
        shuffler: 注入的洗牌器
        seed: 没有注入洗牌器时使用的随机种子
    """
    if shuffler is None and seed is not None:
        shuffler = random.Random(seed)
    return Game(shuffler=shuffler)
