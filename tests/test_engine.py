"""Tests for love_letter.engine: setup, card effects, validation and round end."""

import random

import pytest

from love_letter.actions import (
    PlayBaron,
    PlayCard,
    PlayCountess,
    PlayGuard,
    PlayHandmaid,
    PlayKing,
    PlayPriest,
    PlayPrince,
    PlayPrincess,
    StartGame,
)
from love_letter.card import Card
from love_letter.config import GameConfig
from love_letter.engine import (
    MAX_PLAYERS,
    MIN_PLAYERS,
    TWO_PLAYER_REMOVED_CARDS,
    Game,
    new_game,
)
from love_letter.enums import GameState
from love_letter.events import (
    BurnCard,
    CompareHands,
    DealCard,
    DiscardCard,
    EliminatePlayer,
    GameOver,
    Guess,
    NewGame,
    ReadyToPlay,
    RegisterPlayer,
    RemoveCardFromGame,
    RevealCard,
    ShowCard,
    SwapHands,
)
from love_letter.events import PlayCard as PlayCardEvent
from love_letter.exceptions import (
    CannotTargetSelfError,
    CardNotHeldError,
    CountessLockError,
    EliminatedTargetError,
    GameError,
    GameNotInProgressError,
    InvalidPlayerCountError,
    MustProvideTargetError,
    NotPlayerTurnError,
    PlayerNotFoundError,
    ProtectedTargetError,
)

G = Card.GUARD
TWO_PLAYER_PREFIX = [Card.PRIEST, G, G, G]  # 暗牌 + 三张移出的牌


def two_player(s0, s1, s0_extra, *later):
    return TWO_PLAYER_PREFIX + [s0, s1, s0_extra, *later]


def snapshot(game):
    return (
        game.state,
        game.turn,
        game.deck.cards,
        game.burned_card,
        list(game.removed_cards),
        [(list(p.hand), list(p.discards), p.protected, p.active) for p in game.players],
    )


# ==================== 开局 ====================

class TestStartGame:
    def test_two_player_event_sequence(self, make_game):
        game, events = make_game(2, two_player(G, Card.KING, Card.HANDMAID))
        assert events == [
            NewGame(players=2),
            RegisterPlayer(player_idx=0),
            RegisterPlayer(player_idx=1),
            BurnCard(),
            RemoveCardFromGame(card=G),
            RemoveCardFromGame(card=G),
            RemoveCardFromGame(card=G),
            DealCard(player_idx=0, card=G),
            DealCard(player_idx=1, card=Card.KING),
            DealCard(player_idx=0, card=Card.HANDMAID),
            ReadyToPlay(player_idx=0),
        ]
        assert game.state == GameState.IN_PROGRESS
        assert game.turn == 0
        assert game.burned_card is Card.PRIEST
        assert game.removed_cards == [G, G, G]
        assert game.deck_remaining == 9

    @pytest.mark.parametrize("players,event_count,remaining", [(3, 10, 11), (4, 12, 10)])
    def test_larger_games(self, players, event_count, remaining):
        game = Game(shuffler=random.Random(7), config=GameConfig())
        events = game.perform_action(StartGame(players=players))
        assert len(events) == event_count
        assert not any(isinstance(e, RemoveCardFromGame) for e in events)
        assert game.deck_remaining == remaining
        assert game.removed_cards == []
        assert game.has_burned_card
        assert game.player(0).hand_count == 2
        assert all(game.player(s).hand_count == 1 for s in range(1, players))
        assert events[-1] == ReadyToPlay(player_idx=0)

    @pytest.mark.parametrize("players", [0, 1, 5, -3])
    def test_invalid_player_count(self, players):
        game = Game(shuffler=random.Random(0), config=GameConfig())
        with pytest.raises(InvalidPlayerCountError) as exc_info:
            game.perform_action(StartGame(players=players))
        assert exc_info.value.players == players
        assert game.state == GameState.NOT_STARTED
        assert game.players == ()

    def test_player_limits_are_fixed_rules(self, make_game):
        assert (MIN_PLAYERS, MAX_PLAYERS, TWO_PLAYER_REMOVED_CARDS) == (2, 4, 3)
        for players in (MIN_PLAYERS, MAX_PLAYERS):
            game = Game(shuffler=random.Random(1), config=GameConfig(debug_mode=True))
            game.perform_action(StartGame(players=players))
            assert len(game.players) == players
        game = Game(shuffler=random.Random(1), config=GameConfig(debug_mode=True))
        with pytest.raises(InvalidPlayerCountError) as exc_info:
            game.perform_action(StartGame(players=MAX_PLAYERS + 2))
        assert exc_info.value.details == {"players": 6}
        game, _ = make_game(2, two_player(G, Card.KING, Card.HANDMAID))
        assert len(game.removed_cards) == TWO_PLAYER_REMOVED_CARDS

    def test_same_seed_same_game(self):
        a = Game(shuffler=random.Random(42), config=GameConfig())
        b = Game(shuffler=random.Random(42), config=GameConfig())
        assert a.perform_action(StartGame(players=4)) == b.perform_action(StartGame(players=4))
        assert a.deck.cards == b.deck.cards

    def test_new_game_helper(self):
        game = new_game(seed=3)
        assert game.state == GameState.NOT_STARTED
        game.perform_action(StartGame(players=2))
        assert game.check_conservation() == []

    def test_restart_discards_previous_round(self, make_game):
        game, _ = make_game(2, two_player(G, Card.KING, Card.HANDMAID))
        game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=Card.KING)))
        assert game.is_over

        events = game.perform_action(StartGame(players=3))
        assert events[0] == NewGame(players=3)
        assert game.state == GameState.IN_PROGRESS
        assert len(game.players) == 3
        assert game.removed_cards == []
        assert game.check_conservation() == []


# ==================== 卡牌效果 ====================

class TestGuard:
    def test_wrong_guess(self, make_game):
        game, _ = make_game(2, two_player(G, Card.KING, Card.HANDMAID, Card.BARON))
        events = game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=Card.PRINCESS)))
        assert events == [
            PlayCardEvent(player_idx=0, card=G),
            Guess(target_idx=1, guess=Card.PRINCESS),
            DealCard(player_idx=1, card=Card.BARON),
            ReadyToPlay(player_idx=1),
        ]
        assert game.turn == 1
        assert game.player(0).discards == [G]
        assert game.player(1).hand == [Card.KING, Card.BARON]

    def test_right_guess_eliminates(self, make_game):
        game, _ = make_game(2, two_player(G, Card.KING, Card.HANDMAID))
        events = game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=Card.KING)))
        assert events == [
            PlayCardEvent(player_idx=0, card=G),
            Guess(target_idx=1, guess=Card.KING),
            EliminatePlayer(player_idx=1),
            RevealCard(player_idx=1, card=Card.KING),
            GameOver(winner_indices=(0,)),
        ]
        assert game.is_over
        assert not game.player(1).is_active
        assert game.player(1).hand == []
        assert game.player(1).discards == [Card.KING]
        assert game.check_conservation() == []

    def test_guessing_guard_is_allowed(self, make_game):
        game, _ = make_game(2, two_player(G, G, Card.HANDMAID))
        events = game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=G)))
        assert EliminatePlayer(player_idx=1) in events

    def test_no_legal_target_plays_without_effect(self, make_game):
        game, _ = make_game(2, two_player(Card.HANDMAID, G, Card.BARON, Card.PRINCE, Card.KING))
        game.perform_action(PlayCard(0, PlayHandmaid()))
        assert game.legal_targets(1, G) == []

        events = game.perform_action(PlayCard(1, PlayGuard(target_idx=None, guess=Card.PRIEST)))
        assert events == [
            PlayCardEvent(player_idx=1, card=G),
            DealCard(player_idx=0, card=Card.KING),
            ReadyToPlay(player_idx=0),
        ]
        assert not game.player(0).is_protected


class TestPriest:
    def test_shows_target_card(self, make_game):
        game, _ = make_game(2, two_player(Card.PRIEST, Card.COUNTESS, G, Card.BARON))
        events = game.perform_action(PlayCard(0, PlayPriest(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.PRIEST),
            ShowCard(player_idx=0, target_idx=1, card=Card.COUNTESS),
            DealCard(player_idx=1, card=Card.BARON),
            ReadyToPlay(player_idx=1),
        ]
        assert game.player(1).hand == [Card.COUNTESS, Card.BARON]


class TestBaron:
    def test_higher_card_wins(self, make_game):
        game, _ = make_game(2, two_player(Card.BARON, G, Card.KING))
        events = game.perform_action(PlayCard(0, PlayBaron(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.BARON),
            CompareHands(player_idx=0, player_card=Card.KING, target_idx=1, target_card=G),
            EliminatePlayer(player_idx=1),
            RevealCard(player_idx=1, card=G),
            GameOver(winner_indices=(0,)),
        ]

    def test_lower_card_loses(self, make_game):
        game, _ = make_game(2, two_player(Card.BARON, Card.HANDMAID, Card.PRIEST))
        events = game.perform_action(PlayCard(0, PlayBaron(target_idx=1)))
        assert events[1:] == [
            CompareHands(
                player_idx=0, player_card=Card.PRIEST, target_idx=1, target_card=Card.HANDMAID
            ),
            EliminatePlayer(player_idx=0),
            RevealCard(player_idx=0, card=Card.PRIEST),
            GameOver(winner_indices=(1,)),
        ]
        assert game.player(0).discards == [Card.BARON, Card.PRIEST]

    def test_tie_nothing_happens(self, make_game):
        game, _ = make_game(
            2, two_player(Card.BARON, Card.HANDMAID, Card.HANDMAID, Card.PRINCE)
        )
        events = game.perform_action(PlayCard(0, PlayBaron(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.BARON),
            CompareHands(
                player_idx=0, player_card=Card.HANDMAID, target_idx=1, target_card=Card.HANDMAID
            ),
            DealCard(player_idx=1, card=Card.PRINCE),
            ReadyToPlay(player_idx=1),
        ]
        assert game.active_players() == [0, 1]


class TestHandmaid:
    DRAWS = [
        Card.PRINCESS,                   # 暗牌
        Card.HANDMAID, G, Card.PRIEST,   # 座位 0..2
        G,                               # 座位 0 的第二张
        G, Card.BARON, Card.KING,        # 之后依次摸到
    ]

    def test_protection_blocks_targeting(self, make_game):
        game, _ = make_game(3, self.DRAWS)
        events = game.perform_action(PlayCard(0, PlayHandmaid()))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.HANDMAID),
            DealCard(player_idx=1, card=G),
            ReadyToPlay(player_idx=1),
        ]
        assert game.player(0).is_protected
        assert game.legal_targets(1, G) == [2]

        with pytest.raises(ProtectedTargetError) as exc_info:
            game.perform_action(PlayCard(1, PlayGuard(target_idx=0, guess=G)))
        assert exc_info.value.target_id == 0

        with pytest.raises(MustProvideTargetError):
            game.perform_action(PlayCard(1, PlayGuard(target_idx=None, guess=G)))

    def test_protection_ends_at_own_turn(self, make_game):
        game, _ = make_game(3, self.DRAWS)
        game.perform_action(PlayCard(0, PlayHandmaid()))
        game.perform_action(PlayCard(1, PlayGuard(target_idx=2, guess=Card.KING)))
        assert game.turn == 2
        assert game.player(0).is_protected

        events = game.perform_action(PlayCard(2, PlayPriest(target_idx=1)))
        assert events[1] == ShowCard(player_idx=2, target_idx=1, card=G)
        assert events[-2:] == [
            DealCard(player_idx=0, card=Card.KING),
            ReadyToPlay(player_idx=0),
        ]
        assert not game.player(0).is_protected


class TestPrince:
    def test_other_player_discards_and_draws(self, make_game):
        game, _ = make_game(
            2, two_player(Card.PRINCE, Card.BARON, G, Card.HANDMAID, Card.PRIEST)
        )
        events = game.perform_action(PlayCard(0, PlayPrince(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.PRINCE),
            DiscardCard(target_idx=1, card=Card.BARON),
            DealCard(player_idx=1, card=Card.HANDMAID),
            DealCard(player_idx=1, card=Card.PRIEST),
            ReadyToPlay(player_idx=1),
        ]
        assert game.player(1).hand == [Card.HANDMAID, Card.PRIEST]
        assert game.player(1).discards == [Card.BARON]

    def test_self_target(self, make_game):
        game, _ = make_game(2, two_player(Card.PRINCE, Card.BARON, G, Card.KING, Card.PRIEST))
        events = game.perform_action(PlayCard(0, PlayPrince(target_idx=0)))
        assert events[1:3] == [
            DiscardCard(target_idx=0, card=G),
            DealCard(player_idx=0, card=Card.KING),
        ]
        assert game.player(0).hand == [Card.KING]
        assert game.player(0).discards == [Card.PRINCE, G]

    def test_forced_princess_discard_eliminates(self, make_game):
        game, _ = make_game(2, two_player(Card.PRINCE, Card.PRINCESS, G))
        events = game.perform_action(PlayCard(0, PlayPrince(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.PRINCE),
            DiscardCard(target_idx=1, card=Card.PRINCESS),
            EliminatePlayer(player_idx=1),
            GameOver(winner_indices=(0,)),
        ]
        assert game.check_conservation() == []

    def test_must_target_self_when_others_protected(self, make_game):
        game, _ = make_game(
            2, two_player(Card.HANDMAID, G, Card.BARON, Card.PRINCE, Card.KING, Card.COUNTESS)
        )
        game.perform_action(PlayCard(0, PlayHandmaid()))
        assert game.legal_targets(1, Card.PRINCE) == [1]

        with pytest.raises(MustProvideTargetError):
            game.perform_action(PlayCard(1, PlayPrince(target_idx=None)))
        with pytest.raises(ProtectedTargetError):
            game.perform_action(PlayCard(1, PlayPrince(target_idx=0)))

        events = game.perform_action(PlayCard(1, PlayPrince(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=1, card=Card.PRINCE),
            DiscardCard(target_idx=1, card=G),
            DealCard(player_idx=1, card=Card.KING),
            DealCard(player_idx=0, card=Card.COUNTESS),
            ReadyToPlay(player_idx=0),
        ]


class TestKing:
    def test_swaps_hands(self, make_game):
        game, _ = make_game(2, two_player(Card.KING, Card.PRIEST, Card.BARON, G))
        events = game.perform_action(PlayCard(0, PlayKing(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.KING),
            SwapHands(
                player_idx=0, player_card=Card.BARON, target_idx=1, target_card=Card.PRIEST
            ),
            DealCard(player_idx=1, card=G),
            ReadyToPlay(player_idx=1),
        ]
        assert game.player(0).hand == [Card.PRIEST]
        assert game.player(0).discards == [Card.KING]
        assert game.player(1).hand == [Card.BARON, G]
        assert game.player(1).discards == []
        assert game.check_conservation() == []


class TestCountess:
    @pytest.mark.parametrize(
        "first,second,locked",
        [
            (Card.COUNTESS, Card.PRINCE, PlayPrince(target_idx=1)),
            (Card.KING, Card.COUNTESS, PlayKing(target_idx=1)),
        ],
    )
    def test_lock(self, make_game, first, second, locked):
        game, _ = make_game(2, two_player(first, G, second))
        before = snapshot(game)
        with pytest.raises(CountessLockError):
            game.perform_action(PlayCard(0, locked))
        assert snapshot(game) == before

        events = game.perform_action(PlayCard(0, PlayCountess()))
        assert events[0] == PlayCardEvent(player_idx=0, card=Card.COUNTESS)
        assert game.turn == 1

    def test_other_cards_not_locked(self, make_game):
        game, _ = make_game(2, two_player(Card.COUNTESS, Card.BARON, G))
        events = game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=Card.PRIEST)))
        assert events[0] == PlayCardEvent(player_idx=0, card=G)


class TestPrincess:
    def test_playing_princess_eliminates_self(self, make_game):
        game, _ = make_game(2, two_player(Card.PRINCESS, Card.KING, G))
        events = game.perform_action(PlayCard(0, PlayPrincess()))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.PRINCESS),
            EliminatePlayer(player_idx=0),
            GameOver(winner_indices=(1,)),
        ]
        assert game.player(0).hand == [G]


# ==================== 回合推进 ====================

class TestTurnOrder:
    DRAWS = [Card.PRINCESS, G, Card.KING, G, Card.PRIEST, Card.BARON, Card.HANDMAID]

    def test_eliminated_seat_is_skipped(self, make_game):
        game, _ = make_game(3, self.DRAWS)
        events = game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=Card.KING)))
        assert events == [
            PlayCardEvent(player_idx=0, card=G),
            Guess(target_idx=1, guess=Card.KING),
            EliminatePlayer(player_idx=1),
            RevealCard(player_idx=1, card=Card.KING),
            DealCard(player_idx=2, card=Card.BARON),
            ReadyToPlay(player_idx=2),
        ]
        assert game.active_players() == [0, 2]

        with pytest.raises(EliminatedTargetError):
            game.perform_action(PlayCard(2, PlayGuard(target_idx=1, guess=G)))

        events = game.perform_action(PlayCard(2, PlayGuard(target_idx=0, guess=Card.PRINCE)))
        assert events[-1] == ReadyToPlay(player_idx=0)
        assert game.turn == 0


# ==================== 牌堆耗尽 ====================

def drain_deck(game):
    game.removed_cards.extend(game.deck.draw_pile)
    game.deck.draw_pile.clear()


class TestDeckExhausted:
    def test_highest_card_wins(self, make_game):
        game, _ = make_game(2, two_player(G, Card.KING, Card.HANDMAID))
        drain_deck(game)
        events = game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=Card.BARON)))
        assert events == [
            PlayCardEvent(player_idx=0, card=G),
            Guess(target_idx=1, guess=Card.BARON),
            GameOver(winner_indices=(1,)),
        ]
        assert game.is_over

    def test_discard_sum_breaks_tie(self, make_game):
        game, _ = make_game(2, two_player(G, Card.HANDMAID, Card.HANDMAID))
        drain_deck(game)
        events = game.perform_action(PlayCard(0, PlayGuard(target_idx=1, guess=Card.BARON)))
        assert events[-1] == GameOver(winner_indices=(0,))

    def test_prince_draws_burned_card(self, make_game):
        game, _ = make_game(2, two_player(Card.PRINCE, Card.BARON, Card.HANDMAID))
        drain_deck(game)
        events = game.perform_action(PlayCard(0, PlayPrince(target_idx=1)))
        assert events == [
            PlayCardEvent(player_idx=0, card=Card.PRINCE),
            DiscardCard(target_idx=1, card=Card.BARON),
            DealCard(player_idx=1, card=Card.PRIEST),
            GameOver(winner_indices=(0,)),
        ]
        assert not game.has_burned_card
        assert game.check_conservation() == []


# ==================== 非法动作 ====================

class TestRejectedActions:
    def test_play_before_start(self):
        game = Game(shuffler=random.Random(0), config=GameConfig())
        with pytest.raises(GameNotInProgressError):
            game.perform_action(PlayCard(0, PlayHandmaid()))

    def test_play_after_game_over(self, make_game):
        game, _ = make_game(2, two_player(Card.PRINCESS, Card.KING, G))
        game.perform_action(PlayCard(0, PlayPrincess()))
        with pytest.raises(GameNotInProgressError) as exc_info:
            game.perform_action(PlayCard(1, PlayKing(target_idx=0)))
        assert exc_info.value.current_state == "complete"

    @pytest.mark.parametrize(
        "action,error",
        [
            (PlayCard(1, PlayPriest(target_idx=0)), NotPlayerTurnError),
            (PlayCard(7, PlayPriest(target_idx=0)), PlayerNotFoundError),
            (PlayCard(0, PlayPrincess()), CardNotHeldError),
            (PlayCard(0, PlayPriest(target_idx=None)), MustProvideTargetError),
            (PlayCard(0, PlayPriest(target_idx=0)), CannotTargetSelfError),
            (PlayCard(0, PlayPriest(target_idx=4)), PlayerNotFoundError),
        ],
    )
    def test_rejected_without_state_change(self, make_game, action, error):
        game, _ = make_game(2, two_player(Card.PRIEST, Card.BARON, G))
        before = snapshot(game)
        with pytest.raises(error):
            game.perform_action(action)
        assert snapshot(game) == before

    def test_errors_share_base_class(self, make_game):
        game, _ = make_game(2, two_player(Card.PRIEST, Card.BARON, G))
        with pytest.raises(GameError):
            game.perform_action(PlayCard(1, PlayBaron(target_idx=0)))

    def test_unknown_action_type(self):
        game = Game(shuffler=random.Random(0), config=GameConfig())
        with pytest.raises(TypeError):
            game.perform_action("start")

    def test_unknown_seat_lookup(self, make_game):
        game, _ = make_game(2, two_player(Card.PRIEST, Card.BARON, G))
        with pytest.raises(PlayerNotFoundError):
            game.player(2)


class TestDebugMode:
    def test_conservation_checked_each_action(self, make_game):
        game, _ = make_game(
            2, two_player(Card.PRIEST, Card.BARON, G, Card.KING), config=GameConfig(debug_mode=True)
        )
        game.perform_action(PlayCard(0, PlayPriest(target_idx=1)))
        assert game.check_conservation() == []

    def test_str(self, make_game):
        game, _ = make_game(2, two_player(Card.PRIEST, Card.BARON, G))
        assert "in_progress" in str(game)
