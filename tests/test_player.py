"""Tests for love_letter.player."""

import pytest

from love_letter.card import Card
from love_letter.exceptions import CardNotHeldError
from love_letter.player import Player


class TestPlayer:
    def test_defaults(self):
        p = Player(seat=2)
        assert p.hand == []
        assert p.discards == []
        assert p.is_active
        assert not p.is_protected
        assert p.hand_count == 0

    def test_receive_and_holds(self):
        p = Player(seat=0)
        p.receive(Card.GUARD)
        p.receive(Card.KING)
        assert p.holds(Card.KING)
        assert not p.holds(Card.PRINCESS)
        assert p.hand_count == 2

    def test_discard_moves_card(self):
        p = Player(seat=0, hand=[Card.GUARD, Card.BARON])
        p.discard(Card.GUARD)
        assert p.hand == [Card.BARON]
        assert p.discards == [Card.GUARD]

    def test_discard_only_one_copy(self):
        p = Player(seat=0, hand=[Card.GUARD, Card.GUARD])
        p.discard(Card.GUARD)
        assert p.hand == [Card.GUARD]

    def test_discard_missing_card_raises(self):
        p = Player(seat=1, hand=[Card.GUARD])
        with pytest.raises(CardNotHeldError) as exc_info:
            p.discard(Card.PRINCESS)
        assert exc_info.value.player_id == 1
        assert exc_info.value.card is Card.PRINCESS
        assert p.hand == [Card.GUARD]
        assert p.discards == []

    def test_solo_card(self):
        assert Player(seat=0).solo_card() is None
        assert Player(seat=0, hand=[Card.KING]).solo_card() is Card.KING
        assert Player(seat=0, hand=[Card.KING, Card.GUARD]).solo_card() is None

    def test_take_solo_card_discards(self):
        p = Player(seat=0, hand=[Card.PRIEST])
        assert p.take_solo_card() is Card.PRIEST
        assert p.hand == []
        assert p.discards == [Card.PRIEST]

    def test_take_solo_card_needs_exactly_one(self):
        p = Player(seat=0, hand=[Card.PRIEST, Card.GUARD])
        assert p.take_solo_card() is None
        assert p.hand_count == 2

    def test_take_card_does_not_discard(self):
        p = Player(seat=0, hand=[Card.KING])
        assert p.take_card() is Card.KING
        assert p.discards == []

    def test_discard_value_sum(self):
        p = Player(seat=0, discards=[Card.GUARD, Card.PRINCE, Card.HANDMAID])
        assert p.discard_value_sum() == 10
        assert Player(seat=1).discard_value_sum() == 0

    def test_protection_flags(self):
        p = Player(seat=0)
        p.protect()
        assert p.is_protected
        p.unprotect()
        assert not p.is_protected

    def test_eliminate(self):
        p = Player(seat=0)
        p.eliminate()
        assert not p.is_active
