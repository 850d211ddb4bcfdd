"""Tests for card representation."""

import pytest

from busride.game.cards import (
    Card, Color, Rank, Suit, FULL_DECK, RANK_STR, SUIT_STR,
    InvalidCardFormat, deck_iter, remaining_cards
)


class TestCard:
    def test_from_string(self):
        card = Card.from_string("AS")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_from_string_ten(self):
        card = Card.from_string("10C")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.CLUBS

    def test_from_string_lowercase(self):
        card = Card.from_string("qd")
        assert card.rank == Rank.QUEEN
        assert card.suit == Suit.DIAMONDS

    def test_from_string_mixed_case_and_whitespace(self):
        assert Card.from_string(" 2h\n") == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_string("kS") == Card(Rank.KING, Suit.SPADES)

    def test_str(self):
        assert str(Card(Rank.ACE, Suit.SPADES)) == "AS"
        assert str(Card(Rank.TEN, Suit.HEARTS)) == "10H"

    @pytest.mark.parametrize("label", ["XS", "AX", "1H", "T", "TH", "", "AS2", "11H"])
    def test_from_string_invalid(self, label):
        with pytest.raises(InvalidCardFormat):
            Card.from_string(label)

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            Card.from_string("ZZ")

    def test_color(self):
        assert Card.from_string("2H").color == Color.RED
        assert Card.from_string("2D").color == Color.RED
        assert Card.from_string("2S").color == Color.BLACK
        assert Card.from_string("2C").color == Color.BLACK

    def test_color_follows_suit_bit(self):
        for card in FULL_DECK:
            assert card.color == (card.suit >> 1)

    def test_equality(self):
        assert Card.from_string("AS") == Card.from_string("as")
        assert Card.from_string("AS") != Card.from_string("AC")

    def test_from_index(self):
        assert Card.from_index(0) == Card(Rank.TWO, Suit.HEARTS)
        assert Card.from_index(51) == Card(Rank.ACE, Suit.CLUBS)

    def test_from_index_out_of_range(self):
        with pytest.raises(ValueError):
            Card.from_index(52)


class TestDeck:
    def test_full_deck(self):
        assert len(FULL_DECK) == 52
        assert len(set(FULL_DECK)) == 52

    def test_canonical_order(self):
        assert [card.index for card in FULL_DECK] == list(range(52))
        assert [str(card) for card in FULL_DECK[:5]] == ["2H", "2D", "2S", "2C", "3H"]

    def test_deck_iter_restartable(self):
        assert list(deck_iter()) == list(deck_iter())
        assert list(deck_iter()) == list(FULL_DECK)

    def test_every_rank_and_suit(self):
        ranks = {card.rank for card in FULL_DECK}
        suits = {card.suit for card in FULL_DECK}
        assert ranks == set(RANK_STR)
        assert suits == set(SUIT_STR)

    def test_colors_split_evenly(self):
        reds = [card for card in FULL_DECK if card.color == Color.RED]
        assert len(reds) == 26

    def test_round_trip(self):
        for card in FULL_DECK:
            assert Card.from_string(str(card)) == card
            assert Card.from_string(str(card).lower()) == card

    def test_remaining_cards(self):
        seen = [Card.from_string("AS"), Card.from_string("2H")]
        remaining = remaining_cards(seen)
        assert len(remaining) == 50
        assert not set(seen) & set(remaining)
        assert remaining == sorted(remaining, key=lambda c: c.index)
