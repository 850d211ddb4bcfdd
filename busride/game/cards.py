"""Card representation and deck enumeration."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. Bit 1 of the value encodes the color."""
    HEARTS = 0
    DIAMONDS = 1
    SPADES = 2
    CLUBS = 3


class Color(IntEnum):
    """Card colors."""
    RED = 0
    BLACK = 1


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "10", 11: "J", 12: "Q", 13: "K", 14: "A"
}
SUIT_STR = {0: "H", 1: "D", 2: "S", 3: "C"}

DECK_SIZE = 52


class InvalidCardFormat(ValueError):
    """Raised when a card label matches no card of the deck."""


@dataclass(frozen=True)
class Card:
    """A playing card."""
    rank: int  # 2-14
    suit: int  # 0-3

    @property
    def color(self) -> Color:
        return Color((self.suit & 0b10) >> 1)

    @property
    def index(self) -> int:
        """Position of the card in the canonical deck (0-51)."""
        return (self.rank - 2) * 4 + self.suit

    @property
    def label(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Build the card at a canonical deck position."""
        if not 0 <= index < DECK_SIZE:
            raise ValueError(f"Card index out of range: {index}")
        return cls(rank=(index >> 2) + 2, suit=index & 0b11)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Parse card from a label like '2H', '10c', 'qd', 'AS'.

        Raises:
            InvalidCardFormat: if no card of the deck has that label
        """
        card = _LABELS.get(s.strip().upper())
        if card is None:
            raise InvalidCardFormat(f"Invalid card string: {s!r}")
        return card


def deck_iter() -> Iterator[Card]:
    """Iterate over the full deck in canonical order (rank, then suit)."""
    return iter(FULL_DECK)


def remaining_cards(seen: Iterable[Card]) -> list[Card]:
    """Cards of the deck not in `seen`, in canonical order."""
    seen = set(seen)
    return [card for card in FULL_DECK if card not in seen]


FULL_DECK: tuple[Card, ...] = tuple(
    Card(rank, suit)
    for rank in range(2, 15)
    for suit in range(4)
)
_LABELS = {card.label: card for card in FULL_DECK}
