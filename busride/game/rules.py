"""
Ride the Bus rules.

The game runs in four stages. Each correct guess multiplies the original
bet, and the player may cash out before any stage, including the first:

1. Color (red/black): 2x
2. Higher/lower than the previous card: 3x
3. Inside/outside the range of the previous two cards: 4x
4. Suit: 10x

Scores are the factor between consecutive payouts, e.g. going from 2x to
3x scores 3/2.
"""

from enum import Enum, auto
from typing import Sequence

from .cards import Card, Color, Suit
from .choices import Choice, Decision


class _StageChoice(Choice):
    """Labels enum-based choices by member name ('Red', 'Higher', ...)."""

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


class PickColor(_StageChoice, Enum):
    """Guess the color of the first card."""
    RED = auto()
    BLACK = auto()

    def score(self, history: Sequence[Card]) -> float:
        color = Color.RED if self is PickColor.RED else Color.BLACK
        return 2.0 if history[0].color == color else 0.0  # 1x -> 2x

    def next(self) -> Decision:
        return Decision.with_cashout(PickLatitude)


class PickLatitude(_StageChoice, Enum):
    """Guess whether the card is higher or lower than the previous one."""
    HIGHER = auto()
    LOWER = auto()

    def score(self, history: Sequence[Card]) -> float:
        # Equal ranks count as higher
        higher = history[0].rank >= history[1].rank
        if higher == (self is PickLatitude.HIGHER):
            return 3.0 / 2.0  # 2x -> 3x
        return 0.0

    def next(self) -> Decision:
        return Decision.with_cashout(PickContained)


class PickContained(_StageChoice, Enum):
    """Guess whether the card falls inside the range of the last two."""
    INSIDE = auto()
    OUTSIDE = auto()

    def score(self, history: Sequence[Card]) -> float:
        low, high = sorted((history[1].rank, history[2].rank))
        inside = low <= history[0].rank <= high
        if inside == (self is PickContained.INSIDE):
            return 4.0 / 3.0  # 3x -> 4x
        return 0.0

    def next(self) -> Decision:
        return Decision.with_cashout(PickSuit)


class PickSuit(_StageChoice, Enum):
    """Guess the suit of the last card."""
    HEARTS = Suit.HEARTS
    DIAMONDS = Suit.DIAMONDS
    SPADES = Suit.SPADES
    CLUBS = Suit.CLUBS

    def score(self, history: Sequence[Card]) -> float:
        return 10.0 / 4.0 if history[0].suit == self.value else 0.0  # 4x -> 10x

    def next(self) -> Decision:
        return Decision.empty()


def ride_the_bus() -> Decision:
    """The opening decision of a game."""
    return Decision.with_cashout(PickColor)


STAGES = (PickColor, PickLatitude, PickContained, PickSuit)
