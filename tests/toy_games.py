"""Small card-guessing games used by the tests."""

from typing import Callable, Optional, Sequence

from busride.game.cards import Card, Color
from busride.game.choices import Choice, Decision


class ColorGuess(Choice):
    """Doubles the pot on a card of the guessed color."""

    def __init__(self, color: Color, follow_up: Optional[Callable[[], Decision]] = None):
        self.color = color
        self.follow_up = follow_up

    @property
    def label(self) -> str:
        return self.color.name.capitalize()

    def score(self, history: Sequence[Card]) -> float:
        return 2.0 if history[0].color == self.color else 0.0

    def next(self) -> Decision:
        if self.follow_up is None:
            return Decision.empty()
        return self.follow_up()


class HighCard(Choice):
    """Triples the pot on a ten or better."""

    def score(self, history: Sequence[Card]) -> float:
        return 3.0 if history[0].rank >= 10 else 0.0

    def next(self) -> Decision:
        return Decision.empty()


class FixedScore(Choice):
    """Always scores the same value."""

    def __init__(self, value: float):
        self.value = value

    def score(self, history: Sequence[Card]) -> float:
        return self.value

    def next(self) -> Decision:
        return Decision.empty()


def high_card_stage() -> Decision:
    return Decision.with_cashout([HighCard()])
