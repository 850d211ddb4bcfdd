"""Game representation module."""

from .cards import Card, Color, Rank, Suit, FULL_DECK, InvalidCardFormat, deck_iter
from .choices import Cashout, Choice, Decision
from .rules import PickColor, PickContained, PickLatitude, PickSuit, ride_the_bus

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "FULL_DECK",
    "InvalidCardFormat",
    "deck_iter",
    "Cashout",
    "Choice",
    "Decision",
    "PickColor",
    "PickContained",
    "PickLatitude",
    "PickSuit",
    "ride_the_bus",
]
