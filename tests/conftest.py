"""Pytest configuration and fixtures."""

import pytest

from busride.game.cards import Color
from busride.game.choices import Decision
from busride.solver.tree import solve

from toy_games import ColorGuess, high_card_stage


@pytest.fixture
def color_decision():
    """Single stage: red, black or cash out."""
    return Decision.with_cashout([ColorGuess(Color.RED), ColorGuess(Color.BLACK)])


@pytest.fixture
def two_stage_decision():
    """Color guess followed by a high card guess (or cash out)."""
    return Decision.with_cashout([
        ColorGuess(Color.RED, follow_up=high_card_stage),
        ColorGuess(Color.BLACK, follow_up=high_card_stage),
    ])


@pytest.fixture
def two_stage_tree(two_stage_decision):
    return solve(two_stage_decision)
