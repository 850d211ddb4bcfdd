"""Tests for command parsing and tree navigation."""

import pytest

from busride.game.cards import Card, Color
from busride.game.choices import Decision
from busride.session import (
    AdvanceStatus, CommandType, GameSession, InvalidCommand, parse_command
)
from busride.solver.tree import solve

from toy_games import ColorGuess


def card(label: str) -> Card:
    return Card.from_string(label)


class TestParseCommand:
    @pytest.mark.parametrize("line,command_type", [
        ("help", CommandType.HELP),
        ("exit", CommandType.EXIT),
        ("reset", CommandType.RESET),
        ("back", CommandType.BACK),
        ("list", CommandType.LIST_CHOICES),
        ("  HELP \n", CommandType.HELP),
    ])
    def test_keywords(self, line, command_type):
        assert parse_command(line).command_type == command_type

    def test_list_target(self):
        command = parse_command("list optimal")
        assert command.command_type == CommandType.LIST_OUTCOMES
        assert command.target == "optimal"

    def test_card(self):
        command = parse_command("10c\n")
        assert command.command_type == CommandType.CARD
        assert command.card == card("10C")

    @pytest.mark.parametrize("line", ["", "   ", "quit", "1X", "list-all"])
    def test_invalid(self, line):
        with pytest.raises(InvalidCommand):
            parse_command(line)


class TestGameSession:
    def test_starts_at_root(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        assert session.current is two_stage_tree
        assert session.depth == 0

    def test_advance_to_child(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        result = session.advance(card("5H"))

        assert result.status == AdvanceStatus.ADVANCED
        assert result.choice.label == "Red"
        assert session.current is result.outcome.child
        assert session.depth == 1

    def test_interpret_picks_winning_choice(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        assert session.interpret(card("5S")).label == "Black"
        assert session.interpret(card("5D")).label == "Red"

    def test_finish_on_leaf(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        session.advance(card("5H"))
        result = session.advance(card("KS"))

        assert result.status == AdvanceStatus.FINISHED
        assert result.choice.label == "HighCard"
        assert result.outcome.value == 6.0
        assert session.depth == 1

    def test_card_already_seen_is_invalid(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        session.advance(card("5H"))
        result = session.advance(card("5H"))

        assert result.status == AdvanceStatus.INVALID
        assert result.choice is None
        assert session.depth == 1

    def test_lost(self):
        tree = solve(Decision([ColorGuess(Color.RED)]))
        session = GameSession(tree)
        result = session.advance(card("2S"))

        assert result.status == AdvanceStatus.LOST
        assert result.outcome.value == 0.0

    def test_back(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        assert not session.back()

        session.advance(card("5H"))
        assert session.back()
        assert session.current is two_stage_tree

    def test_reset(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        session.advance(card("5H"))
        session.reset()
        assert session.current is two_stage_tree
        assert session.depth == 0

    def test_find_choice(self, two_stage_tree):
        session = GameSession(two_stage_tree)
        assert session.find_choice("optimal") is two_stage_tree.optimal()
        assert session.find_choice("BLACK").label == "Black"
        assert session.find_choice("nothing") is None
