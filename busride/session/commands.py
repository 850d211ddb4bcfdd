"""Parsing of interactive commands."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from busride.game.cards import Card, InvalidCardFormat


class CommandType(Enum):
    """Commands understood by the interactive prompt."""
    HELP = auto()
    EXIT = auto()
    LIST_CHOICES = auto()
    LIST_OUTCOMES = auto()
    RESET = auto()
    BACK = auto()
    CARD = auto()


class InvalidCommand(ValueError):
    """Raised when a line is neither a known command nor a card."""


@dataclass(frozen=True)
class Command:
    """A parsed command line."""
    command_type: CommandType
    target: Optional[str] = None   # Choice label or 'optimal' for LIST_OUTCOMES
    card: Optional[Card] = None    # Revealed card for CARD


_KEYWORDS = {
    "help": CommandType.HELP,
    "exit": CommandType.EXIT,
    "reset": CommandType.RESET,
    "back": CommandType.BACK,
}


def parse_command(line: str) -> Command:
    """
    Parse one line of user input.

    Examples:
        "help"         -> HELP
        "list"         -> LIST_CHOICES
        "list optimal" -> LIST_OUTCOMES of the optimal choice
        "10c"          -> CARD (10 of clubs)

    Raises:
        InvalidCommand: if the line matches no command or card
    """
    parts = line.split()
    if not parts:
        raise InvalidCommand("Empty command")

    keyword = parts[0].lower()
    if keyword == "list":
        if len(parts) > 1:
            return Command(CommandType.LIST_OUTCOMES, target=parts[1])
        return Command(CommandType.LIST_CHOICES)

    if keyword in _KEYWORDS:
        return Command(_KEYWORDS[keyword])

    try:
        card = Card.from_string(parts[0])
    except InvalidCardFormat as e:
        raise InvalidCommand(f"Invalid command: {line.strip()!r}") from e
    return Command(CommandType.CARD, card=card)
