"""Interactive session support."""

from .commands import Command, CommandType, InvalidCommand, parse_command
from .navigator import AdvanceResult, AdvanceStatus, GameSession

__all__ = [
    "Command",
    "CommandType",
    "InvalidCommand",
    "parse_command",
    "AdvanceResult",
    "AdvanceStatus",
    "GameSession",
]
