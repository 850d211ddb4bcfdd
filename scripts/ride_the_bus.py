#!/usr/bin/env python3
"""Solve Ride the Bus and play along interactively."""

import argparse
import logging
import math
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from busride.game.rules import ride_the_bus
from busride.session import (
    AdvanceStatus, CommandType, GameSession, InvalidCommand, parse_command
)
from busride.solver import DecisionTreeSolver, SolverConfig
from busride.viz import TreeDisplay


def main():
    parser = argparse.ArgumentParser(
        description="Find the optimal Ride the Bus choices as the game is dealt"
    )
    parser.add_argument(
        "-p", "--pot",
        type=float,
        default=1.0,
        help="Bet size; expected values are scaled by it (default: 1.0)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args()
    console = Console()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    if not (math.isfinite(args.pot) and args.pot > 0):
        console.print("[red]Pot must be a positive number[/]")
        return 1

    solver = DecisionTreeSolver(SolverConfig(initial_pot=args.pot))
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("Solving Ride the Bus (every possible deal)...")
        tree = solver.solve(ride_the_bus())

    console.print(f"[green]All {tree.outcome_count:,} games considered![/]")

    display = TreeDisplay(console)
    display.display_help()

    session = GameSession(tree)
    try:
        while True:
            console.print()
            _play_round(console, display, session)
            session.reset()
    except (KeyboardInterrupt, EOFError):
        console.print()
    return 0


def _play_round(console: Console, display: TreeDisplay, session: GameSession) -> None:
    """Play one game, from the first decision until it is lost or cashed out."""
    display.display_choices(session.current)

    while True:
        try:
            command = parse_command(console.input("? "))
        except InvalidCommand:
            console.print("[red]invalid command[/]")
            continue

        if command.command_type == CommandType.HELP:
            display.display_help()
        elif command.command_type == CommandType.EXIT:
            sys.exit(0)
        elif command.command_type == CommandType.LIST_CHOICES:
            display.display_choices(session.current)
        elif command.command_type == CommandType.LIST_OUTCOMES:
            choice = session.find_choice(command.target)
            if choice is None:
                console.print("[red]invalid list target[/]")
            else:
                display.display_outcomes(choice)
        elif command.command_type == CommandType.RESET:
            return
        elif command.command_type == CommandType.BACK:
            if not session.back():
                console.print("[yellow]Already at the first decision[/]")
            display.display_choices(session.current)
        elif command.command_type == CommandType.CARD:
            result = session.advance(command.card)
            console.print()
            if result.status == AdvanceStatus.INVALID:
                console.print("[red]!!! INVALID CARD PROVIDED !!![/]")
                continue

            console.print(f"[bold]So you chose {result.choice.label}[/]")
            if result.status == AdvanceStatus.ADVANCED:
                display.display_choices(session.current)
            elif result.status == AdvanceStatus.LOST:
                console.print("[red]Lost! Resetting.[/]")
                return
            else:
                console.print(f"[green]Finished with {result.outcome.value:.4f}. Resetting.[/]")
                return


if __name__ == "__main__":
    sys.exit(main())
