"""Terminal display of solved decision trees."""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from busride.game.cards import Color
from busride.solver.tree import DecisionTree, EvaluatedChoice

# Values within this distance of the optimal EV are marked as best
EV_TOLERANCE = 1e-6

HELP_TEXT = """\
[bold]Commands[/]
  help                    This message
  exit                    Quit the program
  list                    Show the choices and their expected values
  list <choice|optimal>   Show the winning cards of a choice
  reset                   Start over (new game)
  back                    Go back to the previous decision
  <card>                  Enter the card the dealer revealed

[bold]Card format[/]
  Rank (2-10, J, Q, K, A) followed by suit (H, D, S, C), case insensitive.
  2H = 2 of hearts, 10C = 10 of clubs, QD = Queen of diamonds, AS = Ace of spades

[bold]How to play[/]
  1. Pick the choice marked with an arrow (highest expected value).
  2. Enter the card the dealer places in front of you.
  3. Your choice is worked out from the card and the next choices are shown.
  4. Repeat until you lose or cash out, then start over with 'reset'."""


class TreeDisplay:
    """Renders decisions and outcomes with rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def display_help(self) -> None:
        self.console.print(HELP_TEXT)

    def display_choices(self, tree: DecisionTree, title: str = "Choices") -> None:
        """Show every choice of a decision with its expected value."""
        if tree.is_terminal:
            self.console.print("[dim]No choices left.[/]")
            return

        best = tree.optimal()
        table = Table(title=title, show_header=True, header_style="bold")
        table.add_column("Choice", style="bold")
        table.add_column("Expected Value", justify="right")
        table.add_column("", justify="left")

        for choice in tree:
            is_best = choice.expected_value >= best.expected_value - EV_TOLERANCE
            table.add_row(
                choice.label,
                f"{choice.expected_value:.4f}",
                Text("<----", style="green") if is_best else "",
            )

        self.console.print(table)

    def display_outcomes(self, choice: EvaluatedChoice) -> None:
        """Show the winning cards of a choice and the value each realizes."""
        table = Table(title=choice.label, show_header=True, header_style="bold")
        table.add_column("Card", justify="center")
        table.add_column("Expected Value", justify="right")

        winners = 0
        for outcome in choice:
            if outcome.value <= EV_TOLERANCE:
                continue
            winners += 1
            style = "red" if outcome.card.color == Color.RED else "white"
            table.add_row(Text(outcome.card.label, style=style), f"{outcome.value:.4f}")

        if winners == 0:
            self.console.print(f"[dim]{choice.label} has no winning cards.[/]")
            return
        self.console.print(table)
