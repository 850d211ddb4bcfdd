"""Walking a player through a solved decision tree."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from busride.game.cards import Card
from busride.solver.tree import DecisionTree, EvaluatedChoice, Outcome


class AdvanceStatus(Enum):
    """What happened after a card was revealed."""
    ADVANCED = auto()   # Moved on to the next decision
    FINISHED = auto()   # Choice won and the game is over
    LOST = auto()       # Choice lost the pot
    INVALID = auto()    # Card cannot be drawn here (e.g. already seen)


@dataclass
class AdvanceResult:
    """Result of revealing a card."""
    status: AdvanceStatus
    choice: Optional[EvaluatedChoice] = None
    outcome: Optional[Outcome] = None


class GameSession:
    """
    Tracks a player's position in a solved tree.

    Keeps the path of trees visited since the root so the player can step
    back after entering a wrong card.
    """

    def __init__(self, root: DecisionTree):
        self.root = root
        self._path: list[DecisionTree] = [root]

    @property
    def current(self) -> DecisionTree:
        return self._path[-1]

    @property
    def depth(self) -> int:
        """Number of decisions made since the root."""
        return len(self._path) - 1

    def find_choice(self, name: str) -> Optional[EvaluatedChoice]:
        """Look up a choice of the current decision ('optimal' for the best)."""
        if name.strip().lower() == "optimal":
            return self.current.optimal()
        return self.current.find(name)

    def interpret(self, card: Card) -> Optional[EvaluatedChoice]:
        """
        Work out which choice the player made from the card they drew.

        Winning cards of the stage choices are disjoint, so the choice whose
        outcome for this card is worth the most is the one that was played.
        Cashout never beats a winning guess.
        """
        best: Optional[EvaluatedChoice] = None
        best_value = 0.0
        for choice in self.current:
            outcome = choice.get(card)
            if outcome is None:
                continue
            if best is None or outcome.value > best_value:
                best = choice
                best_value = outcome.value
        return best

    def advance(self, card: Card) -> AdvanceResult:
        """Reveal a card and move to the decision that follows it."""
        choice = self.interpret(card)
        if choice is None:
            return AdvanceResult(AdvanceStatus.INVALID)

        outcome = choice.get(card)
        if outcome.is_child:
            self._path.append(outcome.child)
            return AdvanceResult(AdvanceStatus.ADVANCED, choice, outcome)
        if outcome.is_lost:
            return AdvanceResult(AdvanceStatus.LOST, choice, outcome)
        return AdvanceResult(AdvanceStatus.FINISHED, choice, outcome)

    def back(self) -> bool:
        """Undo the last decision. Returns False when already at the root."""
        if len(self._path) == 1:
            return False
        self._path.pop()
        return True

    def reset(self) -> None:
        """Start over from the root."""
        self._path = [self.root]
