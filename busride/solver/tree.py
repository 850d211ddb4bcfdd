"""
Exhaustive expected-value solver for card-draw decision games.

At every decision the solver evaluates each choice against every card that
could be drawn next (every deck card not yet seen on the current path, all
equally likely). Each card either loses the pot, ends the game with a new
pot, or leads to a further decision that is solved recursively. A choice's
expected value is the mean of the values realized over those cards, and the
optimal choice of a decision is the one with the highest expected value.

Draws are without replacement along one path only: sibling branches each
see the full deck minus their own history.
"""

import logging
import math
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional, Sequence

import numpy as np

from busride.game.cards import Card, FULL_DECK, remaining_cards
from busride.game.choices import Choice, Decision

logger = logging.getLogger(__name__)


class ChoiceContractViolation(ValueError):
    """Raised when a choice scores a card with a negative or non-finite value."""


class DeckExhausted(ValueError):
    """Raised when a draw is needed but every card has already been seen."""


class OutcomeKind(IntEnum):
    """How a choice resolved for one drawn card."""
    LOST = 0    # Pot fell to (effectively) zero
    LEAF = 1    # Choice won and the game ends
    CHILD = 2   # Choice won and another decision follows


@dataclass
class SolverConfig:
    """Configuration for the decision tree solver."""
    initial_pot: float = 1.0       # Bet size, or 1.0 for multipliers
    loss_threshold: float = 1e-6   # Pots below this count as lost


@dataclass(frozen=True)
class Outcome:
    """The result of drawing one card after making a choice."""
    card: Card
    kind: OutcomeKind
    value: float
    child: Optional["DecisionTree"] = None

    @property
    def is_lost(self) -> bool:
        return self.kind == OutcomeKind.LOST

    @property
    def is_leaf(self) -> bool:
        return self.kind == OutcomeKind.LEAF

    @property
    def is_child(self) -> bool:
        return self.kind == OutcomeKind.CHILD

    @property
    def count(self) -> int:
        """Number of terminal outcomes reachable through this one."""
        if self.child is not None:
            return self.child.outcome_count
        return 1


class EvaluatedChoice:
    """
    A choice together with its outcome for every card that could be drawn.

    Values and outcome kinds are stored as arrays indexed like the candidate
    cards (canonical deck order); Outcome objects are built on access.
    """

    def __init__(
        self,
        choice: Choice,
        card_indices: np.ndarray,
        values: np.ndarray,
        kinds: np.ndarray,
        children: dict[int, "DecisionTree"],
    ):
        self.choice = choice
        self._card_indices = card_indices
        self._values = values
        self._kinds = kinds
        self._children = children

        self.expected_value = float(values.mean())
        self.outcome_count = (
            int(np.count_nonzero(kinds != OutcomeKind.CHILD))
            + sum(child.outcome_count for child in children.values())
        )

    @property
    def label(self) -> str:
        return self.choice.label

    @property
    def values(self) -> np.ndarray:
        """Realized value per candidate card (read-only view)."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    @property
    def cards(self) -> list[Card]:
        return [FULL_DECK[i] for i in self._card_indices]

    def _outcome_at(self, position: int) -> Outcome:
        index = int(self._card_indices[position])
        return Outcome(
            card=FULL_DECK[index],
            kind=OutcomeKind(int(self._kinds[position])),
            value=float(self._values[position]),
            child=self._children.get(index),
        )

    def get(self, card: Card) -> Optional[Outcome]:
        """Outcome for a drawn card, or None if that card could not be drawn."""
        position = int(np.searchsorted(self._card_indices, card.index))
        if position < len(self._card_indices) and self._card_indices[position] == card.index:
            return self._outcome_at(position)
        return None

    def __iter__(self) -> Iterator[Outcome]:
        for position in range(len(self._card_indices)):
            yield self._outcome_at(position)

    def __len__(self) -> int:
        return len(self._card_indices)

    def __repr__(self) -> str:
        return f"EvaluatedChoice({self.label}, ev={self.expected_value:.4f})"


class DecisionTree:
    """
    An evaluated decision.

    Holds one EvaluatedChoice per choice of the decision, in the order the
    decision listed them. Outcomes of those choices may own further trees.
    """

    def __init__(self, choices: list[EvaluatedChoice]):
        self.choices = choices
        self.outcome_count = sum(choice.outcome_count for choice in choices)

    def optimal(self) -> Optional[EvaluatedChoice]:
        """
        The choice with the highest expected value.

        Ties go to the first such choice. None if there are no choices.
        """
        if not self.choices:
            return None
        return max(self.choices, key=lambda c: c.expected_value)

    def find(self, label: str) -> Optional[EvaluatedChoice]:
        """Find a choice by label (case-insensitive)."""
        label = label.strip().lower()
        for choice in self.choices:
            if choice.label.lower() == label:
                return choice
        return None

    @property
    def is_terminal(self) -> bool:
        return not self.choices

    def __iter__(self) -> Iterator[EvaluatedChoice]:
        return iter(self.choices)

    def __len__(self) -> int:
        return len(self.choices)

    def __repr__(self) -> str:
        return (
            f"DecisionTree(choices={[c.label for c in self.choices]}, "
            f"outcomes={self.outcome_count})"
        )


class DecisionTreeSolver:
    """
    Solves a decision by exhaustive recursion over every possible draw.

    The whole tree is built eagerly by solve(); the result is never modified
    afterwards.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()

    def solve(
        self,
        decision: Decision,
        history: Sequence[Card] = (),
    ) -> DecisionTree:
        """
        Build the full decision tree for a starting decision.

        Args:
            decision: First decision of the game
            history: Cards already revealed, most recent first

        Returns:
            The solved DecisionTree
        """
        history = _validate_history(history)
        pot = self.config.initial_pot
        if not (math.isfinite(pot) and pot >= 0.0):
            raise ValueError(f"Starting pot must be finite and non-negative: {pot!r}")

        start = time.perf_counter()
        tree = self._compute(decision, pot, history)
        elapsed = time.perf_counter() - start

        for choice in tree:
            logger.debug("%s: EV %.6f (%d outcomes)",
                         choice.label, choice.expected_value, choice.outcome_count)
        logger.info("Solved %d choices, %d outcomes in %.2fs",
                    len(tree), tree.outcome_count, elapsed)
        return tree

    def _compute(
        self,
        decision: Decision,
        pot: float,
        history: tuple[Card, ...],
    ) -> DecisionTree:
        """Evaluate every choice of a decision for the given pot and history."""
        if decision.is_terminal:
            return DecisionTree([])

        candidates = remaining_cards(history)
        if not candidates:
            raise DeckExhausted(
                f"No cards left to draw after {len(history)} revealed cards"
            )
        card_indices = np.array([card.index for card in candidates], dtype=np.int8)

        return DecisionTree([
            self._evaluate_choice(choice, pot, history, candidates, card_indices)
            for choice in decision
        ])

    def _evaluate_choice(
        self,
        choice: Choice,
        pot: float,
        history: tuple[Card, ...],
        candidates: list[Card],
        card_indices: np.ndarray,
    ) -> EvaluatedChoice:
        """Evaluate one choice against every candidate card."""
        values = np.zeros(len(candidates), dtype=np.float64)
        kinds = np.zeros(len(candidates), dtype=np.int8)
        children: dict[int, DecisionTree] = {}
        next_decision: Optional[Decision] = None

        for i, card in enumerate(candidates):
            # Newest card first
            new_history = (card,) + history
            multiplier = choice.score(new_history)
            if not (math.isfinite(multiplier) and multiplier >= 0.0):
                raise ChoiceContractViolation(
                    f"{choice.label} scored {card} as {multiplier!r}; "
                    "scores must be finite and non-negative"
                )

            new_pot = pot * multiplier
            if new_pot < self.config.loss_threshold:
                kinds[i] = OutcomeKind.LOST
                continue

            if next_decision is None:
                next_decision = choice.next()

            if next_decision.is_terminal:
                kinds[i] = OutcomeKind.LEAF
                values[i] = new_pot
                continue

            child = self._compute(next_decision, new_pot, new_history)
            best = child.optimal()
            kinds[i] = OutcomeKind.CHILD
            values[i] = best.expected_value if best is not None else new_pot
            children[card.index] = child

        return EvaluatedChoice(choice, card_indices, values, kinds, children)


def _validate_history(history: Sequence[Card]) -> tuple[Card, ...]:
    """Check that a starting history holds distinct deck cards."""
    history = tuple(history)
    deck = set(FULL_DECK)
    for card in history:
        if card not in deck:
            raise ValueError(f"Not a card of the deck: {card!r}")
    if len(set(history)) != len(history):
        raise ValueError(f"History repeats a card: {list(history)}")
    return history


def solve(
    decision: Decision,
    pot: float = 1.0,
    history: Sequence[Card] = (),
) -> DecisionTree:
    """Solve a decision starting from the given pot and history."""
    return DecisionTreeSolver(SolverConfig(initial_pot=pot)).solve(decision, history)
