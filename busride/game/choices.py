"""Choices and decisions offered to the player."""

from typing import Iterable, Iterator, Sequence

from .cards import Card


class Choice:
    """
    An option in a decision.

    A choice turns the pot into a new pot once the next card is revealed,
    and may lead to a further decision. Game rules subclass this (usually
    as an Enum of the options of one stage).
    """

    @property
    def label(self) -> str:
        """Display name of the choice."""
        return type(self).__name__

    def score(self, history: Sequence[Card]) -> float:
        """
        Pot multiplier for this choice given the card history.

        1.0 is the identity: a correct guess that doubles the money scores
        2.0, a wrong one scores 0.0.

        Args:
            history: Revealed cards, most recent first. Index 0 is the card
                just drawn for this choice, index 1 the card before it, etc.

        Returns:
            A finite multiplier >= 0
        """
        raise NotImplementedError

    def next(self) -> "Decision":
        """The decision that follows this choice (empty if terminal)."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.label


class Cashout(Choice):
    """Take the pot and stop playing."""

    def score(self, history: Sequence[Card]) -> float:
        return 1.0

    def next(self) -> "Decision":
        return Decision.empty()

    def __eq__(self, other) -> bool:
        return isinstance(other, Cashout)

    def __hash__(self) -> int:
        return hash(Cashout)

    def __repr__(self) -> str:
        return "Cashout()"


class Decision:
    """
    An ordered collection of the choices available at one decision point.

    Order only matters for display. An empty decision is a terminal state.
    """

    def __init__(self, choices: Iterable[Choice] = ()):
        self.choices: list[Choice] = list(choices)

    @classmethod
    def empty(cls) -> "Decision":
        """A decision with no choices."""
        return cls()

    @classmethod
    def with_cashout(cls, choices: Iterable[Choice]) -> "Decision":
        """A decision of the given choices plus the option to cash out."""
        return cls([*choices, Cashout()])

    @property
    def is_terminal(self) -> bool:
        return not self.choices

    def __iter__(self) -> Iterator[Choice]:
        return iter(self.choices)

    def __len__(self) -> int:
        return len(self.choices)

    def __repr__(self) -> str:
        labels = ", ".join(choice.label for choice in self.choices)
        return f"Decision([{labels}])"
