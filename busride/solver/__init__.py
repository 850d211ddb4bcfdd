"""Solver engine module."""

from .tree import (
    ChoiceContractViolation,
    DeckExhausted,
    DecisionTree,
    DecisionTreeSolver,
    EvaluatedChoice,
    Outcome,
    OutcomeKind,
    SolverConfig,
    solve,
)

__all__ = [
    "ChoiceContractViolation",
    "DeckExhausted",
    "DecisionTree",
    "DecisionTreeSolver",
    "EvaluatedChoice",
    "Outcome",
    "OutcomeKind",
    "SolverConfig",
    "solve",
]
