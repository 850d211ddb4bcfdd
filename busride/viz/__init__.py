"""Visualization module."""

from .tree_view import TreeDisplay, HELP_TEXT

__all__ = [
    "TreeDisplay",
    "HELP_TEXT",
]
