"""
busride: Ride the Bus Solver

Computes the expected value of every choice in Ride the Bus (and any other
staged card-guessing game) by exhaustive search over the remaining deck,
and walks a player through the optimal line.
"""

__version__ = "0.1.0"
