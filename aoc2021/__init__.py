"""Solvers for the 2021 Advent of Code puzzles, days 1 to 13, with a command line runner."""

__version__ = "0.1.0"