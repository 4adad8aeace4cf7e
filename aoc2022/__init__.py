"""Advent of Code 2022 puzzle solvers, one command-line module per day."""

__version__ = "0.1.0"
