"""Worked solutions to classic data-structure and algorithm exercises, with a small check-runner harness."""

__version__ = "0.1.0"