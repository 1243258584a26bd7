"""Solvers for spaceship-themed puzzles built around an Intcode computer."""

__version__ = "0.1.0"