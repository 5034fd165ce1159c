"""
Daily puzzle solvers.

Each day module exposes part_one(text) and part_two(text) returning an int.
"""

from .errors import PuzzleError, MalformedInput, UnknownPuzzle
from .config import SolverConfig
from .cli import get_solver, solve

__version__ = "0.1.0"

__all__ = [
    'PuzzleError',
    'MalformedInput',
    'UnknownPuzzle',
    'SolverConfig',
    'get_solver',
    'solve',
]
