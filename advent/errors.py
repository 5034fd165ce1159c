"""
Exception types shared by the puzzle solvers.

Every solver fails fast: the first malformed record aborts the whole
computation with a message naming the offending token or line.
"""


class PuzzleError(Exception):
    """Base class for all solver errors."""


class MalformedInput(PuzzleError, ValueError):
    """Input text does not match the puzzle's format."""

    def __init__(self, message: str, record: str = None):
        if record is not None:
            message = f"{message}: {record!r}"
        super().__init__(message)
        self.record = record


class UnknownPuzzle(PuzzleError, LookupError):
    """No solver is registered for the requested year and day."""

    def __init__(self, year: int, day: int):
        super().__init__(f"No solver for {year} day {day}")
        self.year = year
        self.day = day
