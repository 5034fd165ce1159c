"""
Text front end shared by the day modules.

Splits puzzle input into trimmed lines, blank-line separated blocks and
whitespace-delimited integers. Anything that should be a number but is not
raises MalformedInput.
"""

import re
from typing import List

from .errors import MalformedInput

INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def ws(text: str) -> str:
    """Strip surrounding whitespace."""
    return text.strip()


def lines(text: str) -> List[str]:
    """
    Split text into trimmed, non-empty lines.

    Args:
        text: Raw puzzle input

    Returns:
        List of lines with surrounding whitespace removed
    """
    return [ws(line) for line in text.splitlines() if ws(line)]


def blocks(text: str) -> List[List[str]]:
    """
    Split text into paragraphs separated by blank lines.

    Args:
        text: Raw puzzle input

    Returns:
        List of blocks, each a list of trimmed non-empty lines
    """
    result = []
    current = []
    for line in text.splitlines():
        line = ws(line)
        if line:
            current.append(line)
        elif current:
            result.append(current)
            current = []
    if current:
        result.append(current)
    return result


def to_int(token: str) -> int:
    """Parse one ASCII decimal integer token, naming it on failure."""
    if not INT_PATTERN.fullmatch(token):
        raise MalformedInput("Expected an integer", token)
    return int(token)


def ints(text: str) -> List[int]:
    """
    Parse whitespace-delimited integers.

    Args:
        text: String like "79 14 55 13"

    Returns:
        List of integers in input order
    """
    return [to_int(token) for token in text.split()]


def split_label(line: str, separator: str = ":") -> tuple:
    """
    Split "Label: rest" into its two trimmed halves.

    Raises:
        MalformedInput: If the separator is missing
    """
    label, sep, rest = line.partition(separator)
    if not sep:
        raise MalformedInput(f"Expected '{separator}'", line)
    return ws(label), ws(rest)
