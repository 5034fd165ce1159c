"""
Day 3: Gear Ratios.

The schematic is a character grid of numbers, "." blanks and symbols. A
number is a part number when any of its cells touches a symbol, diagonals
included.
"""

import math
import re
import string
from dataclasses import dataclass
from typing import List, Tuple

from ..parsing import lines

NUMBER_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Number:
    value: int
    row: int
    start: int
    end: int  # exclusive column

    def touches(self, row: int, column: int) -> bool:
        """Whether (row, column) is in or around this number's box."""
        return self.row - 1 <= row <= self.row + 1 and self.start - 1 <= column <= self.end


@dataclass(frozen=True)
class Symbol:
    char: str
    row: int
    column: int


def parse_schematic(text: str) -> Tuple[List[Number], List[Symbol]]:
    """
    Tokenize the grid.

    Returns:
        Tuple of (numbers, symbols) with grid coordinates
    """
    numbers = []
    symbols = []
    for row, line in enumerate(lines(text)):
        for match in NUMBER_PATTERN.finditer(line):
            numbers.append(Number(int(match.group()), row, match.start(), match.end()))
        for column, char in enumerate(line):
            if char != "." and char not in string.digits:
                symbols.append(Symbol(char, row, column))
    return numbers, symbols


def part_one(text: str) -> int:
    """Sum of all part numbers."""
    numbers, symbols = parse_schematic(text)
    return sum(
        number.value
        for number in numbers
        if any(number.touches(symbol.row, symbol.column) for symbol in symbols)
    )


def part_two(text: str) -> int:
    """Sum of gear ratios: "*" symbols touching exactly two numbers."""
    numbers, symbols = parse_schematic(text)
    total = 0
    for symbol in symbols:
        if symbol.char != "*":
            continue
        adjacent = [n.value for n in numbers if n.touches(symbol.row, symbol.column)]
        if len(adjacent) == 2:
            total += math.prod(adjacent)
    return total
