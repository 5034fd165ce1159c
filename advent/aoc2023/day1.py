"""
Day 1: Trebuchet?!

Each line's calibration value is its first digit times ten plus its last
digit. Part two also reads digits spelled out as words; spellings may
overlap ("eightwo" holds 8 and 2).
"""

import string
from typing import List

from ..parsing import lines

NUMBER_WORDS = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _calibration(digits: List[int]) -> int:
    if not digits:
        return 0
    return digits[0] * 10 + digits[-1]


def find_digits(line: str, spelled: bool = False) -> List[int]:
    """
    Digits of a line in order of appearance.

    Args:
        line: Input line
        spelled: Also match spelled-out digit names

    Returns:
        List of digit values
    """
    digits = []
    for index, char in enumerate(line):
        if char in string.digits:
            digits.append(int(char))
        elif spelled:
            for value, word in enumerate(NUMBER_WORDS):
                if line.startswith(word, index):
                    digits.append(value)
                    break
    return digits


def part_one(text: str) -> int:
    return sum(_calibration(find_digits(line)) for line in lines(text))


def part_two(text: str) -> int:
    return sum(_calibration(find_digits(line, spelled=True)) for line in lines(text))
