"""
Day 4: Scratchcards.

"Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53" lists winning numbers
before the bar and the numbers you have after it.
"""

from typing import List

from ..errors import MalformedInput
from ..parsing import ints, lines, split_label


def parse_matches(text: str) -> List[int]:
    """Number of matching numbers on each card, in card order."""
    matches = []
    for line in lines(text):
        _, numbers = split_label(line)
        winning, bar, have = numbers.partition("|")
        if not bar:
            raise MalformedInput("Expected '|' between number lists", line)
        matches.append(len(set(ints(winning)) & set(ints(have))))
    return matches


def part_one(text: str) -> int:
    """Points: 1 for the first match, doubled for each further match."""
    return sum(2 ** (count - 1) for count in parse_matches(text) if count)


def part_two(text: str) -> int:
    """
    Total scratchcards once won copies are counted.

    A card with n matches wins one copy of each of the next n cards, per
    copy of itself held.
    """
    matches = parse_matches(text)
    copies = [1] * len(matches)
    for index, count in enumerate(matches):
        for following in range(index + 1, min(index + 1 + count, len(matches))):
            copies[following] += copies[index]
    return sum(copies)
