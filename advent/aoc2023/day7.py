"""
Day 7: Camel Cards.

Each line is a five-card hand and a bid. Winnings are each bid times the
hand's rank among all hands. Part two treats J as a wildcard.
"""

from ..hands import PLAIN, WILDCARD, parse_hands, total_winnings


def part_one(text: str) -> int:
    return total_winnings(parse_hands(text, PLAIN))


def part_two(text: str) -> int:
    return total_winnings(parse_hands(text, WILDCARD))
