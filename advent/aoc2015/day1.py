"""
Day 1: Not Quite Lisp.

"(" moves one floor up, ")" one floor down; other characters are ignored.
"""

MOVES = {"(": 1, ")": -1}


def move_floor(floor: int, symbol: str) -> int:
    return floor + MOVES.get(symbol, 0)


def part_one(text: str) -> int:
    """Floor reached after following every instruction."""
    floor = 0
    for symbol in text:
        floor = move_floor(floor, symbol)
    return floor


def part_two(text: str) -> int:
    """1-based position of the first instruction that reaches the basement, or 0."""
    floor = 0
    for position, symbol in enumerate(text, start=1):
        floor = move_floor(floor, symbol)
        if floor == -1:
            return position
    return 0
