"""
Day 6: Wait For It.

Holding the button for b milliseconds of a t millisecond race travels
b * (t - b). Count the hold times that beat the record distance d.
"""

import math
from typing import List, Tuple

from ..errors import MalformedInput
from ..parsing import ints, lines, split_label, to_int


def count_ways(time: int, distance: int) -> int:
    """
    Number of integer hold times b in [0, time] with b * (time - b) > distance.

    Uses the roots of b^2 - time*b + distance = 0; the winning holds are
    symmetric around time / 2.
    """
    discriminant = time * time - 4 * distance
    if discriminant < 0:
        return 0
    low = max(0, (time - math.isqrt(discriminant)) // 2)
    while low <= time and low * (time - low) <= distance:
        low += 1
    while low > 0 and (low - 1) * (time - low + 1) > distance:
        low -= 1
    if low * 2 > time:
        return 0
    return time - 2 * low + 1


def _parse_rows(text: str) -> Tuple[str, str]:
    rows = lines(text)
    if len(rows) < 2:
        raise MalformedInput("Expected 'Time:' and 'Distance:' lines")
    times, distances = (split_label(row)[1] for row in rows[:2])
    return times, distances


def parse_races(text: str) -> List[Tuple[int, int]]:
    times, distances = _parse_rows(text)
    times, distances = ints(times), ints(distances)
    if len(times) != len(distances):
        raise MalformedInput(f"{len(times)} times but {len(distances)} distances")
    return list(zip(times, distances))


def parse_single_race(text: str) -> Tuple[int, int]:
    """Read each line's digits as one number, ignoring the spaces."""
    times, distances = _parse_rows(text)
    return to_int("".join(times.split())), to_int("".join(distances.split()))


def part_one_and_two(text: str) -> int:
    """Product of the ways to win over every race listed."""
    return math.prod(count_ways(time, distance) for time, distance in parse_races(text))


def part_one(text: str) -> int:
    return part_one_and_two(text)


def part_two(text: str) -> int:
    return count_ways(*parse_single_race(text))
