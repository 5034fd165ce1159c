"""
Day 5: If You Give A Seed A Fertilizer.

Seeds are mapped through the almanac's seed-to-soil ... humidity-to-location
stages. Part one treats seeds as single values, part two as (start, length)
ranges.
"""

from ..config import SolverConfig
from ..remap import lowest_location, lowest_location_in_ranges, parse_almanac


def part_one(text: str) -> int:
    """Lowest location for any listed seed."""
    return lowest_location(parse_almanac(text))


def part_two(text: str, config: SolverConfig = None) -> int:
    """Lowest location for any seed covered by the seed ranges."""
    config = config or SolverConfig()
    return lowest_location_in_ranges(
        parse_almanac(text),
        strategy=config.range_strategy,
        chunk_size=config.chunk_size,
    )
