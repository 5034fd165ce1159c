"""
Lowest-location search over an almanac in scalar and range mode.
"""

import logging

from ..config import RANGE_STRATEGIES
from ..errors import MalformedInput
from .intervals import map_pipeline_intervals
from .pipeline import Almanac, apply_pipeline, seed_ranges
from .vectorized import lowest_in_ranges

log = logging.getLogger(__name__)


def lowest_location(almanac: Almanac) -> int:
    """Minimum pipeline output over the individual seed values."""
    return min(apply_pipeline(almanac.pipeline, seed) for seed in almanac.seeds)


def lowest_location_in_ranges(almanac: Almanac, strategy: str = "intervals", chunk_size: int = 1 << 20) -> int:
    """
    Minimum pipeline output over every seed covered by the (start, length) pairs.

    Args:
        almanac: Parsed almanac
        strategy: "intervals" to split whole ranges at rule boundaries, or
            "vectorized" to map each seed with JAX
        chunk_size: Seeds per batch for the vectorized strategy

    Returns:
        Smallest location; both strategies agree
    """
    ranges = seed_ranges(almanac.seeds)
    log.debug("Searching %d seed ranges with %s strategy", len(ranges), strategy)
    if strategy == "vectorized":
        return lowest_in_ranges(almanac.pipeline, ranges, chunk_size=chunk_size)
    if strategy not in RANGE_STRATEGIES:
        raise ValueError(f"Unknown range strategy: {strategy}")
    intervals = map_pipeline_intervals(almanac.pipeline, [(start, start + length) for start, length in ranges])
    if not intervals:
        raise MalformedInput("Seed ranges cover no values")
    return intervals[0][0]
