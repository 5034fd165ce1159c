"""
Range remapping through an ordered pipeline of mapping tables.

Supports per-value application, interval propagation and JAX-vectorised
brute-force search over seed ranges.
"""

from .pipeline import (
    RangeRule, MappingStage, Pipeline, Almanac,
    apply_stage, apply_pipeline, parse_almanac, seed_ranges
)
from .intervals import map_stage_intervals, map_pipeline_intervals, merge_intervals
from .search import lowest_location, lowest_location_in_ranges

__all__ = [
    'RangeRule',
    'MappingStage',
    'Pipeline',
    'Almanac',
    'apply_stage',
    'apply_pipeline',
    'parse_almanac',
    'seed_ranges',
    'map_stage_intervals',
    'map_pipeline_intervals',
    'merge_intervals',
    'lowest_location',
    'lowest_location_in_ranges',
]
