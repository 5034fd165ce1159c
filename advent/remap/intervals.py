"""
Interval propagation through a pipeline.

Instead of mapping every covered integer, whole half-open intervals are
pushed through each stage, split at rule boundaries and merged again. The
result is identical to mapping each value separately.
"""

from typing import Iterable, List, Tuple

from .pipeline import MappingStage, Pipeline

Interval = Tuple[int, int]  # half-open [start, end)


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """
    Sort intervals and merge overlapping or touching ones.

    Empty intervals are dropped.
    """
    merged = []
    for start, end in sorted(i for i in intervals if i[0] < i[1]):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def map_stage_intervals(stage: MappingStage, intervals: Iterable[Interval]) -> List[Interval]:
    """
    Map intervals through one stage.

    Rules are tried in order; the part of an interval a rule covers is
    translated, the rest stays pending for later rules and finally passes
    through unchanged.

    Args:
        stage: Mapping stage
        intervals: Half-open input intervals

    Returns:
        Merged list of output intervals
    """
    pending = list(intervals)
    mapped = []
    for rule in stage.rules:
        remaining = []
        for start, end in pending:
            low = max(start, rule.source_start)
            high = min(end, rule.source_end)
            if low < high:
                mapped.append((low + rule.offset, high + rule.offset))
            if start < min(end, rule.source_start):
                remaining.append((start, min(end, rule.source_start)))
            if max(start, rule.source_end) < end:
                remaining.append((max(start, rule.source_end), end))
        pending = remaining
    return merge_intervals(mapped + pending)


def map_pipeline_intervals(pipeline: Pipeline, intervals: Iterable[Interval]) -> List[Interval]:
    """Map intervals through every stage in order."""
    current = merge_intervals(intervals)
    for stage in pipeline.stages:
        current = map_stage_intervals(stage, current)
    return current
