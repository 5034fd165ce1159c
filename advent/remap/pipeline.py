"""
Seed almanac model: range rules, mapping stages and the stage pipeline.

A rule maps the half-open source interval [source_start, source_start + length)
onto [destination_start, destination_start + length). Values not covered by
any rule of a stage pass through that stage unchanged.
"""

import logging
from typing import List, NamedTuple, Tuple

from ..errors import MalformedInput
from ..parsing import blocks, ints, split_label

log = logging.getLogger(__name__)


class RangeRule(NamedTuple):
    source_start: int
    destination_start: int
    length: int

    @property
    def source_end(self) -> int:
        """Exclusive end of the source interval."""
        return self.source_start + self.length

    @property
    def offset(self) -> int:
        return self.destination_start - self.source_start

    def contains(self, value: int) -> bool:
        return self.source_start <= value < self.source_end


class MappingStage(NamedTuple):
    rules: Tuple[RangeRule, ...]
    name: str = ""


class Pipeline(NamedTuple):
    stages: Tuple[MappingStage, ...]


class Almanac(NamedTuple):
    seeds: Tuple[int, ...]
    pipeline: Pipeline


# ============================================================================
# PER-VALUE APPLICATION
# ============================================================================

def apply_stage(stage: MappingStage, value: int) -> int:
    """
    Translate a value through one stage.

    Args:
        stage: Mapping stage to apply
        value: Input value

    Returns:
        destination_start + (value - source_start) for the first rule that
        contains the value, otherwise the value unchanged
    """
    for rule in stage.rules:
        if rule.contains(value):
            return value + rule.offset
    return value


def apply_pipeline(pipeline: Pipeline, value: int) -> int:
    """Apply every stage of the pipeline in order."""
    for stage in pipeline.stages:
        value = apply_stage(stage, value)
    return value


def seed_ranges(seeds) -> List[Tuple[int, int]]:
    """
    Pair up seeds as (start, length) ranges.

    Raises:
        MalformedInput: If the seed count is odd
    """
    if len(seeds) % 2:
        raise MalformedInput(f"Seed ranges need an even number of values, got {len(seeds)}")
    return [(seeds[i], seeds[i + 1]) for i in range(0, len(seeds), 2)]


# ============================================================================
# PARSING
# ============================================================================

def parse_rule(line: str) -> RangeRule:
    """Parse "destination source length" into a RangeRule."""
    values = ints(line)
    if len(values) != 3:
        raise MalformedInput("Expected 'destination source length'", line)
    destination, source, length = values
    if length < 0:
        raise MalformedInput("Rule length must not be negative", line)
    return RangeRule(source_start=source, destination_start=destination, length=length)


def parse_stage(block: List[str]) -> MappingStage:
    """Parse a "<from>-to-<to> map:" header followed by rule lines."""
    header, *rule_lines = block
    if not header.endswith("map:"):
        raise MalformedInput("Expected a '<from>-to-<to> map:' header", header)
    name = header[: -len("map:")].strip()
    return MappingStage(rules=tuple(parse_rule(line) for line in rule_lines), name=name)


def parse_almanac(text: str) -> Almanac:
    """
    Parse puzzle input into seeds and a pipeline.

    Args:
        text: Input beginning with "seeds: ..." followed by map blocks

    Returns:
        Almanac with seeds in input order and stages in input order
    """
    paragraphs = blocks(text)
    if not paragraphs:
        raise MalformedInput("Empty almanac")
    first, *stage_blocks = paragraphs
    label, rest = split_label(first[0])
    if label != "seeds":
        raise MalformedInput("Expected 'seeds:' line", first[0])
    seeds = tuple(ints(" ".join([rest] + first[1:])))
    if not seeds:
        raise MalformedInput("No seeds listed", first[0])
    stages = tuple(parse_stage(block) for block in stage_blocks)
    log.debug("Parsed %d seeds and %d stages", len(seeds), len(stages))
    return Almanac(seeds=seeds, pipeline=Pipeline(stages=stages))
