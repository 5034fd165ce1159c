"""
JAX brute-force evaluation of seed ranges.

Every integer in every seed range is mapped through the pipeline with a
vectorised map, one fixed-size chunk at a time, and reduced by minimum.

Pipeline tables are uint32[num_stages, max_rules, 3] arrays holding
(source_start, destination_start, length) per rule. Stages with fewer rules
are padded with zero-length rules, which never match. Rule containment is
tested as (value - source_start) < length in wrapping uint32 arithmetic, so
values below source_start wrap to large offsets and fail the test.
"""

import logging
from functools import partial

import jax
import jax.numpy as jnp

from ..errors import MalformedInput
from .pipeline import Pipeline

log = logging.getLogger(__name__)

UINT32_LIMIT = 1 << 32

# Sentinel for masked-out chunk slots
_NO_VALUE = UINT32_LIMIT - 1


def _check_uint32(value: int, what: str, end: bool = True) -> None:
    limit = UINT32_LIMIT if end else UINT32_LIMIT - 1
    if not 0 <= value <= limit:
        raise MalformedInput(f"{what} does not fit in 32 bits", str(value))


def pipeline_tables(pipeline: Pipeline) -> jnp.ndarray:
    """
    Pack a pipeline into a padded uint32 rule table.

    Args:
        pipeline: Pipeline to pack

    Returns:
        uint32 array of shape (num_stages, max_rules, 3)
    """
    width = max([len(stage.rules) for stage in pipeline.stages] + [1])
    rows = []
    for stage in pipeline.stages:
        row = []
        for rule in stage.rules:
            _check_uint32(rule.source_start, "Rule source start", end=False)
            _check_uint32(rule.destination_start, "Rule destination start", end=False)
            _check_uint32(rule.length, "Rule length", end=False)
            _check_uint32(rule.source_end, "Rule source end")
            _check_uint32(rule.destination_start + rule.length, "Rule destination end")
            row.append((rule.source_start, rule.destination_start, rule.length))
        row += [(0, 0, 0)] * (width - len(row))
        rows.append(row)
    return jnp.array(rows, dtype=jnp.uint32).reshape(len(rows), width, 3)


def _remap_value(value: jnp.ndarray, tables: jnp.ndarray) -> jnp.ndarray:
    """Map one uint32 value through all stages."""

    def stage_step(x, table):
        offsets = x - table[:, 0]
        hits = offsets < table[:, 2]
        rule = jnp.argmax(hits.astype(jnp.int32))
        mapped = table[rule, 1] + offsets[rule]
        return jnp.where(hits[rule], mapped, x), None

    result, _ = jax.lax.scan(stage_step, value, tables)
    return result


@jax.jit
def remap_values(values: jnp.ndarray, tables: jnp.ndarray) -> jnp.ndarray:
    """
    Map a batch of values through the pipeline in parallel.

    Args:
        values: uint32 array of input values
        tables: Rule table from pipeline_tables

    Returns:
        uint32 array of mapped values, same shape as values
    """
    return jax.vmap(_remap_value, in_axes=(0, None))(values.astype(jnp.uint32), tables)


@partial(jax.jit, static_argnames=("chunk_size",))
def _chunk_min(start: jnp.ndarray, count: jnp.ndarray, tables: jnp.ndarray, chunk_size: int) -> jnp.ndarray:
    """Minimum mapped value over [start, start + count), count <= chunk_size."""
    offsets = jnp.arange(chunk_size, dtype=jnp.uint32)
    mapped = remap_values(start + offsets, tables)
    return jnp.min(jnp.where(offsets < count, mapped, jnp.uint32(_NO_VALUE)))


def _bucket(length: int, chunk_size: int) -> int:
    """Round a short range up to a power of two to bound recompilation."""
    size = 1
    while size < length and size < chunk_size:
        size <<= 1
    return min(size, chunk_size)


def lowest_in_range(start: int, length: int, tables: jnp.ndarray, chunk_size: int) -> int:
    """
    Minimum pipeline output over every integer in [start, start + length).

    Args:
        start: First seed
        length: Number of seeds, must be positive
        tables: Rule table from pipeline_tables
        chunk_size: Maximum number of seeds per vectorised batch

    Returns:
        Smallest mapped value
    """
    _check_uint32(start, "Seed range start", end=False)
    _check_uint32(start + length, "Seed range end")
    size = _bucket(length, chunk_size)
    end = start + length
    best = None
    for chunk_start in range(start, end, size):
        count = min(size, end - chunk_start)
        value = int(_chunk_min(jnp.uint32(chunk_start), jnp.uint32(count), tables, chunk_size=size))
        best = value if best is None else min(best, value)
    log.debug("Range [%d, %d) in chunks of %d -> %d", start, end, size, best)
    return best


def lowest_in_ranges(pipeline: Pipeline, ranges, chunk_size: int = 1 << 20) -> int:
    """
    Brute-force minimum over all (start, length) seed ranges.

    Raises:
        MalformedInput: If no range covers any seed, or values exceed 32 bits
    """
    tables = pipeline_tables(pipeline)
    results = [lowest_in_range(start, length, tables, chunk_size) for start, length in ranges if length > 0]
    if not results:
        raise MalformedInput("Seed ranges cover no values")
    return min(results)
