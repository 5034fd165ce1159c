"""
Day 8: Haunted Wasteland.

The first line is a cyclic L/R instruction string; every other line is a
node "AAA = (BBB, CCC)" naming its left and right neighbours.
"""

import logging
import math
import re
from itertools import cycle
from typing import Callable, Dict, NamedTuple, Tuple

from ..errors import MalformedInput
from ..parsing import blocks

log = logging.getLogger(__name__)

NODE_PATTERN = re.compile(r"^(\w+)\s*=\s*\(\s*(\w+)\s*,\s*(\w+)\s*\)$")
DIRECTIONS = {"L": 0, "R": 1}


class Network(NamedTuple):
    instructions: str
    nodes: Dict[str, Tuple[str, str]]


def parse_network(text: str) -> Network:
    paragraphs = blocks(text)
    if len(paragraphs) < 2:
        raise MalformedInput("Expected instructions, a blank line and nodes")
    instructions = "".join(paragraphs[0])
    for direction in instructions:
        if direction not in DIRECTIONS:
            raise MalformedInput("Unknown direction", direction)
    nodes = {}
    for line in (line for block in paragraphs[1:] for line in block):
        match = NODE_PATTERN.match(line)
        if match is None:
            raise MalformedInput("Expected 'NODE = (LEFT, RIGHT)'", line)
        name, left, right = match.groups()
        nodes[name] = (left, right)
    return Network(instructions=instructions, nodes=nodes)


def count_steps(network: Network, start: str, is_end: Callable[[str], bool]) -> int:
    """
    Steps taken from start until is_end holds.

    Raises:
        MalformedInput: If a node is missing or the walk loops without ending
    """
    node = start
    seen = set()
    period = len(network.instructions)
    for steps, direction in enumerate(cycle(network.instructions)):
        if is_end(node):
            return steps
        state = (node, steps % period)
        if state in seen:
            raise MalformedInput("Walk never reaches an end node from", start)
        seen.add(state)
        if node not in network.nodes:
            raise MalformedInput("Unknown node", node)
        node = network.nodes[node][DIRECTIONS[direction]]


def part_one(text: str) -> int:
    """Steps from AAA to ZZZ."""
    network = parse_network(text)
    return count_steps(network, "AAA", lambda node: node == "ZZZ")


def part_two(text: str) -> int:
    """Steps until every ghost, starting on all ..A nodes, stands on a ..Z node."""
    network = parse_network(text)
    starts = [node for node in network.nodes if node.endswith("A")]
    if not starts:
        raise MalformedInput("No start nodes ending in 'A'")
    lengths = [count_steps(network, start, lambda node: node.endswith("Z")) for start in starts]
    log.debug("Ghost path lengths: %s", lengths)
    return math.lcm(*lengths)
