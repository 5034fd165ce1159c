"""
Day 2: Cube Conundrum.

Games look like "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red". Each
";"-separated round reveals some cubes per colour.
"""

from dataclasses import dataclass
from typing import Dict, List

from ..errors import MalformedInput
from ..parsing import lines, split_label, to_int

COLORS = ("red", "green", "blue")

# Cubes in the bag for part one
BAG = {"red": 12, "green": 13, "blue": 14}


@dataclass
class Game:
    id: int
    rounds: List[Dict[str, int]]

    def maxima(self) -> Dict[str, int]:
        """Largest count shown per colour across all rounds."""
        return {color: max([r.get(color, 0) for r in self.rounds] + [0]) for color in COLORS}

    def is_possible(self, bag: Dict[str, int] = BAG) -> bool:
        return all(count <= bag[color] for color, count in self.maxima().items())

    @property
    def power(self) -> int:
        maxima = self.maxima()
        return maxima["red"] * maxima["green"] * maxima["blue"]


def parse_round(text: str) -> Dict[str, int]:
    """Parse "3 blue, 4 red" into {"blue": 3, "red": 4}."""
    cubes = {}
    for item in text.split(","):
        fields = item.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise MalformedInput("Expected '<count> <color>'", item.strip())
        count, color = fields
        if color not in COLORS:
            raise MalformedInput("Unexpected color", color)
        cubes[color] = cubes.get(color, 0) + to_int(count)
    return cubes


def parse_game(line: str) -> Game:
    label, rest = split_label(line)
    name, _, number = label.partition(" ")
    if name != "Game":
        raise MalformedInput("Expected 'Game <id>:'", line)
    return Game(id=to_int(number.strip()), rounds=[parse_round(part) for part in rest.split(";")])


def part_one(text: str) -> int:
    """Sum of ids of games possible with the part one bag."""
    return sum(game.id for game in map(parse_game, lines(text)) if game.is_possible())


def part_two(text: str) -> int:
    """Sum of the power of the minimal bag for each game."""
    return sum(parse_game(line).power for line in lines(text))
