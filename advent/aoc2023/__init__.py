"""
2023 puzzle solvers.
"""

from . import day1, day2, day3, day4, day5, day6, day7, day8

DAYS = {
    1: day1,
    2: day2,
    3: day3,
    4: day4,
    5: day5,
    6: day6,
    7: day7,
    8: day8,
}
