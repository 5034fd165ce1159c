"""
2015 puzzle solvers.
"""

from . import day1

DAYS = {
    1: day1,
}
