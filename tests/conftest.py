"""Shared test fixtures."""

import pytest


# Path data exercising every command, absolute and relative, with integer
# coordinates so that re-parsing relative output is exact.
EVERY_COMMAND_D = ("M10,10 h5 v5 H0 V0 z m5,5 q1,1 2,0 t2,0 c1,1 2,2 3,0 "
                   "s1,1 2,0 a3,4 10 1 0 5,5 l-2,-2")

ROUND_TRIP_DS = [
    "M0,0 L0,10",
    "M0,0 5,5 10,10",
    "M0,0 L10,0 L10,10 Z L0,20",
    "M0,0 C1,1 2,0 3,1 S4,2 5,1",
    "M1,1 Q2,3 4,1 T8,1 T12,1",
    "M0,0 A5,3 30 1 0 10,4",
    "M0.5,0.25 L1.125,-3.5 H7 V-2 z",
    "m3,3 l2,0 0,2 -2,0 z m10,10 h5",
    EVERY_COMMAND_D,
]


@pytest.fixture
def every_command_d():
    return EVERY_COMMAND_D
