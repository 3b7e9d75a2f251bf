"""The eleven operations of the two-stack machine."""

from __future__ import annotations

from enum import Enum


class Instruction(str, Enum):
    """An operation on stacks ``a`` and ``b``, named as it is printed."""

    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"
    SA = "sa"
    SB = "sb"
    SS = "ss"

    def __str__(self) -> str:
        return self.value