"""Sorting stack ``a`` with the two-stack machine."""

from __future__ import annotations

import struct
from typing import Dict, Iterable, List

from .instructions import Instruction
from .stack import Machine, Stack

_PRESORT_TARGET = 5


def _float32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _single_precision_average(stack: Stack) -> float:
    """Average of the stack, accumulated and divided in single precision."""
    total = 0.0
    for value in stack:
        total = _float32(total + _float32(value))
    return _float32(total / len(stack))


def _top(stack: Stack) -> int:
    return next(iter(stack))


def _below(stack: Stack, value: int) -> int:
    """The value under ``value``, wrapping from the bottom to the top."""
    items = list(stack)
    return items[(items.index(value) + 1) % len(items)]


def _bring_to_top(
    machine: Machine,
    stack: Stack,
    value: int,
    rotate: Instruction,
    reverse: Instruction,
) -> None:
    """Rotate ``stack`` the cheaper way until ``value`` is on top; ties reverse."""
    items = list(stack)
    size = len(items)
    down = items.index(value)
    up = (size - down) % size
    if 0 < down < up:
        for _ in range(down):
            machine.execute(rotate)
    elif 0 < up <= down:
        for _ in range(up):
            machine.execute(reverse)


def _bring_to_top_of_a(machine: Machine, value: int) -> None:
    _bring_to_top(machine, machine.a, value, Instruction.RA, Instruction.RRA)


def _bring_to_top_of_b(machine: Machine, value: int) -> None:
    _bring_to_top(machine, machine.b, value, Instruction.RB, Instruction.RRB)


def _prices(stack: Stack) -> Dict[int, int]:
    """Estimated cost of bringing each value of ``stack`` to its top."""
    items = list(stack)
    size = len(items)
    median = size // 2
    prices: Dict[int, int] = {}
    for index, value in enumerate(items):
        place = size - 1 - index
        if place == size - 1:
            price = 0
        elif place >= median:
            price = size - place if size % 2 == 0 else size - place - 1
        else:
            price = place + 1
        prices[value] = price
    return prices


def _friends(a: Stack, b: Stack) -> Dict[int, int]:
    """For each value of ``b``, the smallest value of ``a`` not below it."""
    return {value: min(other for other in a if other >= value) for value in b}


def _push_minimum(machine: Machine) -> None:
    """Move the smallest value of ``a`` to the top and push it onto ``b``."""
    a = machine.a
    smallest = a.minimum()
    items = list(a)
    size = len(items)
    place = size - 1 - items.index(smallest)
    step = Instruction.RRA if place <= size // 2 else Instruction.RA
    while _top(a) != smallest:
        machine.execute(step)
    machine.execute(Instruction.PB)


def _push_first_friend(machine: Machine) -> None:
    """Bring the largest value of ``b`` over when it exceeds everything in ``a``."""
    a, b = machine.a, machine.b
    smallest = a.minimum()
    largest_in_b = b.maximum()
    if largest_in_b > a.maximum():
        _bring_to_top_of_a(machine, smallest)
        _bring_to_top_of_b(machine, largest_in_b)
        machine.execute(Instruction.PA)


def presort(machine: Machine) -> None:
    """Push values above the running average of ``a`` onto ``b`` until five remain."""
    a = machine.a
    if a.is_sorted():
        return
    average = _single_precision_average(a)
    current = _top(a)
    while len(a) > _PRESORT_TARGET:
        if _float32(current) > average:
            _bring_to_top_of_a(machine, current)
            machine.execute(Instruction.PB)
            current = list(a)[-1]
            average = _single_precision_average(a)
        else:
            current = _below(a, current)


def sort_three(machine: Machine) -> None:
    """Sort stack ``a`` when it holds two or three values."""
    a = machine.a
    if len(a) < 2:
        return
    largest = a.maximum()
    items = list(a)
    if items[0] == largest:
        machine.execute(Instruction.RA)
    elif items[-2] == largest:
        machine.execute(Instruction.RRA)
    items = list(a)
    if items[0] > items[-2]:
        machine.execute(Instruction.SA)


def merge_back(machine: Machine) -> None:
    """Insert the values of ``b`` into ``a`` by cheapest move, then align ``a``."""
    a, b = machine.a, machine.b
    rounds = len(b) - 1
    smallest = a.minimum()
    _push_first_friend(machine)
    for _ in range(rounds):
        friends = _friends(a, b)
        prices_a = _prices(a)
        prices_b = _prices(b)
        chosen = min(
            reversed(list(b)),
            key=lambda value: prices_b[value] + prices_a[friends[value]],
        )
        _bring_to_top_of_a(machine, friends[chosen])
        _bring_to_top_of_b(machine, chosen)
        machine.execute(Instruction.PA)
    _bring_to_top_of_a(machine, smallest)


def sort_small(machine: Machine) -> None:
    """Sort ``a`` once at most five values are left in it."""
    a, b = machine.a, machine.b
    if a.is_sorted():
        return
    if len(a) > 3:
        _push_minimum(machine)
        _push_minimum(machine)
        sort_three(machine)
        if b.is_reverse_sorted():
            for _ in range(len(b)):
                machine.execute(Instruction.PA)
        else:
            machine.execute(Instruction.PA)
            machine.execute(Instruction.PA)
            merge_back(machine)
    else:
        sort_three(machine)


def push_swap(values: Iterable[int]) -> List[Instruction]:
    """Return the instructions that sort ``values``, given top of the stack first."""
    machine = Machine(values)
    presort(machine)
    sort_small(machine)
    return list(machine.instructions)