"""Stacks of integers and the machine that operates on a pair of them."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, List, Union

from .instructions import Instruction


class Stack:
    """A stack of integers; iteration and construction go from top to bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.appendleft(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        self._items.rotate(1)

    def swap(self) -> bool:
        """Exchange the two top values; return whether anything changed."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def minimum(self) -> int:
        if not self._items:
            raise ValueError("minimum of an empty stack")
        return min(self._items)

    def maximum(self) -> int:
        if not self._items:
            raise ValueError("maximum of an empty stack")
        return max(self._items)

    def average(self) -> float:
        if not self._items:
            raise ValueError("average of an empty stack")
        return sum(self._items) / len(self._items)

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom."""
        items = list(self._items)
        return all(upper <= lower for upper, lower in zip(items, items[1:]))

    def is_reverse_sorted(self) -> bool:
        """True when values never increase from top to bottom."""
        items = list(self._items)
        return all(upper >= lower for upper, lower in zip(items, items[1:]))


class Machine:
    """Stacks ``a`` and ``b`` plus the record of instructions that took effect."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.instructions: List[Instruction] = []

    def execute(self, instruction: Union[Instruction, str]) -> None:
        """Apply one instruction and record it when it is reported."""
        op = Instruction(instruction)
        recorded = True
        if op is Instruction.PA:
            self.a.push(self.b.pop())
        elif op is Instruction.PB:
            self.b.push(self.a.pop())
        elif op is Instruction.RA:
            self.a.rotate()
        elif op is Instruction.RB:
            self.b.rotate()
        elif op is Instruction.RR:
            self.a.rotate()
            self.b.rotate()
        elif op is Instruction.RRA:
            self.a.reverse_rotate()
        elif op is Instruction.RRB:
            self.b.reverse_rotate()
        elif op is Instruction.RRR:
            self.a.reverse_rotate()
            self.b.reverse_rotate()
        elif op is Instruction.SA:
            recorded = self.a.swap()
        elif op is Instruction.SB:
            recorded = self.b.swap()
        else:
            self.a.swap()
            # The combined swap is reported only when stack b changed.
            recorded = self.b.swap()
        if recorded:
            self.instructions.append(op)