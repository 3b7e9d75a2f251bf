import pytest

from pushswap.instructions import Instruction
from pushswap.stack import Machine, Stack


def test_iteration_is_top_to_bottom():
    assert list(Stack([5, 2, 9])) == [5, 2, 9]
    assert len(Stack([5, 2, 9])) == 3


def test_push_then_pop_round_trip():
    stack = Stack([1, 2])
    stack.push(7)
    assert list(stack) == [7, 1, 2]
    assert stack.pop() == 7
    assert list(stack) == [1, 2]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_rotate_moves_top_to_bottom():
    values = [4, 8, 15, 16]
    stack = Stack(values)
    stack.rotate()
    assert list(stack) == values[1:] + values[:1]


def test_reverse_rotate_moves_bottom_to_top():
    values = [4, 8, 15, 16]
    stack = Stack(values)
    stack.reverse_rotate()
    assert list(stack) == values[-1:] + values[:-1]


def test_rotate_and_reverse_rotate_cancel():
    values = [3, 1, 4, 1, 5]
    stack = Stack(values)
    stack.rotate()
    stack.rotate()
    stack.reverse_rotate()
    stack.reverse_rotate()
    assert list(stack) == values


def test_swap_exchanges_top_two():
    stack = Stack([1, 2, 3])
    assert stack.swap() is True
    assert list(stack) == [2, 1, 3]


def test_swap_two_elements():
    stack = Stack([10, 20])
    assert stack.swap() is True
    assert list(stack) == [20, 10]


def test_swap_single_element_does_nothing():
    stack = Stack([42])
    assert stack.swap() is False
    assert list(stack) == [42]


def test_minimum_maximum():
    stack = Stack([3, -7, 12, 0])
    assert stack.minimum() == -7
    assert stack.maximum() == 12


def test_average():
    assert Stack([1, 2, 3, 4]).average() == 2.5


@pytest.mark.parametrize("method", ["minimum", "maximum", "average"])
def test_empty_statistics_raise(method):
    with pytest.raises(ValueError):
        getattr(Stack(), method)()


def test_is_sorted():
    assert Stack([1, 2, 3]).is_sorted() is True
    assert Stack([2, 1, 3]).is_sorted() is False
    assert Stack([5]).is_sorted() is True


def test_is_reverse_sorted():
    assert Stack([3, 2, 1]).is_reverse_sorted() is True
    assert Stack([3, 1, 2]).is_reverse_sorted() is False


def test_machine_push_b_and_back():
    machine = Machine([1, 2, 3])
    machine.execute(Instruction.PB)
    machine.execute(Instruction.PB)
    assert list(machine.a) == [3]
    assert list(machine.b) == [2, 1]
    machine.execute(Instruction.PA)
    assert list(machine.a) == [2, 3]
    assert list(machine.b) == [1]
    assert machine.instructions == [Instruction.PB, Instruction.PB, Instruction.PA]


def test_machine_push_from_empty_raises():
    machine = Machine([1])
    with pytest.raises(IndexError):
        machine.execute("pa")


def test_machine_accepts_text():
    machine = Machine([1, 2, 3])
    machine.execute("ra")
    assert list(machine.a) == [2, 3, 1]
    assert machine.instructions == [Instruction.RA]


def test_machine_double_rotations():
    machine = Machine([1, 2, 3])
    machine.execute("pb")
    machine.execute("pb")
    machine.execute("rr")
    assert list(machine.a) == [3]
    assert list(machine.b) == [1, 2]
    machine.execute("rrr")
    assert list(machine.b) == [2, 1]
    assert [str(i) for i in machine.instructions] == ["pb", "pb", "rr", "rrr"]


def test_machine_swap_not_recorded_when_ineffective():
    machine = Machine([9])
    machine.execute("sa")
    assert machine.instructions == []
    assert list(machine.a) == [9]


def test_machine_ss_reported_by_stack_b():
    machine = Machine([1, 2, 3])
    machine.execute("ss")
    assert list(machine.a) == [2, 1, 3]
    assert machine.instructions == []


def test_machine_ss_swaps_both():
    machine = Machine([1, 2, 3, 4])
    machine.execute("pb")
    machine.execute("pb")
    machine.execute("ss")
    assert list(machine.a) == [4, 3]
    assert list(machine.b) == [1, 2]
    assert machine.instructions[-1] is Instruction.SS


def test_machine_unknown_instruction():
    with pytest.raises(ValueError):
        Machine([1, 2]).execute("zz")