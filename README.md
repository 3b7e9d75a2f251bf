# pushswap

`pushswap` works out how to sort a list of distinct integers using two
stacks, **a** and **b**, and a small fixed set of moves. It prints the moves
it chose, one per line, so that they can be replayed and checked.

## The moves

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of a                      |
| `sb`  | swap the top two elements of b                      |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | take the top of b and put it on a                   |
| `pb`  | take the top of a and put it on b                   |
| `ra`  | rotate a up: the top element becomes the bottom one |
| `rb`  | rotate b up                                         |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate a down: the bottom element becomes the top   |
| `rrb` | rotate b down                                       |
| `rrr` | `rra` and `rrb` together                            |

The moves are the members of `pushswap.instructions.Instruction`, whose
string form is the name printed above.

## Command line

Pass the numbers as separate arguments, or as one quoted string of
space-separated numbers. The first number is the top of stack a.

```
$ push_swap 2 1 3
sa
$ push_swap "3 2 1"
ra
sa
```

The same command is available as `python -m pushswap.cli`.

If the input is already sorted, nothing is printed.

Every number must be a decimal integer with an optional `+` or `-` sign
that fits in a 32-bit signed int, and no number may appear twice. On bad
input, and when no arguments are given at all, the program prints `Error`
to standard error and exits with a non-zero status (1, 2 or 6, depending on
what was wrong).

## Library

```python
from pushswap.sorter import push_swap
from pushswap.stack import Machine

moves = push_swap([5, 1, 4, 2, 3])
print(" ".join(str(move) for move in moves))

# Replay the moves yourself
machine = Machine([5, 1, 4, 2, 3])
for move in moves:
    machine.execute(move)
print(list(machine.a))  # [1, 2, 3, 4, 5]
```

- `pushswap.stack.Stack` is a stack of integers, iterated from top to
  bottom, with `push`, `pop`, `rotate`, `reverse_rotate`, `swap`,
  `minimum`, `maximum`, `average`, `is_sorted` and `is_reverse_sorted`.
- `pushswap.stack.Machine` holds stacks `a` and `b`; `execute` applies one
  move (an `Instruction` or its name) and records it in `instructions`.
- `pushswap.sorter` provides `push_swap` and the steps it is built from:
  `presort`, `sort_small`, `sort_three` and `merge_back`, each working on a
  `Machine`.
- `pushswap.parsing.parse_arguments` validates command-line style input and
  returns the values, top of the stack first. It raises
  `pushswap.parsing.InputError`, whose `exit_status` is the status the
  command exits with. `atoi`, `validate_number` and `check_duplicates` are
  the checks it is made of.

## What it does not do

There is no separate checker command that reads moves from standard input
and reports whether they sort a given list. To check a list of moves,
replay it on a `Machine` as shown above. The moves chosen are found by a
heuristic and are not guaranteed to be the fewest possible.

## Running the tests

```
pip install -e ".[test]"
pytest
```