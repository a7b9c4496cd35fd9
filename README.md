# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations, and prints the operations it performs, one per line.

The operations are:

| op    | effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the two top elements of `a`               |
| `sb`  | swap the two top elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top goes to the bottom      |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down: the bottom goes to the top    |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

The first number given ends up on top of `a`; when sorting is done, `a` holds
the numbers in ascending order from top to bottom.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

Numbers may be given as separate arguments or several in one argument
separated by spaces. Each must be an optional sign followed by digits, fit in
a 32-bit signed integer, and appear only once. On bad input `Error` is written
to standard error and the exit status is 1. With no arguments, or with input
that is already sorted, nothing is printed.

Two and three numbers are sorted with a handful of fixed moves, four and five
by pushing the two smallest to `b`, and larger inputs by a binary radix sort
on each number's rank.

## Library use

```python
from pushswap.cli import build_stack, solve

values = build_stack(["3 2", "1"])   # [3, 2, 1]; raises InputError on bad input
solve(values)                        # ['sa', 'rra']
```

- `pushswap.cli` — `build_stack(args)`, `solve(values)` (returns the list of
  operations) and `main(argv=None)`, the command above.
- `pushswap.stacks` — `Stack(name, values=(), log=None)` models one stack.
  Its `push_from`, `swap`, `rotate` and `reverse_rotate` methods pass their
  operation name to `log`, which prints it by default; `swap`, `rotate` and
  `reverse_rotate` take `quiet=True` to stay silent. `swap_both`,
  `rotate_both` and `reverse_rotate_both` report `ss`, `rr` and `rrr`.
  `Stack.format()` renders values, ranks and rank bits for inspection.
- `pushswap.sorting` — the strategies `sort_two`, `sort_three`,
  `sort_four_five`, `sort_six_more`, plus `is_sorted`, `smallest_node`,
  `biggest_node`, `distance` and `move_to_top`.
- `pushswap.mapping` — `set_indexes` assigns ranks used by the radix sort.
- `pushswap.validation` — `parse_long`, `is_valid_token` and `InputError`.
- `pushswap.bits` — `is_set`, `highest_set` and `format_bits`.
- `pushswap.libft` — small helpers: character tests and integer text
  conversion (`chars`), byte-buffer routines (`memory`), C-style string
  routines (`strings`), stream output (`output`) and a singly linked list
  (`linked`).

## What it does not do

There is no checker: nothing reads a list of operations back and replays it
to confirm that it sorts the input. The sorter never emits the combined
operations `ss`, `rr` or `rrr`, and it makes no attempt to minimise the
number of operations beyond the strategies described above.

## Tests

```
pip install .[test]
pytest
```