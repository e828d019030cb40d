# pushswap

Sort a list of distinct integers using two stacks, **a** and **b**, and a
small fixed set of operations. The program prints the operations it performs,
one per line. Replaying them on the input leaves stack **a** sorted in
ascending order, with the smallest value on top.

## Installation

```
pip install .
```

## Usage

```
push_swap 3 2 5 1 4
```

The same command is also available as `python -m pushswap.cli 3 2 5 1 4`.

Each argument is one integer, and the first argument is the top of stack
**a**. An argument may start with one `+` or `-`. After that it must hold
decimal digits only, and its value must fit in a signed 32-bit integer.
Duplicate values are rejected. On invalid input the program writes `Error` to
standard error and exits with status 1.

Input that is already sorted produces no output.

## Operations

| Name  | Effect                                                |
|-------|-------------------------------------------------------|
| `sa`  | swap the top two elements of **a**                    |
| `sb`  | swap the top two elements of **b**                    |
| `ss`  | `sa` and `sb` together                                |
| `pa`  | move the top of **b** onto **a**                      |
| `pb`  | move the top of **a** onto **b**                      |
| `ra`  | rotate **a** up: the top element goes to the bottom   |
| `rb`  | rotate **b** up                                       |
| `rr`  | `ra` and `rb` together                                |
| `rra` | rotate **a** down: the bottom element goes to the top |
| `rrb` | rotate **b** down                                     |
| `rrr` | `rra` and `rrb` together                              |

A single-stack move that would change nothing is not printed. `ss`, `rr` and
`rrr` are always printed.

## How it sorts

1. Elements are pushed from **a** to **b** until three remain or **a** is
   already sorted. Values above the median are rotated to the bottom of
   **b**.
2. The elements left in **a** are sorted in place.
3. One element at a time goes back to **a**. Each time, the element of **b**
   that needs the fewest rotations to reach its place is chosen, and
   rotations of both stacks in the same direction are combined.
4. Finally **a** is rotated the shorter way until its minimum is on top.

## Library use

- `pushswap.stack`: `Stack`, a stack of `Node` objects with `swap`,
  `rotate`, `reverse_rotate`, `push`, `pop`, `values`, `is_sorted`,
  `find_min`, `find_max` and `position`.
- `pushswap.operations`: `Operations(a, b, out)` applies the named moves to
  two stacks. It writes each move to `out`, or to standard output when `out`
  is `None`, and records it in its `moves` list.
- `pushswap.parsing`: `is_integer(text)` and `parse_args(args)`. The latter
  builds stack **a** or raises `ParseError`.
- `pushswap.sort_small.sort_three(ops)` sorts stack **a** when it holds at
  most three elements.
- `pushswap.sort_large`: `find_next_bigger`, `calculate_cost`,
  `get_lowest_cost` and `execute_best_node`, the cost-driven insertion step.
- `pushswap.cli`: `find_median`, `rotate_min_to_top`, `solve(ops)` (the whole
  algorithm) and `main(argv=None)`.

```python
import io
from pushswap.operations import Operations
from pushswap.parsing import parse_args
from pushswap.cli import solve

ops = Operations(parse_args(["3", "1", "2"]), out=io.StringIO())
solve(ops)
print(ops.moves, ops.a.values())
```

The package also has small helper modules. `pushswap.ctype` classifies and
converts ASCII characters. `pushswap.conversions` provides `atoi` and `itoa`.
`pushswap.memory` fills, searches, compares and copies byte buffers.
`pushswap.strings` measures, searches, compares and copies strings with a
bounded size. `pushswap.output` provides `putchar`, `putstr`, `putendl`,
`putnbr`, `putuint`, `puthex`, `putptr` and a small `printf`.

## Limitations

Each number must be its own argument. An argument such as `"3 2 1"` is not
split into three numbers. It is rejected as invalid input. There is no
separate command that reads moves back and checks that they sort the input.

## Running the tests

```
pip install .[test]
pytest
```