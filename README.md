# pushswap

pushswap sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed set of operations. It prints the operations that sort the list, one per line.

The operations:

| op    | effect                                             |
|-------|----------------------------------------------------|
| `sa`  | swap the top two elements of stack a               |
| `sb`  | swap the top two elements of stack b               |
| `ss`  | `sa` and `sb` together                             |
| `pa`  | move the top of b onto a                           |
| `pb`  | move the top of a onto b                           |
| `ra`  | rotate a up: the top element goes to the bottom    |
| `rb`  | rotate b up                                        |
| `rr`  | `ra` and `rb` together                             |
| `rra` | rotate a down: the bottom element goes to the top  |
| `rrb` | rotate b down                                      |
| `rrr` | `rra` and `rrb` together                           |

An operation that cannot act does nothing and is not recorded. For example, it cannot act when a swap or rotation has fewer than two elements to work on, or when a push has an empty source. `ss`, `rr` and `rrr` act only when both stacks hold at least two elements.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments. The first number is the top of stack a.

```
push-swap 3 2 1 5 4
```

You can also pass them as a single argument separated by spaces:

```
push-swap "3 2 1 5 4"
```

`python -m pushswap.solver` runs the same command.

Each input must be an optional `+` or `-` followed by one or more digits. Its value must fit in a signed 32-bit integer, and no value may appear twice. If any input breaks these rules, the command writes `Error` to standard error and exits with status 1. With no arguments, it exits with status 1 and prints nothing.

Input that is already sorted produces no output.

## How it sorts

- **Five values or fewer:** `pushswap.small.sort_small` uses fixed move sequences.
- **Larger inputs:** `pushswap.parse.chunk_layout` splits the values into chunks, and each chunk is pushed onto `b` in turn. `pushswap.parse.chunk_distance` sets how far the search may look for the next element. The elements are then merged back into `a`, and `a` is rotated until it is sorted.

## Library use

```python
import io
from pushswap.solver import push_swap

out = io.StringIO()
stacks = push_swap([3, 2, 1], display=True, out=out)
print(out.getvalue().split())  # the operations written
print(stacks.moves)            # the same operations, as a list
print(stacks.a)                # [1, 2, 3]
```

`push_swap(values, display=False, out=None)` returns the final `Stacks`. It raises `ValueError` when given no values.

**`pushswap.stacks.Stacks`**
- Holds the two stacks as lists `a` and `b`; index 0 is the top.
- Its methods `pa`, `pb`, `sa`, `sb`, `ss`, `ra`, `rb`, `rr`, `rra`, `rrb` and `rrr` perform the operations.
- Each operation that acts is appended to `moves`.
- When `display` is set, each operation that acts is also written to `out`, or to standard output if `out` is not given.

**`pushswap.parse`**
- `parse_arguments(args)` turns command-line words into a list of integers. It raises `pushswap.parse.InputError`, a subclass of `ValueError`, on invalid input.
- `format_stack(values, name)` renders a stack as `name[index] value: v` lines.

**`pushswap.search`**
- Holds the queries on a stack: `is_sorted`, `find_most`, `find_neighbour`, `find_median`, `compute_rotation` and others.
- Each query takes a sequence of values, top first, and a `Direction`.

## What it does not do

pushswap does not check the results of other programs. There is no command that reads a list of operations and reports whether they sort a given input. pushswap only produces the operations.