# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. The `pushswap` command prints the sequence of operations
that leaves all numbers on stack `a` in ascending order, top first, with `b`
empty.

## Operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the two top elements of `a`               |
| `sb`  | swap the two top elements of `b`               |
| `ss`  | `sa` and `sb` at once                          |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top goes to the bottom      |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` at once                          |
| `rra` | rotate `a` down: the bottom goes to the top    |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` at once                        |

An operation that cannot act (a swap or rotation on a stack with fewer than
two elements, a push from an empty stack, or a double operation when either
stack holds fewer than two) does nothing and is not recorded.

## Installation

```
pip install .
```

## Command line

Numbers may be given as separate arguments, inside one quoted argument, or
both; the arguments are joined and split on spaces:

```
pushswap 2 1 3
pushswap "4 67 3 87 23"
```

Each operation is printed on its own line, with the first number given being
the top of `a`. An input that is already sorted produces no output. If the
first argument holds nothing but spaces and control characters, nothing is
printed.

If any token is not an optional sign followed by digits, is outside the
32-bit signed range, or has the same value as another token (`1` and `+01`
count as the same), `Error` is written to standard error and nothing else is
printed. The exit status is always 0.

The command can also be started with `python -m pushswap.cli`.

## Library use

```python
from pushswap.sorting import solve

print(solve([3, 1, 2]))  # ['ra']
```

- `pushswap.sorting.solve(values)` returns the list of operation names that
  sort `values`. Two or three values are handled with at most one or two
  operations; larger inputs are split into `b` by rank and inserted back
  into `a` choosing the cheapest move each time.
- `pushswap.stacks.Machine(values)` holds the two stacks `a` and `b`
  (`pushswap.stacks.Stack`) and has one method per operation (`sa`, `pb`,
  `rrr`, ...). Each returns whether it acted and, if so, appends its name to
  `machine.operations`. It can be used to replay a list of operations and
  check the result with `machine.a.values()`.
- `pushswap.parsing.parse_arguments(args)` turns command-line arguments into
  a list of integers, raising `pushswap.parsing.InputError` (a `ValueError`)
  when the input is invalid.
- `pushswap.cli.run(args)` combines both: arguments in, operations out.
- `pushswap.analysis` holds the helpers the sorter uses: `is_sorted`,
  `get_target`, `cost_top`, `cost`, `cost_all` and `find_cheapest`.

## What it does not do

There is no command that reads a list of operations from standard input and
checks whether they sort a given set of numbers; that check has to be done
in Python with `Machine`.

## Running the tests

```
pip install ".[test]"
pytest
```