# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
stack operations. The `push_swap` command prints the operations it chooses,
one per line, so that applying them to the input leaves `a` sorted in
ascending order and `b` empty.

## Operations

| Name  | Effect                                       |
|-------|----------------------------------------------|
| `sa`  | swap the top two elements of `a`             |
| `sb`  | swap the top two elements of `b`             |
| `ss`  | `sa` and `sb` together                       |
| `pa`  | move the top of `b` onto `a`                 |
| `pb`  | move the top of `a` onto `b`                 |
| `ra`  | rotate `a` up (top goes to the bottom)       |
| `rb`  | rotate `b` up                                |
| `rr`  | `ra` and `rb` together                       |
| `rra` | rotate `a` down (bottom goes to the top)     |
| `rrb` | rotate `b` down                              |
| `rrr` | `rra` and `rrb` together                     |

An operation on a stack with too few elements does nothing.

## Command line

```
pip install .
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The command can also be run as `python -m pushswap.cli`.

Numbers are given either as separate arguments or as one argument whose
numbers are separated by spaces. Each must be an optional `+` or `-`
followed by decimal digits, within the 32-bit signed range, and no number
may appear twice. On bad input the command prints `Error` on standard
output and exits with status 1. With no numbers (no arguments, or a single
empty or blank argument) it prints nothing and exits with status 1. Input
that is already sorted produces no output.

## Library use

```python
from pushswap.algorithm import push_swap
from pushswap.parsing import InputError, parse_arguments
from pushswap.stack import Operation, Stacks, is_sorted

ops = push_swap([3, 2, 1])          # a list of Operation members
stacks = Stacks([3, 2, 1])
stacks.run(ops)
assert is_sorted(stacks.a) and not stacks.b
assert stacks.history == ops

try:
    parse_arguments(["1", "1"])
except InputError:
    ...
```

- `pushswap.stack`: `Operation` (a string enum whose values are the names
  above), `Stacks` with deques `a` and `b` whose left end is the top,
  `apply`, `run` and a `history` of performed operations, and `is_sorted`.
- `pushswap.parsing`: `split_words`, `atoi`, `is_valid_token`,
  `parse_number`, `parse_arguments` and the `InputError` exception (a
  `ValueError`).
- `pushswap.algorithm`: `push_swap`, and the building blocks of the sort:
  `sort_three`, `sort_stacks`, `target_in_a`, `target_in_b` and `move_cost`.

The package also has small helper modules:

- `pushswap.chars`: ASCII tests and case changes on character codes
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`).
- `pushswap.strings`: `find_char`, `rfind_char`, `compare`, `find_within`,
  `substring`, `join`, `trim`, `bounded_copy`, `bounded_concat`,
  `map_indexed` and `int_to_str`.
- `pushswap.memory`: byte-buffer helpers `fill`, `zero`, `alloc_zeroed`,
  `find_byte`, `compare_bytes`, `copy_bytes` and `move_bytes`.
- `pushswap.linked`: a singly linked list, `LinkedList`, of `Node` objects.
- `pushswap.output`: `format_string` and `printf` for the conversions
  `%c %s %p %d %i %u %x %X %%`, plus `to_hex`, `format_pointer`,
  `write_char`, `write_str`, `write_line` and `write_number`.

## What it does not do

There is no command that reads a list of operations and checks whether they
sort a given input; to check a sequence, apply it with `Stacks.run` and test
the result with `is_sorted`.

## Tests

```
pip install ".[test]"
pytest
```