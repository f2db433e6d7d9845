# pushswap

Sorts a list of distinct integers using only two stacks, `a` and `b`, and a
fixed set of operations, and prints the operations it used, one per line.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate `a`, `b`, or both: the bottom element goes to the top |

Two, three, four and five values are sorted with short, fixed strategies.
Longer inputs are sorted by a binary radix sort over each value's rank.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
```

prints

```
sa
rra
```

Numbers may be given as separate arguments or together in one
space-separated argument (`push_swap "4 67 3 87 23"`). Only the space
character separates numbers. The first number is the top of stack `a`.

- With no arguments, nothing is printed and the exit status is 0.
- If the input is already sorted, nothing is printed.
- If any word is not an integer (an optional `+` or `-` followed by ASCII
  digits), is outside the signed 32-bit range, or is a duplicate, or if the
  arguments hold no numbers at all, `Error` is written to standard error and
  the exit status is 1.

## Library use

```python
from pushswap.parsing import parse_arguments, ParseError
from pushswap.sort import solve

values = parse_arguments(["3 2", "1"])   # [3, 2, 1]
operations = solve(values)               # ["sa", "rra"]
```

`pushswap.parsing` provides `strict_atoi`, `split_arguments` and
`parse_arguments`; each raises `ParseError` (a `ValueError`) on bad input.

`pushswap.stacks.Stacks(values, emit=None)` holds the two stacks as deques
(`a` and `b`, top first), the rank of each value in `index`, and the list of
operations performed in `operations`. Each operation method (`sa`, `sb`,
`ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`, `rrr`) records its name
and passes it to `emit` when one was given; `pa` and `pb` do nothing and
record nothing when the stack they take from is empty. The module also
provides `is_sorted` and `index_values`.

`pushswap.sort` provides the strategies `sort_two`, `sort_three`,
`sort_five` and `radix_sort`, which act on a `Stacks`, along with
`get_max_bits`, `get_min_position` and `solve`.

## What it does not do

The package produces operations; it does not read a list of operations and
check whether they sort a given input.

## Tests

```
pip install .[test]
pytest
```