"""Sorting strategies that solve stack ``a`` using the stack operations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Stacks, is_sorted


def get_max_bits(size: int) -> int:
    """Return how many bits are needed to write the largest rank, ``size - 1``."""
    return max(size - 1, 0).bit_length()


def get_min_position(stack: Sequence[int]) -> int:
    """Return the position of the first smallest item, or -1 for an empty stack."""
    if not stack:
        return -1
    return min(range(len(stack)), key=stack.__getitem__)


def sort_two(stacks: Stacks) -> None:
    """Sort a two-item stack ``a``."""
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a three-item stack ``a`` in at most two operations."""
    first, second, third = stacks.a[0], stacks.a[1], stacks.a[2]
    if first > second and second < third and first < third:
        stacks.sa()
    elif first > second and second > third:
        stacks.sa()
        stacks.rra()
    elif first > second and second < third and first > third:
        stacks.ra()
    elif first < second and second > third and first < third:
        stacks.sa()
        stacks.ra()
    elif first < second and second > third and first > third:
        stacks.rra()


def _push_smallest_to_b(stacks: Stacks) -> None:
    size = len(stacks.a)
    position = get_min_position([stacks.index[value] for value in stacks.a])
    if position <= size // 2:
        for _ in range(position):
            stacks.ra()
    else:
        for _ in range(size - position):
            stacks.rra()
    stacks.pb()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four or five items."""
    pushed = 1 if len(stacks.a) == 4 else 2
    for _ in range(pushed):
        _push_smallest_to_b(stacks)
    sort_three(stacks)
    for _ in range(pushed):
        stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Sort ``a`` by a binary radix sort over the ranks of its values."""
    size = len(stacks.a)
    for bit in range(get_max_bits(size)):
        for _ in range(size):
            if (stacks.index[stacks.a[0]] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort the distinct *values* onto stack ``a``."""
    stacks = Stacks(values)
    size = len(stacks.a)
    if size <= 1 or is_sorted(stacks.a):
        return []
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        radix_sort(stacks)
    return stacks.operations