"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def index_values(values: Sequence[int]) -> list[int]:
    """Return the rank of each value: 0 for the smallest, ties ranked by position."""
    order = sorted(range(len(values)), key=lambda position: values[position])
    ranks = [0] * len(values)
    for rank, position in enumerate(order):
        ranks[position] = rank
    return ranks


def _swap(stack: deque) -> None:
    if len(stack) >= 2:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)


def _rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``, top first, with every operation recorded.

    ``index`` maps each value to its rank among all values. Each operation
    performed is appended to ``operations`` and passed to ``emit`` if given.
    """

    def __init__(self, values: Iterable[int], emit: Callable[[str], None] | None = None):
        items = list(values)
        self.a: deque[int] = deque(items)
        self.b: deque[int] = deque()
        self.index: dict[int, int] = dict(zip(items, index_values(items)))
        self.operations: list[str] = []
        self._emit = emit

    def _record(self, name: str) -> None:
        self.operations.append(name)
        if self._emit is not None:
            self._emit(name)

    def sa(self) -> None:
        _swap(self.a)
        self._record("sa")

    def sb(self) -> None:
        _swap(self.b)
        self._record("sb")

    def ss(self) -> None:
        _swap(self.a)
        _swap(self.b)
        self._record("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; does nothing when ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._record("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; does nothing when ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._record("pb")

    def ra(self) -> None:
        _rotate(self.a)
        self._record("ra")

    def rb(self) -> None:
        _rotate(self.b)
        self._record("rb")

    def rr(self) -> None:
        _rotate(self.a)
        _rotate(self.b)
        self._record("rr")

    def rra(self) -> None:
        _reverse_rotate(self.a)
        self._record("rra")

    def rrb(self) -> None:
        _reverse_rotate(self.b)
        self._record("rrb")

    def rrr(self) -> None:
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._record("rrr")