"""The sorting strategy: choose and record the operations that sort stack ``a``."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from .stack import Operation, Stacks, is_sorted


def _above_median(index: int, length: int) -> bool:
    return index <= length // 2


def _distance(index: int, length: int) -> int:
    """Moves needed to bring the item at ``index`` to the top."""
    return index if _above_median(index, length) else length - index


def _index_of_max(values: Sequence[int]) -> int:
    return max(range(len(values)), key=values.__getitem__)


def _index_of_min(values: Sequence[int]) -> int:
    return min(range(len(values)), key=values.__getitem__)


def target_in_b(value: int, b: Iterable[int]) -> int:
    """Index in ``b`` of the closest smaller value, or of the largest if none is smaller."""
    items = list(b)
    if not items:
        raise ValueError("stack b is empty")
    smaller = [(item, index) for index, item in enumerate(items) if item < value]
    if smaller:
        return max(smaller)[1]
    return _index_of_max(items)


def target_in_a(value: int, a: Iterable[int]) -> int:
    """Index in ``a`` of the closest bigger value, or of the smallest if none is bigger."""
    items = list(a)
    if not items:
        raise ValueError("stack a is empty")
    bigger = [(item, index) for index, item in enumerate(items) if item > value]
    if bigger:
        return min(bigger)[1]
    return _index_of_min(items)


def move_cost(index_a: int, len_a: int, index_b: int, len_b: int) -> int:
    """Rotations needed to bring both positions to the top of their stacks."""
    return _distance(index_a, len_a) + _distance(index_b, len_b)


def _bring_to_top(
    stacks: Stacks, stack: deque[int], value: int, up: Operation, down: Operation
) -> None:
    index = stack.index(value)
    op = up if _above_median(index, len(stack)) else down
    while stack[0] != value:
        stacks.apply(op)


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds three values (or fewer)."""
    a = stacks.a
    if len(a) < 2:
        return
    biggest = max(a)
    if a[0] == biggest:
        stacks.apply(Operation.RA)
    elif a[1] == biggest:
        stacks.apply(Operation.RRA)
    if a[0] > a[1]:
        stacks.apply(Operation.SA)


def _move_a_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    best: tuple[int, int, int] | None = None
    for index, value in enumerate(a):
        target = target_in_b(value, b)
        cost = move_cost(index, len(a), target, len(b))
        if best is None or cost < best[0]:
            best = (cost, index, target)
    assert best is not None
    _, index, target = best
    value, target_value = a[index], b[target]
    up_a = _above_median(index, len(a))
    up_b = _above_median(target, len(b))
    if up_a and up_b:
        while a[0] != value and b[0] != target_value:
            stacks.apply(Operation.RR)
    elif not up_a and not up_b:
        while a[0] != value and b[0] != target_value:
            stacks.apply(Operation.RRR)
    _bring_to_top(stacks, a, value, Operation.RA, Operation.RRA)
    _bring_to_top(stacks, b, target_value, Operation.RB, Operation.RRB)
    stacks.apply(Operation.PB)


def _move_b_to_a(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    target_value = a[target_in_a(b[0], a)]
    _bring_to_top(stacks, a, target_value, Operation.RA, Operation.RRA)
    stacks.apply(Operation.PA)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` of more than three values, using ``b`` as scratch space."""
    a = stacks.a
    remaining = len(a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(a):
            stacks.apply(Operation.PB)
        remaining -= 1
    while remaining > 3 and not is_sorted(a):
        remaining -= 1
        _move_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _move_b_to_a(stacks)
    if a:
        _bring_to_top(stacks, a, min(a), Operation.RA, Operation.RRA)


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort the given values."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.apply(Operation.SA)
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_stacks(stacks)
    return list(stacks.history)