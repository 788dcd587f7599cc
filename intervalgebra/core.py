from functools import reduce
from typing import Any, TypeAlias, TypeVar

from intervalgebra.interval import Comparable, Interval
from intervalgebra.scalars import Scalar

T = TypeVar("T", bound=Comparable)
U = TypeVar("U", bound=Comparable)

Operand: TypeAlias = "Interval[T] | tuple[T | None, T | None]"


def _coerce_operand(operand: Any) -> Interval[Any]:
    """Accept an interval or a ``(start, end)`` pair, closed on bounded sides.

    Raises:
        TypeError: If operand is neither
    """
    if isinstance(operand, Interval):
        return operand
    if isinstance(operand, tuple) and len(operand) == 2:
        start, end = operand
        return Interval(start, end)
    raise TypeError(
        f"Expected an Interval or a (start, end) pair.\n"
        f"Got {type(operand).__name__!r}: {operand!r}\n"
        f"Examples:\n"
        f"  union(Interval(0, 5), Interval(3, 9))\n"
        f"  union((0, 5), (3, 9))  # closed on both sides\n"
        f"  union((None, 5), (3, 9))  # None is unbounded"
    )


def has_overlap(left: "Operand[T]", right: "Operand[T]") -> bool:
    """Return True if the operands share at least one value (order independent)."""
    return _coerce_operand(left).has_overlap(_coerce_operand(right))


def union(*intervals: "Operand[T]") -> Interval[T]:
    """Unite intervals left to right (equivalent to chaining `|`).

    Raises:
        SeparatedIntervals: If any step meets a gap
    """
    if not intervals:
        raise ValueError(
            f"union() requires at least one interval argument.\n"
            f"Example: union(Interval(0, 5), Interval(3, 9))"
        )

    def reducer(acc: Interval[T], nxt: Interval[T]) -> Interval[T]:
        return acc | nxt

    return reduce(reducer, (_coerce_operand(i) for i in intervals))


def intersection(*intervals: "Operand[T]") -> Interval[T]:
    """Intersect intervals left to right (equivalent to chaining `&`).

    Raises:
        SeparatedIntervals: If the running result stops overlapping an operand
    """
    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(Interval(0, 5), Interval(3, 9))"
        )

    def reducer(acc: Interval[T], nxt: Interval[T]) -> Interval[T]:
        return acc & nxt

    return reduce(reducer, (_coerce_operand(i) for i in intervals))


def subtract(minuend: "Operand[T]", *subtrahends: "Operand[T]") -> Interval[T]:
    """Remove each subtrahend from the minuend in turn (equivalent to chaining `-`).

    Raises:
        EmptyInterval: If nothing remains
        InconsistentSubtraction: If a step would split the remainder in two
    """

    def reducer(acc: Interval[T], nxt: Interval[T]) -> Interval[T]:
        return acc - nxt

    return reduce(
        reducer,
        (_coerce_operand(s) for s in subtrahends),
        _coerce_operand(minuend),
    )


def convert(interval: "Operand[Any]", to: "Scalar[U] | type[U]") -> Interval[U]:
    """Re-type an interval's edges, e.g. ``convert(Interval(1, 3), float)``."""
    return _coerce_operand(interval).convert(to)
