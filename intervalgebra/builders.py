"""Shorthand constructors for common interval shapes.

Example:
    >>> from intervalgebra.builders import at_least, closed_open, interval_until
    >>> str(closed_open(0, 10))
    '[0,10)'
    >>> str(at_least(5))
    '[5,+∞)'
    >>> str(interval_until(0, 10, exclude_end=True))
    '[0,10)'
"""

from typing import TypeVar

from intervalgebra.interval import Comparable, Interval

T = TypeVar("T", bound=Comparable)


def interval_until(
    start: T | None,
    end: T | None,
    exclude_start: bool = False,
    exclude_end: bool = False,
) -> Interval[T]:
    """Interval running from ``start`` until ``end``."""
    return Interval(start, end, exclude_start, exclude_end)


def interval_from(
    end: T | None,
    start: T | None,
    exclude_start: bool = False,
    exclude_end: bool = False,
) -> Interval[T]:
    """Interval ending at ``end`` that reaches back to ``start``."""
    return Interval(start, end, exclude_start, exclude_end)


def closed(start: T, end: T) -> Interval[T]:
    """``[start,end]``"""
    return Interval(start, end)


def open(start: T | None, end: T | None) -> Interval[T]:  # noqa: A001
    """``(start,end)``"""
    return Interval(start, end, exclude_start=True, exclude_end=True)


def closed_open(start: T, end: T | None) -> Interval[T]:
    """``[start,end)``"""
    return Interval(start, end, exclude_end=True)


def open_closed(start: T | None, end: T) -> Interval[T]:
    """``(start,end]``"""
    return Interval(start, end, exclude_start=True)


def point(value: T) -> Interval[T]:
    """``[value,value]``: the interval holding only ``value``."""
    return Interval(value, value)


def at_least(start: T) -> Interval[T]:
    return Interval(start, None)


def greater_than(start: T) -> Interval[T]:
    return Interval(start, None, exclude_start=True)


def at_most(end: T) -> Interval[T]:
    return Interval(None, end)


def less_than(end: T) -> Interval[T]:
    return Interval(None, end, exclude_end=True)


def unbounded() -> Interval[Comparable]:
    """``(-∞,+∞)``: every value."""
    return Interval(None, None)
