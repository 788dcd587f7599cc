from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

from intervalgebra.errors import (
    EmptyInterval,
    InconsistentSubtraction,
    ReversedEdges,
    SeparatedIntervals,
)
from intervalgebra.scalars import Scalar, format_value, resolve
from intervalgebra.util import (
    EXCLUSIVE_END,
    EXCLUSIVE_START,
    INCLUSIVE_END,
    INCLUSIVE_START,
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    SEPARATOR,
)


class Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Comparable)
U = TypeVar("U", bound=Comparable)


@dataclass(frozen=True)
class Interval(Generic[T]):
    """A contiguous range of values, closed, open or half-open on either side.

    A ``None`` edge is unbounded (minus or plus infinity) and is always
    excluded, whatever flag was passed in. Instances are immutable: every
    operation returns a freshly validated interval.

    Raises:
        ReversedEdges: If ``start > end``
        EmptyInterval: If ``start == end`` and either edge is excluded
    """

    start: T | None
    end: T | None
    exclude_start: bool = False
    exclude_end: bool = False

    def __post_init__(self) -> None:
        # Infinity is never a member
        object.__setattr__(
            self, "exclude_start", self.start is None or bool(self.exclude_start)
        )
        object.__setattr__(
            self, "exclude_end", self.end is None or bool(self.exclude_end)
        )

        if self.start is None or self.end is None:
            return
        if self.start > self.end:
            raise ReversedEdges(self.start, self.end)
        if self.start == self.end and (self.exclude_start or self.exclude_end):
            raise EmptyInterval(
                f"No value lies between the edges of {self._notation()}.\n"
                f"Hint: a single-value interval must include both edges: "
                f"Interval({self.start!r}, {self.end!r})"
            )

    @property
    def is_left_bounded(self) -> bool:
        return self.start is not None

    @property
    def is_right_bounded(self) -> bool:
        return self.end is not None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def is_point(self) -> bool:
        """True if the interval holds exactly one value, e.g. ``[5,5]``."""
        return self.is_bounded and self.start == self.end

    def contains(self, item: T) -> bool:
        """Return True if ``item`` lies within the interval.

        Strictly inside both edges, or equal to an edge that is included.
        """
        return (
            (
                (self.start is None or self.start < item)
                and (self.end is None or self.end > item)
            )
            or (
                self.start is not None
                and self.start == item
                and not self.exclude_start
            )
            or (self.end is not None and self.end == item and not self.exclude_end)
        )

    def __contains__(self, item: T) -> bool:
        return self.contains(item)

    def has_overlap(self, other: "Interval[T]") -> bool:
        """Return True if the two intervals share at least one value.

        Symmetric. Intervals meeting at an edge overlap only when both of them
        include that edge: ``[0,10]`` and ``[10,20]`` overlap, ``[0,10)`` and
        ``[10,20]`` do not.
        """
        return not (_lies_before(self, other) or _lies_before(other, self))

    def union(self, other: "Interval[T]") -> "Interval[T]":
        """Return the smallest interval covering both operands.

        Intervals that touch at an edge both include are contiguous and count
        as overlapping, so ``[1,5] | [5,9]`` is ``[1,9]``. Where the two
        operands share an edge value, it is included if either side includes it.

        Raises:
            SeparatedIntervals: If a gap (even a single excluded edge) lies
                between the operands
        """
        if not self.has_overlap(other):
            raise SeparatedIntervals(
                f"Cannot unite {self} and {other}: they neither overlap nor "
                f"touch at an included edge.\n"
                f"A single interval cannot represent two separate spans."
            )

        # Start: the lower edge wins, unbounded beats everything
        if self.start is None or other.start is None:
            start, exclude_start = None, True
        elif self.start == other.start:
            start = self.start
            exclude_start = self.exclude_start and other.exclude_start
        elif self.start < other.start:
            start, exclude_start = self.start, self.exclude_start
        else:
            start, exclude_start = other.start, other.exclude_start

        # End: the upper edge wins
        if self.end is None or other.end is None:
            end, exclude_end = None, True
        elif self.end == other.end:
            end = self.end
            exclude_end = self.exclude_end and other.exclude_end
        elif self.end > other.end:
            end, exclude_end = self.end, self.exclude_end
        else:
            end, exclude_end = other.end, other.exclude_end

        return Interval(start, end, exclude_start, exclude_end)

    def intersection(self, other: "Interval[T]") -> "Interval[T]":
        """Return the values common to both operands.

        Where the operands share an edge value, it is excluded if either side
        excludes it.

        Raises:
            SeparatedIntervals: If the operands do not overlap
        """
        if not self.has_overlap(other):
            raise SeparatedIntervals(
                f"Cannot intersect {self} and {other}: they have no values in "
                f"common.\n"
                f"Hint: check a.has_overlap(b) first"
            )

        # Start: the higher edge wins, an unbounded side defers to the other
        if self.start is None:
            start, exclude_start = other.start, other.exclude_start
        elif other.start is None:
            start, exclude_start = self.start, self.exclude_start
        elif self.start == other.start:
            start = self.start
            exclude_start = self.exclude_start or other.exclude_start
        elif self.start > other.start:
            start, exclude_start = self.start, self.exclude_start
        else:
            start, exclude_start = other.start, other.exclude_start

        # End: the lower edge wins
        if self.end is None:
            end, exclude_end = other.end, other.exclude_end
        elif other.end is None:
            end, exclude_end = self.end, self.exclude_end
        elif self.end == other.end:
            end = self.end
            exclude_end = self.exclude_end or other.exclude_end
        elif self.end < other.end:
            end, exclude_end = self.end, self.exclude_end
        else:
            end, exclude_end = other.end, other.exclude_end

        return Interval(start, end, exclude_start, exclude_end)

    def subtract(self, other: "Interval[T]") -> "Interval[T]":
        """Return the part of this interval not covered by ``other``.

        Removing a prefix leaves a suffix and vice versa; the edge shared with
        the removed part flips between included and excluded, so
        ``[0,10] - [0,4]`` is ``(4,10]``. Disjoint operands leave this
        interval unchanged.

        Only edge values decide whether a prefix or suffix was removed, so a
        lone edge value the subtrahend leaves behind is dropped:
        ``[0,10] - (0,5]`` is ``(5,10]``.

        Raises:
            EmptyInterval: If ``other`` covers this interval entirely, or
                only an edge value it excludes would remain
            InconsistentSubtraction: If ``other`` lies strictly inside this
                interval, which would leave two separate pieces
        """
        if not self.has_overlap(other):
            return self

        common = self.intersection(other)
        if common == self:
            raise EmptyInterval(
                f"Nothing remains of {self} after removing {other}: "
                f"it is fully covered."
            )
        # Removed a prefix: the suffix starts where the removed part ended
        if _same_start(common, self):
            return Interval(
                common.end, self.end, not common.exclude_end, self.exclude_end
            )
        # Removed a suffix
        if _same_end(common, self):
            return Interval(
                self.start, common.start, self.exclude_start, not common.exclude_start
            )

        raise InconsistentSubtraction(
            f"Removing {other} from {self} would leave two separate pieces.\n"
            f"A single interval cannot represent a range with a hole in it.\n"
            f"Hint: subtract a range that shares an edge with {self}"
        )

    def subtract_from(self, minuend: "Interval[T]") -> "Interval[T]":
        """Return ``minuend - self``."""
        return minuend.subtract(self)

    def convert(self, to: "Scalar[U] | type[U]") -> "Interval[U]":
        """Return the same interval over another scalar type.

        Edge flags are kept. A narrowing conversion may collapse the interval,
        e.g. ``(0.2, 0.4)`` to integers raises ``EmptyInterval``.

        Example:
            >>> Interval(1, 3, exclude_end=True).convert(float)
            Interval(start=1.0, end=3.0, exclude_start=False, exclude_end=True)
        """
        scalar = resolve(to)
        return Interval(
            None if self.start is None else scalar.coerce(self.start),
            None if self.end is None else scalar.coerce(self.end),
            self.exclude_start,
            self.exclude_end,
        )

    def __or__(self, other: "Interval[T]") -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.union(other)

    __add__ = __or__

    def __and__(self, other: "Interval[T]") -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: "Interval[T]") -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.subtract(other)

    def __str__(self) -> str:
        """Bracket notation, e.g. ``[0,10)`` or ``(-∞,5]``."""
        return self._notation()

    def _notation(self) -> str:
        opening = EXCLUSIVE_START if self.exclude_start else INCLUSIVE_START
        closing = EXCLUSIVE_END if self.exclude_end else INCLUSIVE_END
        start = NEGATIVE_INFINITY if self.start is None else format_value(self.start)
        end = POSITIVE_INFINITY if self.end is None else format_value(self.end)
        return f"{opening}{start}{SEPARATOR}{end}{closing}"


def _lies_before(left: Interval[Any], right: Interval[Any]) -> bool:
    """True if every value of ``left`` is below every value of ``right``."""
    if left.end is None or right.start is None:
        return False
    if left.end < right.start:
        return True
    return left.end == right.start and (left.exclude_end or right.exclude_start)


def _same_start(a: Interval[Any], b: Interval[Any]) -> bool:
    """Starts coincide when both are unbounded or hold equal values."""
    if a.start is None or b.start is None:
        return a.start is None and b.start is None
    return a.start == b.start


def _same_end(a: Interval[Any], b: Interval[Any]) -> bool:
    if a.end is None or b.end is None:
        return a.end is None and b.end is None
    return a.end == b.end
