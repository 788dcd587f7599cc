"""Scalar domains intervals can range over.

An interval only needs its edge values to be ordered. Parsing, formatting and
converting between domains additionally need a ``Scalar``: a two-way mapping
between values and their canonical text. Built-in scalars cover the common
Python types; register your own for anything else.

Example:
    >>> from intervalgebra.scalars import Scalar, register
    >>>
    >>> class Version(Scalar[tuple[int, ...]]):
    ...     type = tuple
    ...     def parse(self, text: str) -> tuple[int, ...]:
    ...         return tuple(int(part) for part in text.split("."))
    ...     def format(self, value: tuple[int, ...]) -> str:
    ...         return ".".join(str(part) for part in value)
    >>>
    >>> register(Version())
"""

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from numbers import Real
from typing import Any, Generic, TypeVar

from dateutil.parser import isoparse
from typing_extensions import override

logger = logging.getLogger("intervalgebra.scalars")

T = TypeVar("T")


class Scalar(ABC, Generic[T]):
    """Two-way conversion between values of ``type`` and their canonical text."""

    type: type[T]

    @abstractmethod
    def parse(self, text: str) -> T:
        """Convert canonical text to a value. Raise ``ValueError`` if invalid."""
        pass

    def format(self, value: T) -> str:
        return str(value)

    def coerce(self, value: Any) -> T:
        """Convert a value of any registered type to this domain.

        Goes through the value's canonical text unless it already has the
        right type.
        """
        if type(value) is self.type:
            return value
        return self.parse(format_value(value))


class Integers(Scalar[int]):
    type = int

    @override
    def parse(self, text: str) -> int:
        return int(text)

    @override
    def coerce(self, value: Any) -> int:
        # Round half to even, so 2.5 -> 2 and 3.5 -> 4
        if isinstance(value, (Real, Decimal)):
            try:
                return int(round(value))
            except (OverflowError, ValueError) as exc:
                raise ValueError(
                    f"Cannot convert {value!r} to an integer edge.\n"
                    f"Hint: use None for an unbounded edge instead of an "
                    f"infinite or NaN value"
                ) from exc
        return super().coerce(value)


class Floats(Scalar[float]):
    type = float

    @override
    def parse(self, text: str) -> float:
        return float(text)

    @override
    def format(self, value: float) -> str:
        return repr(value)

    @override
    def coerce(self, value: Any) -> float:
        if isinstance(value, (Real, Decimal)):
            return float(value)
        return super().coerce(value)


class Decimals(Scalar[Decimal]):
    """Decimal edges.

    Infinite decimals format as ``Inf``/``-Inf`` so they stay distinct from
    the notation's unbounded-edge spellings.
    """

    type = Decimal

    @override
    def parse(self, text: str) -> Decimal:
        try:
            return Decimal(text)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid decimal literal: {text!r}") from exc

    @override
    def format(self, value: Decimal) -> str:
        if value.is_infinite():
            return "-Inf" if value.is_signed() else "Inf"
        return str(value)


class Booleans(Scalar[bool]):
    type = bool

    _TRUE = ("true", "1")
    _FALSE = ("false", "0")

    @override
    def parse(self, text: str) -> bool:
        lowered = text.strip().lower()
        if lowered in self._TRUE:
            return True
        if lowered in self._FALSE:
            return False
        raise ValueError(
            f"Invalid boolean literal: {text!r}\n"
            f"Valid literals: True, False, 1, 0 (any case)"
        )

    @override
    def coerce(self, value: Any) -> bool:
        if isinstance(value, (Real, Decimal)):
            return value != 0
        return super().coerce(value)


class Strings(Scalar[str]):
    """Lexicographically ordered text.

    Values containing a comma or a bracket cannot round-trip through the
    notation, and values containing "infinit" or an infinity sign read back
    as unbounded edges.
    """

    type = str

    @override
    def parse(self, text: str) -> str:
        return text


class Dates(Scalar[date]):
    type = date

    @override
    def parse(self, text: str) -> date:
        return isoparse(text).date()

    @override
    def format(self, value: date) -> str:
        return value.isoformat()

    @override
    def coerce(self, value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        return super().coerce(value)


class DateTimes(Scalar[datetime]):
    """ISO 8601 timestamps, naive or timezone-aware.

    Mixing naive and aware values in one interval fails on comparison.
    """

    type = datetime

    @override
    def parse(self, text: str) -> datetime:
        return isoparse(text)

    @override
    def format(self, value: datetime) -> str:
        return value.isoformat()

    @override
    def coerce(self, value: Any) -> datetime:
        if isinstance(value, date) and not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day)
        return super().coerce(value)


integers: Integers = Integers()
floats: Floats = Floats()
decimals: Decimals = Decimals()
booleans: Booleans = Booleans()
strings: Strings = Strings()
dates: Dates = Dates()
datetimes: DateTimes = DateTimes()

_REGISTRY: dict[type, Scalar[Any]] = {}


def register(scalar: Scalar[Any]) -> None:
    """Make ``scalar`` the one used for its ``type`` and subclasses of it."""
    logger.debug("Registering scalar %s for %s", type(scalar).__name__, scalar.type)
    _REGISTRY[scalar.type] = scalar


for _scalar in (integers, floats, decimals, booleans, strings, dates, datetimes):
    register(_scalar)


def scalar_for(kind: type[T]) -> Scalar[T]:
    """Look up the scalar registered for ``kind`` or its nearest base class.

    Raises:
        TypeError: If no scalar is registered along the type's MRO
    """
    for base in kind.__mro__:
        if base in _REGISTRY:
            return _REGISTRY[base]
    registered = ", ".join(sorted(t.__name__ for t in _REGISTRY))
    raise TypeError(
        f"No scalar registered for {kind.__name__!r}.\n"
        f"Registered types: {registered}\n"
        f"Hint: subclass intervalgebra.scalars.Scalar and pass it to register()"
    )


def resolve(scalar: "Scalar[T] | type[T]") -> Scalar[T]:
    """Accept either a ``Scalar`` instance or a registered Python type."""
    if isinstance(scalar, Scalar):
        return scalar
    if isinstance(scalar, type):
        return scalar_for(scalar)
    raise TypeError(
        f"Expected a Scalar or a type, got {type(scalar).__name__!r}: {scalar!r}\n"
        f"Examples:\n"
        f"  parse('[0,10)', int)\n"
        f"  parse('[0,10)', intervalgebra.scalars.decimals)"
    )


def format_value(value: Any) -> str:
    """Canonical text of ``value``, falling back to ``str`` for unknown types."""
    for base in type(value).__mro__:
        if base in _REGISTRY:
            return _REGISTRY[base].format(value)
    return str(value)
