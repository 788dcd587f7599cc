"""Exceptions raised by interval construction, algebra and notation parsing.

Every error is a ``ValueError``: the caller has to change the inputs, retrying
the same call never helps.
"""

from typing import Any


class IntervalError(ValueError):
    """Base class for all interval errors."""


class ReversedEdges(IntervalError):
    def __init__(self, start: Any, end: Any):
        self.start: Any = start
        self.end: Any = end
        super().__init__(
            f"Interval start ({start!r}) must be <= end ({end!r}).\n"
            f"Hint: swap the edges: Interval({end!r}, {start!r})"
        )


class EmptyInterval(IntervalError):
    """No value lies between the edges (or nothing remains after subtraction)."""


class SeparatedIntervals(IntervalError):
    """The intervals neither overlap nor touch at an inclusive edge."""


class InconsistentSubtraction(IntervalError):
    """The subtrahend lies strictly inside the minuend, leaving two pieces."""


class EmptyInput(IntervalError):
    """Nothing to parse."""


class MalformedNotation(IntervalError):
    """Text does not follow the ``[start,end)`` bracket notation."""
