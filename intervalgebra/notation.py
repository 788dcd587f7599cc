"""Bracket notation for intervals: ``[0,10)``, ``(-∞,5]``, ``[2025-01-01, infinity)``.

A square bracket includes the edge, a parenthesis excludes it. An edge written
as ``∞``, ``♾`` or any spelling containing "infinit" is unbounded.
"""

import logging
from typing import Any, TypeVar

from intervalgebra.errors import EmptyInput, IntervalError, MalformedNotation
from intervalgebra.interval import Interval
from intervalgebra.scalars import Scalar, integers, resolve
from intervalgebra.util import (
    EXCLUSIVE_END,
    EXCLUSIVE_START,
    INCLUSIVE_END,
    INCLUSIVE_START,
    INFINITY_GLYPHS,
    INFINITY_KEYWORD,
    SEPARATOR,
)

logger = logging.getLogger("intervalgebra.notation")

T = TypeVar("T")

_EXAMPLES = (
    "Examples:\n"
    "  [0,10)     includes 0, excludes 10\n"
    "  (-∞, 5]    everything up to and including 5\n"
    "  [1.5, +∞)  1.5 and everything above"
)


def parse(text: str, scalar: "Scalar[T] | type[T]" = integers) -> Interval[T]:
    """Parse bracket notation into an interval over ``scalar``.

    Args:
        text: Notation such as ``"[0, 10)"``; surrounding whitespace is ignored
        scalar: Scalar instance or registered type used to convert the edges

    Raises:
        EmptyInput: If ``text`` is empty or only whitespace
        MalformedNotation: If the brackets or separator are missing, or an
            edge cannot be converted by ``scalar``
        ReversedEdges: If the parsed start is greater than the end
        EmptyInterval: If the parsed edges are equal and one is excluded
    """
    if text is None or not text.strip():
        raise EmptyInput("Nothing to parse: got an empty interval string.")

    converter = resolve(scalar)
    parts = [part.strip() for part in text.split(SEPARATOR)]
    if len(parts) != 2:
        raise MalformedNotation(
            f"Interval notation needs exactly one {SEPARATOR!r} between the "
            f"edges, got {len(parts) - 1} in {text!r}.\n{_EXAMPLES}"
        )

    head, tail = parts
    if head.startswith(INCLUSIVE_START):
        exclude_start = False
    elif head.startswith(EXCLUSIVE_START):
        exclude_start = True
    else:
        raise MalformedNotation(
            f"Interval notation must open with {INCLUSIVE_START!r} or "
            f"{EXCLUSIVE_START!r}, got {text!r}.\n{_EXAMPLES}"
        )

    if tail.endswith(INCLUSIVE_END):
        exclude_end = False
    elif tail.endswith(EXCLUSIVE_END):
        exclude_end = True
    else:
        raise MalformedNotation(
            f"Interval notation must close with {INCLUSIVE_END!r} or "
            f"{EXCLUSIVE_END!r}, got {text!r}.\n{_EXAMPLES}"
        )

    start = _parse_edge(head[1:].strip(), converter, text)
    end = _parse_edge(tail[:-1].strip(), converter, text)
    return Interval(start, end, exclude_start, exclude_end)


def try_parse(
    text: str, scalar: "Scalar[T] | type[T]" = integers
) -> Interval[T] | None:
    """Like ``parse``, but return None instead of raising an ``IntervalError``."""
    try:
        return parse(text, scalar)
    except IntervalError as exc:
        logger.debug("Could not parse %r as an interval: %s", text, exc)
        return None


def format_interval(interval: Interval[Any]) -> str:
    """Render ``interval`` in bracket notation; ``parse`` reads it back."""
    return str(interval)


def _is_infinite(token: str) -> bool:
    return INFINITY_KEYWORD in token.lower() or any(
        glyph in token for glyph in INFINITY_GLYPHS
    )


def _parse_edge(token: str, converter: Scalar[T], text: str) -> T | None:
    if not token:
        raise MalformedNotation(
            f"Missing edge value in {text!r}; write an infinity sign for an "
            f"unbounded edge.\n{_EXAMPLES}"
        )
    if _is_infinite(token):
        return None
    try:
        return converter.parse(token)
    except ValueError as exc:
        raise MalformedNotation(
            f"Cannot read edge {token!r} in {text!r} as "
            f"{converter.type.__name__}: {exc}"
        ) from exc
