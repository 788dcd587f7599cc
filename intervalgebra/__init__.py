from importlib.resources import files

from .builders import (
    at_least,
    at_most,
    closed,
    closed_open,
    greater_than,
    interval_from,
    interval_until,
    less_than,
    open,
    open_closed,
    point,
    unbounded,
)
from .core import convert, has_overlap, intersection, subtract, union
from .errors import (
    EmptyInput,
    EmptyInterval,
    InconsistentSubtraction,
    IntervalError,
    MalformedNotation,
    ReversedEdges,
    SeparatedIntervals,
)
from .interval import Interval
from .notation import format_interval, parse, try_parse
from .scalars import Scalar, register, scalar_for

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "Interval",
    "Scalar",
    "register",
    "scalar_for",
    "has_overlap",
    "union",
    "intersection",
    "subtract",
    "convert",
    "parse",
    "try_parse",
    "format_interval",
    "interval_until",
    "interval_from",
    "closed",
    "open",
    "closed_open",
    "open_closed",
    "point",
    "at_least",
    "at_most",
    "greater_than",
    "less_than",
    "unbounded",
    "IntervalError",
    "ReversedEdges",
    "EmptyInterval",
    "SeparatedIntervals",
    "InconsistentSubtraction",
    "EmptyInput",
    "MalformedNotation",
    "docs",
]
