"""Notation constants for intervalgebra.

Glyphs and delimiters used when formatting and parsing the bracket notation,
e.g. ``[0,10)`` or ``(-∞,5]``.
"""

# Delimiters
INCLUSIVE_START = "["
EXCLUSIVE_START = "("
INCLUSIVE_END = "]"
EXCLUSIVE_END = ")"
SEPARATOR = ","

# Infinity
INFINITY = "∞"
INFINITY_EMOJI = "♾"
NEGATIVE_INFINITY = "-" + INFINITY
POSITIVE_INFINITY = "+" + INFINITY
INFINITY_GLYPHS = (INFINITY, INFINITY_EMOJI)

# Matched case-insensitively, so "infinity", "Infinite" and "-INFINITY" all count
INFINITY_KEYWORD = "infinit"
