"""Default separators and fillers shared across the string operations.
"""

__docformat__ = 'google'

DEFAULT_FILLER: str = " "
"""Filler repeated by the padding functions when none is given.

Used in `stringfix.padding.pad_left`, `stringfix.padding.pad_right` and `stringfix.padding.pad`."""

DECIMAL_POINT: str = "."
"""The only non-digit character accepted by `stringfix.predicates.is_numeric`, at most once."""

SLUG_SEPARATOR: str = "-"
"""Joiner placed between words by `stringfix.casing.slugify`."""

SNAKE_SEPARATOR: str = "_"
"""Joiner placed between words by `stringfix.casing.snake_case`."""

COLLAPSE_SEPARATOR: str = " "
"""Replacement for each internal whitespace run in `stringfix.trimming.collapse_whitespace`."""
