"""Character-class predicates.

The single-character predicates (`is_letter`, `is_number`, `is_whitespace`,
`is_punctuation`) are the classification primitives the rest of the package
is built on. The whole-string predicates scan left to right and stop at the
first character that fails.

A combining mark (Unicode categories Mn, Mc, Me) belongs to the character
before it, so `is_alpha('cafe\\u0301')` holds even though the accent is not a
letter by itself.

All whole-string predicates are vacuously true for the empty string.
"""

__docformat__ = 'google'

__all__ = [
    # Characters
    'is_letter',
    'is_mark',
    'is_number',
    'is_digit',
    'is_whitespace',
    'is_punctuation',
    # Strings
    'is_alpha',
    'is_alphanumeric',
    'is_numeric',
    'is_integral',
    'is_empty'
]

import unicodedata
from stringfix.constants import DECIMAL_POINT

def is_letter(char: str) -> bool:
    return char.isalpha()

def is_mark(char: str) -> bool:
    return unicodedata.category(char).startswith('M')

def is_number(char: str) -> bool:
    return char.isnumeric()

def is_digit(char: str) -> bool:
    return char.isdigit()

def is_whitespace(char: str) -> bool:
    return char.isspace()

def is_punctuation(char: str) -> bool:
    """
    Check if a character belongs to a Unicode punctuation category (Pc, Pd, Ps, Pe, Pi, Pf, Po).

    Example:
        >>> is_punctuation('!')
        True
        >>> is_punctuation('$')
        False
    """
    return unicodedata.category(char).startswith('P')

def _all_with_marks(text: str, accept) -> bool:
    # all() stops at the first failure, so i > 0 means the previous character passed
    return all(accept(c) or (i > 0 and is_mark(c)) for i, c in enumerate(text))

def is_alpha(text: str) -> bool:
    """
    Check if every character is a letter.

    Args:
        text: Any string

    Returns:
        True if every character is a Unicode letter or a combining mark
        following one, else False

    Example:
        >>> is_alpha('asdfasdgf')
        True
        >>> is_alpha('1asdfasdgf')
        False
    """
    return _all_with_marks(text, is_letter)

def is_alphanumeric(text: str) -> bool:
    """
    Check if every character is a letter or a number.

    Example:
        >>> is_alphanumeric('asdfasdgf124')
        True
        >>> is_alphanumeric('ayyy?')
        False
    """
    return _all_with_marks(text, lambda c: is_letter(c) or is_number(c))

def is_numeric(text: str) -> bool:
    """
    Check if a string contains only digits and at most one decimal point.

    Args:
        text: Any string

    Returns:
        True if every character is a digit or the decimal point, and the
        decimal point appears no more than once

    Example:
        >>> is_numeric('123.456')
        True
        >>> is_numeric('123.456.789')
        False
        >>> is_numeric('123hello')
        False
    """
    decimal_found = False
    for char in text:
        if char == DECIMAL_POINT:
            if decimal_found:
                return False
            decimal_found = True
        elif not is_digit(char):
            return False
    return True

def is_integral(text: str) -> bool:
    """
    Check if a string contains only digits.

    Example:
        >>> is_integral('123')
        True
        >>> is_integral('123.5')
        False
    """
    return all(is_digit(c) for c in text)

def is_empty(text: str) -> bool:
    """
    Check if a string is blank: zero length or whitespace only.

    This is not a length check; `'  \\n\\t'` counts as empty.

    Example:
        >>> is_empty('  \\n\\t')
        True
        >>> is_empty('  \\n123\\t   ')
        False
    """
    return all(is_whitespace(c) for c in text)
