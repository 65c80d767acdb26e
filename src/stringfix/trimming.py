"""Whitespace trimming and collapsing.

Whitespace is anything `str.isspace` accepts (the same test as
`stringfix.predicates.is_whitespace`): spaces, tabs, newlines, carriage
returns and the other Unicode space characters.
"""

__docformat__ = 'google'

__all__ = [
    'trim_left',
    'trim_right',
    'trim',
    'collapse_whitespace'
]

from stringfix.constants import COLLAPSE_SEPARATOR

def trim_left(text: str) -> str:
    """
    Remove leading whitespace.

    Example:
        >>> trim_left('   \\n\\t Ayyy  ')
        'Ayyy  '
    """
    return text.lstrip()

def trim_right(text: str) -> str:
    """
    Remove trailing whitespace.

    Example:
        >>> trim_right('   \\n\\t Ayyy  ')
        '   \\n\\t Ayyy'
    """
    return text.rstrip()

def trim(text: str) -> str:
    """
    Remove leading and trailing whitespace.

    Example:
        >>> trim('   \\n\\t Ayyy  ')
        'Ayyy'
    """
    return trim_right(trim_left(text))

def collapse_whitespace(text: str) -> str:
    """
    Trim a string and squish each internal run of whitespace to a single space.

    Args:
        text: Any string

    Returns:
        Trimmed string whose words are separated by exactly one space

    Example:
        >>> collapse_whitespace('     ayyy lmao \\n\\n\\t    ')
        'ayyy lmao'
        >>> collapse_whitespace('ayyy  \\n\\t  lmao')
        'ayyy lmao'
    """
    return COLLAPSE_SEPARATOR.join(text.split())
