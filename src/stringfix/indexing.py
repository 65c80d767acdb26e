"""Character lookup by position.

Positions are 0-based and never wrap: negative positions are out of range
just like positions past the end.
"""

__docformat__ = 'google'

__all__ = [
    'index_of',
    'safe_index_of'
]

from typing import Optional
from stringfix.errors import OutOfRange

def _in_range(text: str, position: int) -> bool:
    return 0 <= position < len(text)

def index_of(text: str, position: int) -> str:
    """
    Return the character at a position.

    Args:
        text: Any string
        position: 0-based index into `text`

    Returns:
        The single character at `position`

    Raises:
        OutOfRange: If `position` is negative or not less than `len(text)`

    Example:
        >>> index_of('https://github.com', 8)
        'g'
    """
    if not _in_range(text, position):
        raise OutOfRange(f'position {position} is outside a string of length {len(text)}')
    return text[position]

def safe_index_of(text: str, position: int) -> Optional[str]:
    """
    Return the character at a position, or None if it is out of range.

    Example:
        >>> safe_index_of('abc', 2)
        'c'
        >>> safe_index_of('abc', 3) is None
        True
    """
    return text[position] if _in_range(text, position) else None
