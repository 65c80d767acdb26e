"""Delimiter-bounded substring extraction.

A bookend is a delimiter marking the start (left) or end (right) of a
region. The region runs from the first occurrence of the left bookend to the
last occurrence of the right bookend that follows it. These functions never
fail on content: a bookend that cannot be found falls back to the start or
end of the whole string.
"""

__docformat__ = 'google'

__all__ = [
    'outer_between',
    'between',
    'ensure_left',
    'ensure_right'
]

import logging
from typing import NamedTuple, Optional
from stringfix.errors import InvalidArgument

logger = logging.getLogger(__name__)

class _Region(NamedTuple):
    start: int
    end: int
    left_width: int
    right_width: int

def _require(name: str, delimiter: str):
    if not delimiter:
        raise InvalidArgument(f'{name} must be a non-empty string')

def _locate(text: str, left: str, right: Optional[str]) -> _Region:
    right = left if right is None else right
    _require('left', left)
    _require('right', right)

    left_at = text.find(left)
    if left_at < 0:
        logger.debug('Left bookend %r not found, starting at 0', left)
        start, left_width = 0, 0
    else:
        start, left_width = left_at, len(left)

    right_at = text.rfind(right, start + left_width)
    if right_at < 0:
        logger.debug('Right bookend %r not found, ending at %d', right, len(text))
        end, right_width = len(text), 0
    else:
        end, right_width = right_at + len(right), len(right)

    return _Region(start, end, left_width, right_width)

def outer_between(text: str, left: str, right: Optional[str] = None) -> str:
    """
    Extract the substring between two bookends, including the bookends.

    Args:
        text: Any string
        left: The left bookend
        right: The right bookend; defaults to `left`

    Returns:
        Substring from the first `left` through the last following `right`,
        or the whole string if neither bookend is found

    Raises:
        InvalidArgument: If a bookend is empty

    Example:
        >>> outer_between('Here is |some| text', '|')
        '|some|'
        >>> outer_between('Here ?is some !more? test', '!', '?')
        '!more?'
    """
    region = _locate(text, left, right)
    return text[region.start:region.end]

def between(text: str, left: str, right: Optional[str] = None) -> str:
    """
    Extract the substring between two bookends, excluding the bookends.

    Only bookends that were actually found are stripped, so a missing
    bookend never cuts into the text.

    Args:
        text: Any string
        left: The left bookend
        right: The right bookend; defaults to `left`

    Returns:
        Substring strictly between the bookends

    Raises:
        InvalidArgument: If a bookend is empty

    Example:
        >>> between('Big !test! today', '!')
        'test'
        >>> between('Here ?is some !more? test', '!', '?')
        'more'
        >>> between('no bookends here', '[', ']')
        'no bookends here'
    """
    region = _locate(text, left, right)
    return text[region.start + region.left_width:region.end - region.right_width]

def ensure_left(text: str, prefix: str) -> str:
    """
    Prepend `prefix` unless the string already starts with it.

    Example:
        >>> ensure_left('example.com', 'https://')
        'https://example.com'
        >>> ensure_left('https://example.com', 'https://')
        'https://example.com'
    """
    _require('prefix', prefix)
    return text if text.startswith(prefix) else prefix + text

def ensure_right(text: str, suffix: str) -> str:
    """
    Append `suffix` unless the string already ends with it.

    Example:
        >>> ensure_right('example.com', '/')
        'example.com/'
    """
    _require('suffix', suffix)
    return text if text.endswith(suffix) else text + suffix
