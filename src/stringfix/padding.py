"""Padding and repetition.

`count` is always a number of repetitions, not a target width:
`pad_left('derp', 5, 'z')` adds five filler strings whatever the length of
the input.
"""

__docformat__ = 'google'

__all__ = [
    'pad_left',
    'pad_right',
    'pad',
    'times'
]

import logging
from stringfix.constants import DEFAULT_FILLER
from stringfix.errors import InvalidArgument

logger = logging.getLogger(__name__)

def _fill(count: int, filler: str) -> str:
    if count < 0:
        raise InvalidArgument(f'count must be zero or greater, got {count}')
    return filler * count

def pad_left(text: str, count: int, filler: str = DEFAULT_FILLER) -> str:
    """
    Prepend `filler` repeated `count` times.

    Args:
        text: Any string
        count: Number of times to repeat `filler`
        filler: String to repeat

    Returns:
        Padded string

    Raises:
        InvalidArgument: If `count` is negative

    Example:
        >>> pad_left('derp', 5, 'z')
        'zzzzzderp'
    """
    return _fill(count, filler) + text

def pad_right(text: str, count: int, filler: str = DEFAULT_FILLER) -> str:
    """
    Append `filler` repeated `count` times.

    Example:
        >>> pad_right('derp', 5, 'z')
        'derpzzzzz'
    """
    return text + _fill(count, filler)

def pad(text: str, count: int, filler: str = DEFAULT_FILLER) -> str:
    """
    Pad both sides with `filler` repeated `count` times.

    The result is `2 * count * len(filler)` characters longer than the input.

    Example:
        >>> pad('derp', 5, 'z')
        'zzzzzderpzzzzz'
    """
    return pad_right(pad_left(text, count, filler), count, filler)

def times(text: str, count: int) -> str:
    """
    Repeat a string `count` times.

    Counts below 1 are treated as 1, so the input is always returned at
    least once.

    Example:
        >>> times('ab', 3)
        'ababab'
        >>> times('ab', 0)
        'ab'
    """
    if count < 1:
        logger.debug('Repetition count %d raised to 1', count)
        count = 1
    return text * count
