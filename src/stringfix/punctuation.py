__docformat__ = 'google'

__all__ = [
    'strip_punctuation'
]

from stringfix.predicates import is_punctuation

def strip_punctuation(text: str) -> str:
    """
    Remove every Unicode punctuation character.

    Symbols such as '$' or '+' are not punctuation and are kept.

    Example:
        >>> strip_punctuation("Loud's Island, ME!")
        'Louds Island ME'
    """
    return ''.join(c for c in text if not is_punctuation(c))
