"""Case-style conversion.

`camelize`, `slugify` and `snake_case` all tokenize with
`stringfix.tokenizer.words` and only differ in how words are cased and
joined. `capitalize` works on the whole string instead.
"""

__docformat__ = 'google'

__all__ = [
    'camelize',
    'slugify',
    'snake_case',
    'capitalize'
]

from stringfix.constants import SLUG_SEPARATOR, SNAKE_SEPARATOR
from stringfix.tokenizer import words

def _title_word(word: str) -> str:
    return word[:1].upper() + word[1:].lower()

def camelize(text: str) -> str:
    """
    Convert a string to camelCase.

    The first word is lowercased; every following word gets an uppercase
    first letter and a lowercase remainder.

    Args:
        text: Any string

    Returns:
        camelCase string, or an empty string if the input has no letters

    Example:
        >>> camelize(' Big test big pass pls')
        'bigTestBigPassPls'
        >>> camelize('i-am-a-kebab_and_a_snake')
        'iAmAKebabAndASnake'
    """
    tokens = words(text)
    if not tokens:
        return ''
    first, *rest = tokens
    return first.lower() + ''.join(_title_word(w) for w in rest)

def slugify(text: str, preserve_case: bool = False) -> str:
    """
    Convert a string to a kebab-case slug.

    Args:
        text: Any string
        preserve_case: Keep each word's casing instead of lowercasing it

    Returns:
        Words joined with '-'

    Example:
        >>> slugify('have a good day!')
        'have-a-good-day'
        >>> slugify("you!really%%%Shouldn't Have")
        'you-really-shouldn-t-have'
        >>> slugify('Big Day', preserve_case=True)
        'Big-Day'
    """
    tokens = words(text)
    if not preserve_case:
        tokens = [w.lower() for w in tokens]
    return SLUG_SEPARATOR.join(tokens)

def snake_case(text: str) -> str:
    """
    Convert a string to snake_case.

    Example:
        >>> snake_case('Hello World 2day')
        'hello_world_day'
    """
    return SNAKE_SEPARATOR.join(w.lower() for w in words(text))

def capitalize(text: str) -> str:
    """
    Uppercase the first character and lowercase the rest.

    An empty string is returned unchanged.

    Example:
        >>> capitalize('hELLO wORLD')
        'Hello world'
    """
    return _title_word(text)
