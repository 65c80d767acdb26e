"""Word tokenizer shared by the case-style converters.

A word is a maximal run of letters, together with any combining marks
that follow a letter inside the run. Digits, punctuation and whitespace are
separators and never appear inside a word, so `'crazy!case-4-TEST'` splits
into `['crazy', 'case', 'TEST']` no matter which converter asks.
"""

__docformat__ = 'google'

__all__ = [
    'Span',
    'word_spans',
    'words'
]

from dataclasses import dataclass
from typing import List
from stringfix.predicates import is_letter, is_mark

@dataclass(frozen=True)
class Span:
    """
    Position of a substring within the text it was found in.

    A span does not hold the text. Apply it to the same string it was
    produced from with `Span.of`.

    Args:
        start: Index of the first character
        end: Index one past the last character
    """
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def of(self, text: str) -> str:
        return text[self.start:self.end]

def word_spans(text: str) -> List[Span]:
    """
    Locate every word in a string.

    Args:
        text: Any string

    Returns:
        Spans in left-to-right order, empty if the string has no letters

    Example:
        >>> word_spans('hi, you')
        [Span(start=0, end=2), Span(start=4, end=7)]
    """
    spans = []
    start = None
    for i, char in enumerate(text):
        if is_letter(char) or (start is not None and is_mark(char)):
            if start is None:
                start = i
        elif start is not None:
            spans.append(Span(start, i))
            start = None
    if start is not None:
        spans.append(Span(start, len(text)))
    return spans

def words(text: str) -> List[str]:
    """
    Split a string into words.

    Example:
        >>> words('crazy!case-4-TEST')
        ['crazy', 'case', 'TEST']
        >>> words('1234 !?')
        []
    """
    return [span.of(text) for span in word_spans(text)]
