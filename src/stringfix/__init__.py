"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import bookends
from . import casing
from . import constants
from . import errors
from . import indexing
from . import padding
from . import predicates
from . import punctuation
from . import tokenizer
from . import trimming

from .bookends import *
from .casing import *
from .errors import *
from .indexing import *
from .padding import *
from .predicates import *
from .punctuation import *
from .tokenizer import *
from .trimming import *

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'bookends',
    'casing',
    'constants',
    'errors',
    'indexing',
    'padding',
    'predicates',
    'punctuation',
    'tokenizer',
    'trimming',
    *bookends.__all__,
    *casing.__all__,
    *errors.__all__,
    *indexing.__all__,
    *padding.__all__,
    *predicates.__all__,
    *punctuation.__all__,
    *tokenizer.__all__,
    *trimming.__all__
]
