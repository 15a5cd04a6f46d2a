"""
Password spec model: intervals, charsets, constraints and generation.
"""

from .charset import Charset, CharsetKind, SYMBOL_CHARACTERS
from .constraint import Constraint, ConstraintSet
from .interval import Interval
from .password import DEFAULT_LENGTH, PasswordSpec

__all__ = [
    'Charset',
    'CharsetKind',
    'Constraint',
    'ConstraintSet',
    'DEFAULT_LENGTH',
    'Interval',
    'PasswordSpec',
    'SYMBOL_CHARACTERS',
]
