"""
pwspec - generate passwords from a declarative spec.
"""

from .spec import Charset, Constraint, ConstraintSet, Interval, PasswordSpec
from .utils.password_generator import generate_password

__version__ = "0.1.0"

__all__ = ['Charset', 'Constraint', 'ConstraintSet', 'Interval', 'PasswordSpec', 'generate_password']
