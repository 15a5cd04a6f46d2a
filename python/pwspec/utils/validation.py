"""
Validation of custom charset literals against the spec grammar.
"""

from typing import Optional

from ..spec.charset import CharsetKind
from ..spec.password import PasswordSpec, SEPARATOR


def is_representable_charset(chars: str) -> bool:
    """
    Check whether a custom literal survives a trip through the spec text.

    Args:
        chars: The custom characters

    Returns:
        True if the literal can be written into and read back from a spec
    """
    return get_validation_error_message(chars) is None


def get_validation_error_message(chars: str) -> Optional[str]:
    """
    Describe why a custom literal can't be written into spec text.

    Args:
        chars: The custom characters

    Returns:
        Error message, or None if the literal is representable
    """
    if not isinstance(chars, str):
        return "Charset must be a string"

    if len(chars) == 0:
        return "Charset cannot be empty"

    if SEPARATOR in chars:
        return f"Charset cannot contain '{SEPARATOR}'"

    if chars.endswith("/"):
        return "Charset cannot end with '/'"

    if chars[0] == ":" and chars[-1] == ":":
        return "Charset cannot start and end with ':'"

    return None


def unrepresentable_charsets(spec: PasswordSpec) -> list:
    """Custom charsets in ``spec`` that would not round-trip through text."""
    return [
        constraint.charset
        for constraint in spec
        if constraint.charset.kind is CharsetKind.CUSTOM
        and not is_representable_charset(constraint.charset.chars)
    ]


def is_representable_spec(spec: PasswordSpec) -> bool:
    return not unrepresentable_charsets(spec)

