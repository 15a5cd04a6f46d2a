"""
Convenience helpers for building specs and generating passwords.
"""

import random
from typing import Iterable, Optional

from ..spec.charset import CharsetKind
from ..spec.constraint import Constraint
from ..spec.interval import Interval
from ..spec.password import PasswordSpec

DEFAULT_SPEC = "32//1+|:upper://1+|:lower://1+|:number://1+|:symbol:"

CHARSET_NAMES = {
    CharsetKind.UPPER: "uppercase",
    CharsetKind.LOWER: "lowercase",
    CharsetKind.NUMBER: "numbers",
    CharsetKind.SYMBOL: "symbols",
}


def apply_overrides(spec: PasswordSpec,
                    length: Optional[int] = None,
                    upper: Optional[Interval] = None,
                    lower: Optional[Interval] = None,
                    number: Optional[Interval] = None,
                    symbol: Optional[Interval] = None,
                    custom: Iterable[Constraint] = ()) -> PasswordSpec:
    """
    Apply per-option overrides to a base spec.

    Overrides are applied in a fixed order: length, upper, lower, number,
    symbol, then each custom constraint in the order given. A later custom
    constraint over the same characters replaces an earlier one.

    Args:
        spec: The base spec
        length: New password length
        upper: Interval for uppercase letters
        lower: Interval for lowercase letters
        number: Interval for digits
        symbol: Interval for symbols
        custom: Extra constraints over custom characters

    Returns:
        The updated spec
    """
    if length is not None:
        spec = spec.length(length)
    if upper is not None:
        spec = spec.upper(upper)
    if lower is not None:
        spec = spec.lower(lower)
    if number is not None:
        spec = spec.number(number)
    if symbol is not None:
        spec = spec.symbol(symbol)

    for constraint in custom:
        spec = spec.include(constraint)

    return spec


def describe_interval(interval: Interval) -> str:
    if interval.min == interval.max:
        return f"exactly {interval.min}"
    if interval.max is None:
        return f"at least {interval.min}"
    if interval.min == 0:
        return f"at most {interval.max}"
    return f"between {interval.min} and {interval.max}"


def describe_spec(spec: PasswordSpec) -> str:
    """
    Get human-readable description of a spec.

    Returns:
        One line for the length followed by one line per constraint
    """
    lines = [f"length: {spec.target_length}"]

    for constraint in spec:
        charset = constraint.charset
        name = CHARSET_NAMES.get(charset.kind, f"custom '{charset.chars}'")
        lines.append(f"{name}: {describe_interval(constraint.interval)}")

    return "\n".join(lines)


def generate_password(spec: Optional[str] = None,
                      length: Optional[int] = None,
                      upper: Optional[Interval] = None,
                      lower: Optional[Interval] = None,
                      number: Optional[Interval] = None,
                      symbol: Optional[Interval] = None,
                      custom: Iterable[Constraint] = (),
                      rng: Optional[random.Random] = None) -> Optional[str]:
    """
    Convenience function to generate a password.

    Args:
        spec: Spec text to start from, defaults to DEFAULT_SPEC
        length: Password length override
        upper: Uppercase interval override
        lower: Lowercase interval override
        number: Digit interval override
        symbol: Symbol interval override
        custom: Extra custom constraints
        rng: Random source passed to the generator

    Returns:
        Generated password, or None if the constraints can't be met

    Raises:
        PwspecException: If ``spec`` can't be parsed
    """
    base = PasswordSpec.parse(spec if spec is not None else DEFAULT_SPEC)
    resolved = apply_overrides(base, length, upper, lower, number, symbol, custom)
    return resolved.generate(rng)

