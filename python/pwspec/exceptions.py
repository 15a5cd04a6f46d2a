"""
Custom exceptions for pwspec.
"""


class PwspecException(Exception):
    """Base exception for pwspec."""

    pass


class IntervalError(PwspecException, ValueError):
    """An interval could not be built or parsed."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class ImproperIntervalFormatError(IntervalError):
    """Interval text is not one of N, N+, N- or A-B."""

    def __init__(self, text: str):
        super().__init__(
            f"got `{text}`, expect the format for an interval to be: N, N+, N-, or A-B",
            text,
        )


class BadBoundsError(IntervalError):
    """Interval lower bound is greater than its upper bound."""

    def __init__(self, low: int, high: int):
        super().__init__(
            f"Expect the interval to have the first value <= the second, got {low} <= {high}",
            f"{low}-{high}",
        )
        self.low = low
        self.high = high


class CharsetError(PwspecException, ValueError):
    """A character set could not be parsed."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class NoCharsetError(CharsetError):
    """Character set text was empty."""

    def __init__(self):
        super().__init__("No character set")


class UnrecognizedPatternError(CharsetError):
    """Text looks like a :pattern: but is not one we know."""

    def __init__(self, text: str):
        super().__init__(f"Specified a :pattern:, but `{text}` isn't recognized", text)


class ConstraintError(PwspecException, ValueError):
    """A constraint could not be parsed."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class MissingSeparatorError(ConstraintError):
    """Constraint text has no `|` between interval and charset."""

    def __init__(self, text: str):
        super().__init__(f"Unable to parse `{text}`, expect a form like interval|charset", text)


class SpecError(PwspecException, ValueError):
    """A password spec could not be parsed."""

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class InvalidLengthError(SpecError):
    """Length segment is missing or not a non-negative number."""

    def __init__(self, text: str):
        super().__init__(
            f"Length `{text}` in the password spec was not a non-negative number", text
        )


class ImproperSpecFormatError(SpecError):
    """A constraint group is empty or unterminated."""

    def __init__(self, text: str):
        super().__init__(
            f"Password spec improperly formatted near `{text}`, "
            "expect LENGTH//INTERVAL|CHARSET//INTERVAL|CHARSET...",
            text,
        )
