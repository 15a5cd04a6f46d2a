"""
CLI interface for pwspec.
"""

import logging
import sys
from typing import Any, Optional, Tuple

import click

from .exceptions import PwspecException
from .spec.constraint import Constraint
from .spec.interval import Interval
from .spec.password import PasswordSpec
from .utils.password_generator import DEFAULT_SPEC, apply_overrides, describe_spec
from .utils.validation import unrepresentable_charsets

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Constraints couldn't be met, try again"

EPILOG = """\b
A spec looks like LENGTH//INTERVAL|CHARSET//INTERVAL|CHARSET...
A CHARSET is either a run of literal characters or one of the patterns
:upper:, :lower:, :number:, :symbol:.
An INTERVAL is N for exactly N characters, N+ for at least N, N- for at
most N, and A-B for between A and B.

\b
Examples:
  pwspec
  pwspec -l 12
  pwspec --spec '16//3+|:upper://1-2|:lower://3-|:number://1|:symbol:'
  pwspec -s 0 -c '1+|!@#$%^&*_+-='
"""


class IntervalType(click.ParamType):
    """Click type for N, N+, N- and A-B."""

    name = "interval"

    def convert(self, value: Any, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> Interval:
        if isinstance(value, Interval):
            return value
        try:
            return Interval.parse(value)
        except PwspecException as e:
            self.fail(str(e), param, ctx)


class ConstraintType(click.ParamType):
    """Click type for INTERVAL|CHARSET."""

    name = "constraint"

    def convert(self, value: Any, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> Constraint:
        if isinstance(value, Constraint):
            return value
        try:
            return Constraint.parse(value)
        except PwspecException as e:
            self.fail(str(e), param, ctx)


class SpecType(click.ParamType):
    """Click type for a full password spec."""

    name = "spec"

    def convert(self, value: Any, param: Optional[click.Parameter],
                ctx: Optional[click.Context]) -> PasswordSpec:
        if isinstance(value, PasswordSpec):
            return value
        try:
            return PasswordSpec.parse(value)
        except PwspecException as e:
            self.fail(str(e), param, ctx)


INTERVAL = IntervalType()
CONSTRAINT = ConstraintType()
SPEC = SpecType()


@click.command(epilog=EPILOG)
@click.option(
    "--spec",
    "-p",
    type=SPEC,
    default=DEFAULT_SPEC,
    envvar="PWSPEC_SPEC",
    show_default=True,
    help="Base password spec",
)
@click.option("--length", "-l", type=click.IntRange(min=0), help="Length of the generated password")
@click.option("--upper", "-u", type=INTERVAL, help="Constraint on uppercase characters, N|N+|N-|A-B")
@click.option("--lower", "-d", type=INTERVAL, help="Constraint on lowercase characters, N|N+|N-|A-B")
@click.option("--number", "-n", type=INTERVAL, help="Constraint on number characters, N|N+|N-|A-B")
@click.option("--symbol", "-s", type=INTERVAL, help="Constraint on symbol characters, N|N+|N-|A-B")
@click.option(
    "--custom",
    "-c",
    type=CONSTRAINT,
    multiple=True,
    help="Constraint on custom characters, INTERVAL|CHARSET (repeatable)",
)
@click.option("--show-spec", is_flag=True, help="Print the effective spec to stderr")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="pwspec")
def cli(spec: PasswordSpec, length: Optional[int], upper: Optional[Interval],
        lower: Optional[Interval], number: Optional[Interval], symbol: Optional[Interval],
        custom: Tuple[Constraint, ...], show_spec: bool, verbose: bool) -> None:
    """Generate a password based on a spec.

    The default spec should cover most needs, possibly with a length
    adjustment via -l N. Options override parts of the base spec.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    password_spec = apply_overrides(spec, length, upper, lower, number, symbol, custom)

    if show_spec:
        for charset in unrepresentable_charsets(password_spec):
            logger.warning(f"Custom charset '{charset}' can't be read back from spec text")
        click.echo(f"Spec: {password_spec}", err=True)
        click.echo(describe_spec(password_spec), err=True)

    password = password_spec.generate()
    if password is None:
        click.echo(FAILURE_MESSAGE, err=True)
        sys.exit(1)

    click.echo(password)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
