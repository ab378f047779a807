import logging
from typing import Tuple

import click

from .checksum import verify
from .exceptions import CreditorReferenceError
from .models import CreditorReference
from .references import parse_full_reference


logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--strict-whitespace",
    is_flag=True,
    help="Reject whitespace instead of ignoring it.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, strict_whitespace: bool, verbose: bool) -> None:
    """Generate and validate ISO 11649 creditor references."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["strip_whitespace"] = not strict_whitespace


@main.command()
@click.argument("bodies", nargs=-1, required=True)
@click.option(
    "--print-format",
    is_flag=True,
    help="Print the references in groups of four characters.",
)
@click.pass_context
def generate(ctx: click.Context, bodies: Tuple[str, ...], print_format: bool) -> None:
    """Print the creditor reference for each BODY, e.g. an invoice number."""
    for body in bodies:
        try:
            reference = CreditorReference.generate(
                body, strip_whitespace=ctx.obj["strip_whitespace"]
            )
        except CreditorReferenceError as e:
            raise click.ClickException(f"{body!r}: {e}") from e
        click.echo(reference.to_print_string() if print_format else str(reference))


@main.command()
@click.argument("references", nargs=-1, required=True)
@click.pass_context
def validate(ctx: click.Context, references: Tuple[str, ...]) -> None:
    """Check each REFERENCE; exit with status 1 unless all are valid."""
    all_valid = True
    for reference in references:
        try:
            check_digits, body = parse_full_reference(
                reference, strip_whitespace=ctx.obj["strip_whitespace"]
            )
        except CreditorReferenceError as e:
            logger.info(f"Rejected malformed reference {reference!r}: {e}")
            click.echo(f"{reference}: {e}")
            all_valid = False
            continue
        if verify(check_digits, body):
            click.echo(f"{reference}: valid")
        else:
            click.echo(f"{reference}: checksum mismatch")
            all_valid = False
    if not all_valid:
        ctx.exit(1)

