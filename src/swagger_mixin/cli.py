"""CLI entry point for swagger-mixin."""

import logging
from pathlib import Path
from typing import TextIO

import click

from swagger_mixin.errors import MixinError
from swagger_mixin.mixer.files import mixin_files

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Exit status when the collision count is off and cannot be reported as-is
MISMATCH_EXIT_CODE = 254

USAGE = "Nothing to do. Need some swagger files to merge."


class EchoHandler(logging.Handler):
    """Logging handler that writes records to stderr through click.echo."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    """Send swagger_mixin log records to stderr at the requested level."""
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR

    handler = EchoHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger = logging.getLogger("swagger_mixin")
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(level)


def exit_code_for(collisions: int, expected: int) -> int:
    """Map the collision count onto the process exit status.

    0 when it matches the expected count. Otherwise the actual count, so
    build scripts can read it from $?, unless it is zero or too large to
    fit, in which case 254.
    """
    if collisions == expected:
        return 0
    if 0 < collisions < MISMATCH_EXIT_CODE:
        return collisions
    return MISMATCH_EXIT_CODE


@click.command()
@click.argument("documents", nargs=-1, metavar="PRIMARY MIXIN...", type=click.Path(path_type=Path))
@click.option(
    "-c", "--expected-collisions", default=0, type=click.IntRange(min=0),
    envvar="SWAGGER_MIXIN_EXPECTED_COLLISIONS", show_envvar=True,
    help="Expected number of rejected mixin paths, definitions, parameters and responses. Non-zero exit if it does not match.",
)
@click.option("-o", "--output", default="-", type=click.File("w", encoding="utf-8"), help="Output file for the merged JSON (default: stdout).")
@click.option("-v", "--verbose", is_flag=True, help="Also log operationId renames and loaded files.")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors.")
@click.pass_context
def main(ctx: click.Context, documents: tuple[Path, ...], expected_collisions: int, output: TextIO, verbose: bool, quiet: bool):
    """Merge Swagger 2.0 MIXIN documents into the PRIMARY document.

    The first document is the primary; the rest are mixins, highest priority
    first. Files ending in .yml or .yaml are read as YAML, everything else
    as JSON. The result is always written as JSON.
    """
    _configure_logging(verbose, quiet)

    if len(documents) < 2:
        click.echo(USAGE, err=True)
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)

    try:
        collisions = mixin_files(documents[0], list(documents[1:]), output)
    except MixinError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if collisions != expected_collisions:
        click.echo(f"Expected {expected_collisions} collision(s), got {collisions}.", err=True)
    ctx.exit(exit_code_for(collisions, expected_collisions))
