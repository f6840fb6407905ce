"""NTID CLI.

Usage:
    python -m ntid <type>

Prints a freshly generated NTID of the given type, e.g.::

    $ python -m ntid User
    User[MZlL-RDgaMn05ebg3iyTt8]
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

import typer

from ntid.codec.generator import make_id

TYPE_PATTERN = re.compile(r"[A-Za-z0-9]+")
USAGE = "Usage: ntid <type>"

app = typer.Typer(
    name="ntid",
    help="Generate typed, tagged identifiers (NTIDs).",
    add_completion=False,
)


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        from ntid import __version__

        typer.echo(f"ntid v{__version__}")
        raise typer.Exit()


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def main(
    ctx: typer.Context,
    types: Optional[List[str]] = typer.Argument(
        None, metavar="TYPE", help="Type tag for the new NTID (letters and digits only)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
):
    """Print a new random NTID of the given type."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    # Unrecognised dash-prefixed tokens are treated as type arguments
    types = [*(types or []), *ctx.args]
    if not types:
        _fail(USAGE)
    if len(types) > 1:
        _fail("You must specify only one type for an NTID")

    type_ = types[0]
    if not TYPE_PATTERN.fullmatch(type_):
        _fail("The NTID type can contain only letters and numbers")

    typer.echo(make_id(type_))


if __name__ == "__main__":
    app()
