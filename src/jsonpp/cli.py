"""jsonpp CLI entry point."""

import sys

import click

from .context import build_options
from .core.pipeline import process_paths


def _usage(ctx: click.Context) -> None:
    cmd = ctx.info_name or "jsonpp"
    if cmd.startswith("./"):
        cmd = cmd[2:]
    click.echo(f"Usage: {cmd} [file]", err=True)
    click.echo(f"   or: $COMMAND | {cmd}", err=True)


@click.command(name="jsonpp", context_settings=dict(help_option_names=[]))
@click.option(
    "-s",
    "--single",
    is_flag=True,
    help="Treat each input stream as one (already formatted) JSON document",
)
@click.option(
    "-help", "--help", "show_help", is_flag=True, help="Show usage and exit"
)
@click.argument("files", nargs=-1, type=click.Path())
@click.pass_context
def cli(ctx, single, show_help, files):
    """Pretty-print JSON read from FILES or standard input.

    Every line is formatted as its own JSON document unless -s is given.
    Set $JSONPP_INDENT to change the indent string (default: two spaces).

    Exit status is 0 on success, 1 if a document is malformed or a file
    cannot be opened, and 2 on a read error.

    Examples:
        echo '{"a":1}' | jsonpp
        jsonpp events.ndjson
        JSONPP_INDENT="$(printf '\\t')" jsonpp -s config.json
    """
    if show_help:
        _usage(ctx)
        sys.exit(0)

    options = build_options(single=single)
    status = process_paths(
        files,
        options,
        stdin=sys.stdin.buffer,
        stdout=sys.stdout.buffer,
    )
    sys.exit(int(status))


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
