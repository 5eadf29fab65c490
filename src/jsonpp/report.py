"""Diagnostics written to standard error.

Both reporters flush standard output first so that, when stdout and stderr
point at the same place, each diagnostic lands after the documents that
were formatted before it.
"""

import sys
from typing import Optional, Tuple

import click

CONTEXT_BEFORE = 15
CONTEXT_WIDTH = 30


def _flush_stdout() -> None:
    # Also flushes the binary buffer underneath, where documents are written.
    sys.stdout.flush()


def context_window(unit: bytes, offset: int) -> Tuple[str, bytes, str]:
    """Slice of ``unit`` shown around a syntax error.

    The window starts 15 bytes before ``offset`` and spans 30 bytes,
    clamped to the input. ``...`` marks a side that was cut short of the
    input's edge. Trailing CR/LF bytes are dropped from the snippet.

    Returns:
        ``(prefix, snippet, suffix)``
    """
    prefix = suffix = ""
    begin = 0
    if offset > CONTEXT_BEFORE:
        begin = offset - CONTEXT_BEFORE
        prefix = "..."

    end = begin + CONTEXT_WIDTH
    if end > len(unit):
        end = len(unit)
    else:
        suffix = "..."
    return prefix, unit[begin:end].rstrip(b"\r\n"), suffix


def malformed_json(
    err: Exception, unit: bytes, line_num: int, offset: Optional[int] = None
) -> None:
    """Report a unit that failed JSON validation.

    Args:
        err: The parse error; its text is shown verbatim
        unit: Raw bytes of the offending unit
        line_num: 1-based unit number within the source
        offset: Byte offset of the error, if the parser reported one
    """
    _flush_stdout()

    if offset is None:
        click.echo(f"ERROR: Broken json on line {line_num}: {err}", err=True)
        return

    click.echo(
        f"ERROR: Broken json on line {line_num}, char {offset}: {err}",
        err=True,
    )
    prefix, snippet, suffix = context_window(unit, offset)
    text = snippet.decode("utf-8", errors="replace")
    click.echo(f"  Context: {prefix}{text}{suffix}", err=True)


def print_error(err: Exception) -> None:
    """Report a failed operation such as opening or reading a file."""
    _flush_stdout()
    click.echo(f"ERROR: {err}", err=True)
