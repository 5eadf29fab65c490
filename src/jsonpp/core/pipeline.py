"""Formatting pipeline: sources -> units -> indented documents.

Errors are reported where they are detected and turned into an
:class:`ExitStatus`; nothing below the CLI raises past its caller.
"""

from enum import IntEnum
from typing import BinaryIO, Sequence

from ..context import Options
from ..errors import JSONSyntaxError
from ..report import malformed_json, print_error
from .indent import indent
from .streaming import iter_lines, read_single


class ExitStatus(IntEnum):
    OK = 0
    FAILED = 1  # broken JSON, or a file that could not be opened
    IO_ERROR = 2  # read failure


def format_unit(
    buf: bytearray,
    unit: bytes,
    line_num: int,
    options: Options,
    out: BinaryIO,
) -> ExitStatus:
    """Validate and indent one unit, writing it to ``out`` on success.

    Args:
        buf: Scratch buffer, cleared before use
        unit: Candidate JSON document
        line_num: Unit number reported in diagnostics
        options: Resolved runtime options
        out: Binary stream receiving the formatted document

    Returns:
        ``ExitStatus.OK``, or ``ExitStatus.FAILED`` after reporting a
        malformed document
    """
    buf.clear()
    try:
        indent(unit, options.indent, dst=buf)
    except JSONSyntaxError as e:
        malformed_json(e, unit, line_num, e.offset)
        return ExitStatus.FAILED
    except ValueError as e:
        malformed_json(e, unit, line_num)
        return ExitStatus.FAILED

    out.write(buf)
    out.flush()
    return ExitStatus.OK


def process_source(
    stream: BinaryIO, options: Options, out: BinaryIO
) -> ExitStatus:
    """Format every unit of one source.

    In line mode each line is a unit numbered from 1; the source is
    abandoned at the first malformed unit. In single mode the whole
    source, newlines removed, is unit 1.
    """
    buf = bytearray()

    if options.single:
        try:
            unit = read_single(stream)
        except OSError as e:
            print_error(e)
            return ExitStatus.IO_ERROR
        return format_unit(buf, unit, 1, options, out)

    # Only reads are guarded; a failed write to ``out`` propagates.
    lines = iter_lines(stream)
    line_num = 1
    while True:
        try:
            unit = next(lines, None)
        except OSError as e:
            print_error(e)
            return ExitStatus.IO_ERROR
        if unit is None:
            return ExitStatus.OK

        status = format_unit(buf, unit, line_num, options, out)
        if status:
            return status
        line_num += 1


def process_paths(
    paths: Sequence[str],
    options: Options,
    stdin: BinaryIO,
    stdout: BinaryIO,
) -> ExitStatus:
    """Format each named file in order, or ``stdin`` when none are given.

    A file that cannot be opened is reported and skipped. A source that
    fails (malformed JSON or a read error) ends the run; later files are
    not opened.

    Returns:
        The first non-zero status seen, else ``ExitStatus.OK``
    """
    if not paths:
        return process_source(stdin, options, stdout)

    exit_status = ExitStatus.OK
    for path in paths:
        try:
            handle = open(path, "rb")
        except OSError as e:
            print_error(e)
            exit_status = exit_status or ExitStatus.FAILED
            continue

        with handle:
            status = process_source(handle, options, stdout)
        if status:
            return exit_status or status

    return exit_status
