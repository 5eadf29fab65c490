"""Input unit splitting.

Utilities for cutting a byte stream into candidate JSON documents:
- iter_lines: one unit per newline-terminated line
- read_single: the whole stream as one unit, newlines removed
"""

from typing import BinaryIO, Iterator


def iter_lines(input_stream: BinaryIO) -> Iterator[bytes]:
    """Yield each line of ``input_stream``, newline included.

    A last line without a trailing newline is still yielded; an empty read
    at end of stream yields nothing. ``OSError`` from the stream propagates
    to the caller.

    Args:
        input_stream: Binary stream to read from
    """
    while True:
        line = input_stream.readline()
        if not line:
            return
        yield line


def read_single(input_stream: BinaryIO) -> bytes:
    """Read ``input_stream`` to the end and delete every newline byte.

    Embedded newlines are removed, not replaced, so what remains is joined
    with no separator. Carriage returns are left in place.
    """
    return input_stream.read().replace(b"\n", b"")
