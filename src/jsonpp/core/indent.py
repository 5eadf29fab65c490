"""Re-indent a JSON document without decoding it."""

from __future__ import annotations

import os
from typing import List, Optional

from .scanner import Op, Scanner


def _newline(parts: List[str], indent: str, depth: int) -> None:
    parts.append("\n")
    parts.append(indent * depth)


def indent(
    src: bytes,
    indent: str = "  ",
    dst: Optional[bytearray] = None,
) -> bytearray:
    """Append an indented rendering of the JSON document ``src`` to ``dst``.

    Each element of an object or array starts on a new line holding one
    copy of ``indent`` per nesting level. Empty objects and arrays stay
    ``{}`` and ``[]``. String and number literals are copied byte-for-byte.
    Leading whitespace is dropped and trailing whitespace is kept as-is.

    Args:
        src: Raw bytes of one candidate document
        indent: String emitted once per nesting level
        dst: Buffer to append to (a new one is created when omitted)

    Returns:
        ``dst`` with the rendering appended

    Raises:
        JSONSyntaxError: if ``src`` is not valid JSON; ``dst`` is left
            untouched in that case
    """
    if dst is None:
        dst = bytearray()

    # Work in latin-1 so that every str character is exactly one input byte.
    indent = os.fsencode(indent).decode("latin-1")

    scanner = Scanner()
    parts: List[str] = []
    need_indent = False
    depth = 0

    for c in src.decode("latin-1"):
        op = scanner.feed(c)
        if op is Op.SKIP_SPACE:
            continue
        if op is Op.ERROR:
            break
        if need_indent and op is not Op.END_OBJECT and op is not Op.END_ARRAY:
            need_indent = False
            depth += 1
            _newline(parts, indent, depth)

        # Bytes inside literals are copied unmodified.
        if op is Op.CONTINUE:
            parts.append(c)
            continue

        if c in "{[":
            # Delay the newline so empty containers render as {} and [].
            need_indent = True
            parts.append(c)
        elif c == ",":
            parts.append(c)
            _newline(parts, indent, depth)
        elif c == ":":
            parts.append(": ")
        elif c in "}]":
            if need_indent:
                need_indent = False
            else:
                depth -= 1
                _newline(parts, indent, depth)
            parts.append(c)
        else:
            parts.append(c)

    if scanner.eof() is Op.ERROR:
        raise scanner.err

    dst += "".join(parts).encode("latin-1")
    return dst
