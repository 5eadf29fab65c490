"""Byte-level JSON scanner.

A small state machine that validates JSON one byte at a time without
building any Python values. Each step reports what kind of byte was seen
(start of a literal, structural punctuation, insignificant whitespace...)
so callers such as :func:`jsonpp.core.indent.indent` can re-emit the input
with new whitespace while copying literals byte-for-byte.

Bytes are handled as one-character ``str`` values decoded with latin-1,
so the scanner's byte count is always the offset into the raw input.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, List, Optional

from ..errors import JSONSyntaxError

MAX_NESTING_DEPTH = 10000

WHITESPACE = " \t\r\n"
DIGITS = "0123456789"
HEX_DIGITS = "0123456789abcdefABCDEF"


class Op(IntEnum):
    """Result of feeding one byte to the scanner."""

    CONTINUE = 0  # uninteresting byte, usually inside a literal
    BEGIN_LITERAL = 1  # first byte of a string, number or keyword
    BEGIN_OBJECT = 2
    OBJECT_KEY = 3  # ':' after a key
    OBJECT_VALUE = 4  # ',' after a member
    END_OBJECT = 5
    BEGIN_ARRAY = 6
    ARRAY_VALUE = 7  # ',' after an element
    END_ARRAY = 8
    SKIP_SPACE = 9
    END = 10  # byte after the top-level value
    ERROR = 11


class Parse(IntEnum):
    OBJECT_KEY = 0
    OBJECT_VALUE = 1
    ARRAY_VALUE = 2


_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


def quote_char(c: str) -> str:
    """Quote a byte for an error message: ``'x'``, ``'\\n'``, ``'\\u0080'``.

    Control bytes below 0x80 are shown as ``\\xNN``; other non-printable
    bytes as the code point they map to, ``\\u00NN``.
    """
    if c == "'":
        return "'\\''"
    if c in _ESCAPES:
        body = _ESCAPES[c]
    elif c.isprintable():
        body = c
    elif c < "\x80":
        body = f"\\x{ord(c):02x}"
    else:
        body = f"\\u{ord(c):04x}"
    return f"'{body}'"


class Scanner:
    """Incremental JSON validator.

    Call :meth:`feed` for each byte, then :meth:`eof` once the input is
    exhausted. After an ``Op.ERROR`` the scanner stays in the error state
    and :attr:`err` holds the :class:`JSONSyntaxError`.
    """

    def __init__(self) -> None:
        self.bytes = 0
        self.reset()

    def reset(self) -> None:
        self.step: Callable[[str], Op] = self._begin_value
        self.parse_state: List[Parse] = []
        self.err: Optional[JSONSyntaxError] = None
        self.end_top = False
        self._hex_left = 0

    def feed(self, c: str) -> Op:
        self.bytes += 1
        return self.step(c)

    def eof(self) -> Op:
        """Signal end of input; returns ``Op.END`` or ``Op.ERROR``."""
        if self.err is not None:
            return Op.ERROR
        if self.end_top:
            return Op.END
        # A trailing space terminates a pending number or keyword.
        self.step(" ")
        if self.end_top:
            return Op.END
        if self.err is None:
            self.err = JSONSyntaxError(
                "unexpected end of JSON input", self.bytes
            )
        return Op.ERROR

    # -- bookkeeping -----------------------------------------------------

    def _error(self, c: str, context: str) -> Op:
        self.step = self._error_state
        self.err = JSONSyntaxError(
            f"invalid character {quote_char(c)} {context}", self.bytes
        )
        return Op.ERROR

    def _push(self, c: str, state: Parse, success: Op) -> Op:
        self.parse_state.append(state)
        if len(self.parse_state) <= MAX_NESTING_DEPTH:
            return success
        return self._error(c, "exceeded max depth")

    def _pop(self) -> None:
        self.parse_state.pop()
        if self.parse_state:
            self.step = self._end_value
        else:
            self.step = self._end_top
            self.end_top = True

    # -- value boundaries ------------------------------------------------

    def _begin_value_or_empty(self, c: str) -> Op:
        if c in WHITESPACE:
            return Op.SKIP_SPACE
        if c == "]":
            return self._end_value(c)
        return self._begin_value(c)

    def _begin_value(self, c: str) -> Op:
        if c in WHITESPACE:
            return Op.SKIP_SPACE
        if c == "{":
            self.step = self._begin_string_or_empty
            return self._push(c, Parse.OBJECT_KEY, Op.BEGIN_OBJECT)
        if c == "[":
            self.step = self._begin_value_or_empty
            return self._push(c, Parse.ARRAY_VALUE, Op.BEGIN_ARRAY)
        literal = {
            '"': self._in_string,
            "-": self._neg,
            "0": self._zero,
            "t": self._t,
            "f": self._f,
            "n": self._n,
        }.get(c)
        if literal is None and c in "123456789":
            literal = self._one
        if literal is None:
            return self._error(c, "looking for beginning of value")
        self.step = literal
        return Op.BEGIN_LITERAL

    def _begin_string_or_empty(self, c: str) -> Op:
        if c in WHITESPACE:
            return Op.SKIP_SPACE
        if c == "}":
            self.parse_state[-1] = Parse.OBJECT_VALUE
            return self._end_value(c)
        return self._begin_string(c)

    def _begin_string(self, c: str) -> Op:
        if c in WHITESPACE:
            return Op.SKIP_SPACE
        if c == '"':
            self.step = self._in_string
            return Op.BEGIN_LITERAL
        return self._error(c, "looking for beginning of object key string")

    def _end_value(self, c: str) -> Op:
        if not self.parse_state:
            self.step = self._end_top
            self.end_top = True
            return self._end_top(c)
        if c in WHITESPACE:
            self.step = self._end_value
            return Op.SKIP_SPACE

        state = self.parse_state[-1]
        if state is Parse.OBJECT_KEY:
            if c == ":":
                self.parse_state[-1] = Parse.OBJECT_VALUE
                self.step = self._begin_value
                return Op.OBJECT_KEY
            return self._error(c, "after object key")
        if state is Parse.OBJECT_VALUE:
            if c == ",":
                self.parse_state[-1] = Parse.OBJECT_KEY
                self.step = self._begin_string
                return Op.OBJECT_VALUE
            if c == "}":
                self._pop()
                return Op.END_OBJECT
            return self._error(c, "after object key:value pair")
        if c == ",":
            self.step = self._begin_value
            return Op.ARRAY_VALUE
        if c == "]":
            self._pop()
            return Op.END_ARRAY
        return self._error(c, "after array element")

    def _end_top(self, c: str) -> Op:
        # Only whitespace may follow; the byte is still reported as END so
        # the error surfaces on the next feed() or at eof().
        if c not in WHITESPACE:
            self._error(c, "after top-level value")
        return Op.END

    def _error_state(self, c: str) -> Op:
        return Op.ERROR

    # -- strings ---------------------------------------------------------

    def _in_string(self, c: str) -> Op:
        if c == '"':
            self.step = self._end_value
            return Op.CONTINUE
        if c == "\\":
            self.step = self._in_string_esc
            return Op.CONTINUE
        if c < "\x20":
            return self._error(c, "in string literal")
        return Op.CONTINUE

    def _in_string_esc(self, c: str) -> Op:
        if c in 'bfnrt\\/"':
            self.step = self._in_string
            return Op.CONTINUE
        if c == "u":
            self._hex_left = 4
            self.step = self._in_string_esc_u
            return Op.CONTINUE
        return self._error(c, "in string escape code")

    def _in_string_esc_u(self, c: str) -> Op:
        if c not in HEX_DIGITS:
            return self._error(c, "in \\u hexadecimal character escape")
        self._hex_left -= 1
        if not self._hex_left:
            self.step = self._in_string
        return Op.CONTINUE

    # -- numbers ---------------------------------------------------------

    def _neg(self, c: str) -> Op:
        if c == "0":
            self.step = self._zero
            return Op.CONTINUE
        if c in "123456789":
            self.step = self._one
            return Op.CONTINUE
        return self._error(c, "in numeric literal")

    def _one(self, c: str) -> Op:
        if c in DIGITS:
            return Op.CONTINUE
        return self._zero(c)

    def _zero(self, c: str) -> Op:
        if c == ".":
            self.step = self._dot
            return Op.CONTINUE
        if c in "eE":
            self.step = self._exp
            return Op.CONTINUE
        return self._end_value(c)

    def _dot(self, c: str) -> Op:
        if c in DIGITS:
            self.step = self._dot_digits
            return Op.CONTINUE
        return self._error(c, "after decimal point in numeric literal")

    def _dot_digits(self, c: str) -> Op:
        if c in DIGITS:
            return Op.CONTINUE
        if c in "eE":
            self.step = self._exp
            return Op.CONTINUE
        return self._end_value(c)

    def _exp(self, c: str) -> Op:
        if c in "+-":
            self.step = self._exp_sign
            return Op.CONTINUE
        return self._exp_sign(c)

    def _exp_sign(self, c: str) -> Op:
        if c in DIGITS:
            self.step = self._exp_digits
            return Op.CONTINUE
        return self._error(c, "in exponent of numeric literal")

    def _exp_digits(self, c: str) -> Op:
        if c in DIGITS:
            return Op.CONTINUE
        return self._end_value(c)

    # -- keywords --------------------------------------------------------

    def _keyword(self, word: str, pos: int) -> Callable[[str], Op]:
        """Step function expecting ``word[pos]``."""

        def step(c: str) -> Op:
            if c != word[pos]:
                return self._error(
                    c, f"in literal {word} (expecting {quote_char(word[pos])})"
                )
            if pos + 1 == len(word):
                self.step = self._end_value
            else:
                self.step = self._keyword(word, pos + 1)
            return Op.CONTINUE

        return step

    def _t(self, c: str) -> Op:
        return self._keyword("true", 1)(c)

    def _f(self, c: str) -> Op:
        return self._keyword("false", 1)(c)

    def _n(self, c: str) -> Op:
        return self._keyword("null", 1)(c)
