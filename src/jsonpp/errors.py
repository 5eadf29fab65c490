"""Error types shared by the scanner and the formatting pipeline."""

from __future__ import annotations


class JSONSyntaxError(ValueError):
    """Malformed JSON, with the byte offset where scanning stopped.

    ``offset`` counts the bytes consumed when the problem was detected, so
    it includes the offending byte (or equals the input length when the
    input ended too early).
    """

    def __init__(self, msg: str, offset: int) -> None:
        super().__init__(msg)
        self.msg = msg
        self.offset = offset

    def __str__(self) -> str:
        return self.msg


__all__ = ["JSONSyntaxError"]
