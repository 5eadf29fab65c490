"""jsonpp core logic, kept separate from CLI presentation.

- scanner: byte-level JSON validation with error offsets
- indent: re-indenting a document without decoding it
- streaming: splitting input into units
- pipeline: formatting units and sources, exit status
"""

from .indent import indent
from .pipeline import ExitStatus, format_unit, process_paths, process_source
from .scanner import Scanner
from .streaming import iter_lines, read_single

__all__ = [
    "ExitStatus",
    "Scanner",
    "format_unit",
    "indent",
    "iter_lines",
    "process_paths",
    "process_source",
    "read_single",
]
