"""jsonpp: pretty-print JSON documents from files or standard input."""

from .context import Options
from .errors import JSONSyntaxError

__all__ = ["__version__", "JSONSyntaxError", "Options"]

__version__ = "0.0.1"
