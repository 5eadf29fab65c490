"""Runtime options resolved once from flags and the environment."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

INDENT_ENV = "JSONPP_INDENT"
DEFAULT_INDENT = "  "


class Options(BaseModel):
    """Immutable settings threaded through every processing function."""

    model_config = ConfigDict(frozen=True)

    indent: str = DEFAULT_INDENT
    single: bool = False


def resolve_indent(environ: Optional[Mapping[str, str]] = None) -> str:
    """Resolve the indent string from ``$JSONPP_INDENT``.

    Unset or empty means two spaces; any other value is used verbatim,
    tabs and runs of spaces included.

    Args:
        environ: Environment to read (default: ``os.environ``)

    Returns:
        String emitted once per nesting level
    """
    env = os.environ if environ is None else environ
    return env.get(INDENT_ENV) or DEFAULT_INDENT


def build_options(
    single: bool = False, environ: Optional[Mapping[str, str]] = None
) -> Options:
    """Build :class:`Options` from CLI flags plus the environment."""
    return Options(indent=resolve_indent(environ), single=single)
