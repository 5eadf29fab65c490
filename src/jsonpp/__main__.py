"""Allow ``python -m jsonpp``."""

from .cli import main

main()
