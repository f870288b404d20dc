"""Allow ``python -m monty_hall``."""

from .cli import main

main()
