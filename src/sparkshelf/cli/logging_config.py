# ABOUTME: Logging setup for the sparkshelf CLI.
# ABOUTME: Routes the sparkshelf logger hierarchy to a Rich handler on stderr.

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr RichHandler to the package logger (once) and set its level."""
    logger = logging.getLogger("sparkshelf")
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
