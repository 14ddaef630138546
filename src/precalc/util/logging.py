from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "precalc"


def configure_logging(verbose: bool = False, stderr: bool = True) -> logging.Logger:
    """Route precalc records to a rich console; DEBUG when verbose, else WARNING."""
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=stderr), rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not name or name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name or ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
