"""Logging for the textlut command line tools

The library modules only create loggers with ``logging.getLogger(__name__)``,
nothing is printed until a tool calls `setup_logger`.  Records go to stderr
since stdout carries the plot scripts.
"""
from typing import Any, Optional
import logging
import json

from rich.logging import RichHandler
from rich.console import Console

LEVELS = ("INFO", "DEBUG")


def _handler(console: Console) -> RichHandler:
    # table text is full of square brackets, which rich would take as markup
    handler = RichHandler(console=console, show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def reset_logger() -> logging.Logger:
    """Remove the handlers added by `setup_logger`, closing any log file"""
    logger = logging.getLogger("textlut")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, RichHandler) and not handler.console.stderr:
            handler.console.file.close()
    logger.setLevel(logging.NOTSET)
    return logger


def setup_logger(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Print the ``textlut`` log records through rich

    Parameters
    ----------
        level: str, optional
            INFO or DEBUG, defaults to INFO
        logfile: str, optional
            Also write the records to this file, it is overwritten

    Calling it again replaces the previous handlers.
    """
    if level not in LEVELS:
        raise ValueError(
            "Unknown log level {!r}, use one of: {}".format(level, ", ".join(LEVELS))
        )
    logger = reset_logger()
    logger.setLevel(level)
    logger.addHandler(_handler(Console(stderr=True)))
    if logfile:
        logger.addHandler(_handler(Console(file=open(logfile, "w"), width=120)))
    return logger


def json_str(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, indent=4)
