"""Command line tools

- ``lutasplot``: print a plot script for a look up table file
- ``planetable``: overwrite the values of a look up table file with a plane
"""
import logging
from dataclasses import asdict

from rich.console import Console

from ..config import textlut_settings
from ..logger import json_str, setup_logger

logger = logging.getLogger(__name__)


def _add_logging_arguments(parser):
    parser.add_argument(
        "-v", "--verbose", help="Print debugging information", action="store_true"
    )
    parser.add_argument(
        "--logfile", help="Also write the log to this file", type=str, default=None
    )


def _settings(args):
    settings = textlut_settings.from_config()
    level = "DEBUG" if args.verbose else settings.log_level
    if level == "DEBUG" or args.logfile:
        setup_logger(level, args.logfile)
    logger.debug("settings: %s", json_str(asdict(settings)))
    return settings


def _report(err):
    # messages contain square brackets, keep rich from reading them as markup
    Console(stderr=True).print(
        "error: {}".format(err), markup=False, style="red", soft_wrap=True
    )
    logger.debug("failed with %r", err)
    return 1
