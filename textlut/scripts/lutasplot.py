import argparse
import logging
import sys

from ..lookup_tools import LookupTableError, load_file, plot_formats, render_plot
from . import _add_logging_arguments, _report, _settings

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="lutasplot",
        description="Produce a plot script for a look up table file on stdout",
    )
    parser.add_argument("file", help="Look up table file", type=str)
    parser.add_argument(
        "format",
        help="Plot script format (default from ~/.textlut.toml, else R)",
        nargs="?",
        choices=plot_formats(),
        default=None,
    )
    _add_logging_arguments(parser)
    args = parser.parse_args(argv)

    try:
        settings = _settings(args)
        table = load_file(args.file)
        plot_format = args.format or settings.plot_format
        sys.stdout.write(render_plot(table, plot_format))
        logger.info("%s plot script for %s", plot_format, args.file)
    except LookupTableError as err:
        return _report(err)
    return 0


if __name__ == "__main__":
    sys.exit(main())
