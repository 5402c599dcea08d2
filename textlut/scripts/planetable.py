import argparse
import logging
import sys

from ..lookup_tools import LookupTableError, load_file, save_file
from ..util import plane_values
from . import _add_logging_arguments, _report, _settings

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="planetable",
        description="Change the values of the table in the file with the function "
        "for a plane with constants a, b, and c (z = a*y + b*x + c)",
    )
    parser.add_argument("file", help="Look up table file, rewritten in place", type=str)
    parser.add_argument("a", help="y coefficient", type=float)
    parser.add_argument("b", help="x coefficient", type=float)
    parser.add_argument("c", help="constant", type=float)
    parser.add_argument(
        "digits",
        help="Number of digits to keep after the decimal place "
        "(default from ~/.textlut.toml, else 2)",
        nargs="?",
        type=int,
        default=None,
    )
    _add_logging_arguments(parser)
    args = parser.parse_args(argv)

    try:
        settings = _settings(args)
        digits = settings.round_digits if args.digits is None else args.digits
        table = load_file(args.file)
        table.set_values(
            plane_values(
                table.get_x_coords(),
                table.get_y_coords(),
                args.a,
                args.b,
                args.c,
                digits,
            )
        )
        logger.debug("z = %s*y + %s*x + %s, %d digits", args.a, args.b, args.c, digits)
        save_file(table)
        logger.info("wrote %s", table.file)
    except LookupTableError as err:
        return _report(err)
    return 0


if __name__ == "__main__":
    sys.exit(main())
