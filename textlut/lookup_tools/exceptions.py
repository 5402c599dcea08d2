"""Exceptions raised by the lookup tools

Every error derives from `LookupTableError` and from the builtin exception
that best describes it, so callers can catch either.
"""


class LookupTableError(Exception):
    """Base class for all look up table errors"""


class FormatError(LookupTableError, ValueError):
    """Malformed look up table text

    Parameters
    ----------
        lineno : int
            1-based number of the offending line (0 if the problem is not
            attached to a single line)
        reason : str
            Short description of what is wrong
    """

    def __init__(self, lineno, reason):
        self.lineno = lineno
        self.reason = reason
        if lineno:
            msg = "{} (line {})".format(reason, lineno)
        else:
            msg = reason
        super(FormatError, self).__init__(msg)


class LayoutError(LookupTableError, ValueError):
    """The table cannot be laid out as text"""


class OutOfRange(LookupTableError, IndexError):
    """An offset is outside of the table"""


class DimensionMismatch(LookupTableError, ValueError):
    """Sizes of coordinates or tables do not agree"""


class InvalidArgument(LookupTableError, ValueError):
    """Bad parameters for constructing or querying a table"""


class NotFound(LookupTableError, FileNotFoundError):
    """The table file does not exist"""


class NoFileSpecified(LookupTableError, ValueError):
    """Saving without a file name and without a remembered one"""
