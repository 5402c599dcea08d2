import logging
import re
import warnings

from ..util import numpy as np
from ..util import _is_offset
from .exceptions import DimensionMismatch, InvalidArgument, OutOfRange
from .lookup_base import lookup_base

logger = logging.getLogger(__name__)

# pieces of text without a word character are not tokens, a bracketed piece
# is a coordinate
_word = re.compile(r"\w")
_bracketed = re.compile(r"^\[([^\[\]]+)\]$")


def _nearest_index(axis, values):
    """Offsets of the coordinates in ``axis`` closest to ``values``

    Values outside of the axis clamp to the first/last offset, ties go to the
    lower offset.  ``axis`` must be ascending.
    """
    try:
        values = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise InvalidArgument("look up values must be numbers: {}".format(err))
    if len(axis) == 1:
        return np.zeros(values.shape, dtype=np.intp)
    upper = np.clip(np.searchsorted(axis, values, side="right"), 1, len(axis) - 1)
    lower = upper - 1
    index = np.where(values - axis[lower] > axis[upper] - values, upper, lower)
    # repeated coordinates at the ends, e.g. a freshly built table
    index = np.where(values >= axis[-1], len(axis) - 1, index)
    return np.where(values <= axis[0], 0, index)


def _check_title(title, name):
    if title is None:
        return None
    if (
        not isinstance(title, str)
        or len(title.split()) != 1
        or title.strip() != title
        or not _word.search(title)
        or _bracketed.match(title)
    ):
        raise InvalidArgument(
            "{} must be a single word without spaces or brackets, got {!r}".format(
                name, title
            )
        )
    return title


def _as_axis(coords, name):
    try:
        axis = np.array(coords, dtype=np.float64)
    except (TypeError, ValueError) as err:
        raise InvalidArgument("{} must be numbers: {}".format(name, err))
    if axis.ndim != 1:
        raise InvalidArgument("{} must be a flat sequence".format(name))
    return axis


def _ascending(axis):
    return bool(np.all(np.diff(axis) > 0))


class text_lookup(lookup_base):
    """A two dimensional look up table, as edited in a text file

    An example of a displayed look up table::

                           rpm

                    [1000]  [1500]  [2000]  [2500]
        map  [100]  14      15.5    16.4    17.9
             [90]   13      14.5    15.3    16.8
             [80]   12      13.5    14.2    15.7

    The x offsets start at 0 on the left and increase towards the right.
    The y offsets start at 0 at the bottom and increase upward, so the
    ``values`` array passed to the constructor is indexed ``[y, x]`` with
    row 0 being the bottom row of the displayed table.

    Parameters
    ----------
        values : array_like
            Cell values of shape ``(len(y_coords), len(x_coords))``
        x_coords : array_like
            Column coordinates, left to right
        y_coords : array_like
            Row coordinates, bottom to top
        x_title, y_title : str, optional
            Single word axis titles

    Calling the table with x and y values (numbers or arrays) returns the
    value of the nearest cell.
    """

    def __init__(self, values, x_coords, y_coords, x_title=None, y_title=None):
        super(text_lookup, self).__init__()
        self._x = _as_axis(x_coords, "x coordinates")
        self._y = _as_axis(y_coords, "y coordinates")
        if len(self._x) == 0 or len(self._y) == 0:
            raise InvalidArgument("a look up table needs at least one row and column")
        try:
            self._values = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise InvalidArgument("text_lookup cannot handle non-numeric values: {}".format(err))
        if self._values.shape != (len(self._y), len(self._x)):
            raise DimensionMismatch(
                "values of shape {} do not match {} y and {} x coordinates".format(
                    self._values.shape, len(self._y), len(self._x)
                )
            )
        self._x_title = _check_title(x_title, "x title")
        self._y_title = _check_title(y_title, "y title")
        self._file = None

    @classmethod
    def build(cls, x_size, y_size, x_title, y_title):
        """Create a table of the given size with all coordinates and values zero"""
        for name, size in (("x size", x_size), ("y size", y_size)):
            if not _is_offset(size) or size < 1:
                raise InvalidArgument(
                    "{} must be a positive integer, got {!r}".format(name, size)
                )
        if not x_title or not y_title:
            raise InvalidArgument("both titles are required to build a table")
        return cls(
            np.zeros((y_size, x_size)),
            np.zeros(x_size),
            np.zeros(y_size),
            x_title,
            y_title,
        )

    def copy(self):
        """Independent clone, no arrays are shared with this table"""
        out = type(self)(self._values, self._x, self._y, self._x_title, self._y_title)
        out._file = self._file
        return out

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    @property
    def x_title(self):
        return self._x_title

    @x_title.setter
    def x_title(self, title):
        self._x_title = _check_title(title, "x title")

    @property
    def y_title(self):
        return self._y_title

    @y_title.setter
    def y_title(self, title):
        self._y_title = _check_title(title, "y title")

    @property
    def file(self):
        """The file this table was last loaded from or saved to"""
        return self._file

    @file.setter
    def file(self, path):
        self._file = path

    @property
    def shape(self):
        """(number of x coordinates, number of y coordinates)"""
        return len(self._x), len(self._y)

    def _check_offset(self, offset, size, name):
        if not _is_offset(offset):
            raise InvalidArgument(
                "{} offsets must be integers, got {!r}".format(name, offset)
            )
        if offset < 0 or offset >= size:
            raise OutOfRange(
                "A {} offset of {} is beyond the boundary {}".format(name, offset, size - 1)
            )

    def get(self, x, y):
        """Value of the cell at offsets ``x`` and ``y``"""
        self._check_offset(x, len(self._x), "x")
        self._check_offset(y, len(self._y), "y")
        return float(self._values[y, x])

    def set(self, x, y, value):
        """Set the cell at offsets ``x`` and ``y`` to ``value``"""
        self._check_offset(x, len(self._x), "x")
        self._check_offset(y, len(self._y), "y")
        try:
            self._values[y, x] = float(value)
        except (TypeError, ValueError):
            raise InvalidArgument("cell values must be numbers, got {!r}".format(value))

    def get_values(self):
        """Copy of all values, indexed ``[y, x]``"""
        return self._values.copy()

    def set_values(self, values):
        """Replace all values at once, ``values`` indexed ``[y, x]``"""
        try:
            values = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise InvalidArgument("text_lookup cannot handle non-numeric values: {}".format(err))
        if values.shape != self._values.shape:
            raise DimensionMismatch(
                "expected values of shape {}, got {}".format(self._values.shape, values.shape)
            )
        self._values = values

    def get_x_coords(self):
        """x coordinates, offset 0 at the left"""
        return self._x.copy()

    def get_y_coords(self):
        """y coordinates, offset 0 at the bottom"""
        return self._y.copy()

    def set_x_coords(self, coords):
        """Replace the x coordinates

        The coordinates must be given in ascending order from left to right,
        they are not sorted.
        """
        self._x = self._replace_axis(self._x, coords, "x")

    def set_y_coords(self, coords):
        """Replace the y coordinates

        The coordinates must be given in ascending order from bottom to top,
        they are not sorted.
        """
        self._y = self._replace_axis(self._y, coords, "y")

    def _replace_axis(self, axis, coords, name):
        new = _as_axis(coords, "{} coordinates".format(name))
        if len(new) != len(axis):
            raise DimensionMismatch(
                "expected {} {} coordinates, got {}".format(len(axis), name, len(new))
            )
        if not _ascending(new):
            warnings.warn(
                "{} coordinates are not strictly ascending, lookups will be unreliable".format(name),
                RuntimeWarning,
            )
        return new

    def get_x_vals(self, y):
        """All values of the row at y offset ``y``, left to right"""
        self._check_offset(y, len(self._y), "y")
        return self._values[y, :].copy()

    def get_y_vals(self, x):
        """All values of the column at x offset ``x``, bottom to top"""
        self._check_offset(x, len(self._x), "x")
        return self._values[:, x].copy()

    def diff(self, other, stop_early=False):
        """Compare the values (not coordinates or titles) of two tables

        Returns
        -------
            out : bool or list
                If ``stop_early``, whether any value differs.  Otherwise the
                ``(x, y)`` offsets of every differing cell, x major, possibly empty.
        """
        if self._values.shape != other._values.shape:
            raise DimensionMismatch(
                "cannot compare a {}x{} table with a {}x{} table".format(
                    *(self.shape + other.shape)
                )
            )
        different = self._values != other._values
        if stop_early:
            return bool(different.any())
        xs, ys = np.nonzero(different.T)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def diff_x_coords(self, other):
        """Offsets at which the x coordinates of two tables differ"""
        return self._diff_axis(self._x, other._x, "x")

    def diff_y_coords(self, other):
        """Offsets at which the y coordinates of two tables differ"""
        return self._diff_axis(self._y, other._y, "y")

    @staticmethod
    def _diff_axis(mine, theirs, name):
        if len(mine) != len(theirs):
            raise DimensionMismatch(
                "cannot compare {} {} coordinates with {}".format(len(mine), name, len(theirs))
            )
        return [int(i) for i in np.nonzero(mine != theirs)[0]]

    def same_as(self, other):
        """True if titles, coordinates and values of both tables are equal"""
        return (
            self._x_title == other._x_title
            and self._y_title == other._y_title
            and np.array_equal(self._x, other._x)
            and np.array_equal(self._y, other._y)
            and np.array_equal(self._values, other._values)
        )

    def nearest_offsets(self, x_value, y_value):
        """(x, y) offsets of the coordinates closest to the given values"""
        return (
            int(_nearest_index(self._x, x_value)),
            int(_nearest_index(self._y, y_value)),
        )

    def lookup_points(self, x_value, y_value, radius=0):
        """Offsets of the cells around the point nearest to ``x_value``, ``y_value``

        Every cell within ``radius`` offsets of the nearest point along each
        axis is returned, clamped to the edges of the table, as ``(x, y)``
        pairs ordered by x then y.
        """
        if not _is_offset(radius) or radius < 0:
            raise InvalidArgument(
                "lookup range must be a non-negative integer, got {!r}".format(radius)
            )
        x0, y0 = self.nearest_offsets(x_value, y_value)
        xs = np.arange(max(x0 - radius, 0), min(x0 + radius, len(self._x) - 1) + 1)
        ys = np.arange(max(y0 - radius, 0), min(y0 + radius, len(self._y) - 1) + 1)
        logger.debug(
            "lookup (%s, %s) nearest offsets (%d, %d), %d points",
            x_value, y_value, x0, y0, len(xs) * len(ys),
        )
        return [(int(x), int(y)) for x in xs for y in ys]

    def _evaluate(self, x, y):
        xi, yi = np.broadcast_arrays(_nearest_index(self._x, x), _nearest_index(self._y, y))
        return self._values[yi, xi]

    def to_text(self):
        """The table in its text file format"""
        from .txt_converters import render_lut_text

        return render_lut_text(self)

    def __repr__(self):
        myrepr = "2 dimensional look up table ({} by {}) with axes:\n".format(
            self._x_title, self._y_title
        )
        myrepr += "\t1: {}\n".format(self._x)
        myrepr += "\t2: {}\n".format(self._y)
        return myrepr
