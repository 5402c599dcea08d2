"""Utility functions

"""
import numbers

import numpy

np = numpy


def format_number(value):
    """Shortest positional representation of a number that reads back unchanged

    Integral values lose their trailing ``.0``, so ``1000.0`` is written as ``1000``.
    """
    return numpy.format_float_positional(float(value), trim="-")


def _is_offset(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def truncate(values, digits):
    """Drop (not round) everything after ``digits`` decimal places"""
    scale = 10.0**digits
    return numpy.trunc(numpy.asarray(values, dtype=numpy.float64) * scale) / scale


def plane_values(x_coords, y_coords, a, b, c, digits=None):
    """Evaluate the plane ``z = a*y + b*x + c`` on a coordinate grid

    Parameters
    ----------
        x_coords : array_like
            Column coordinates, offset 0 at the left
        y_coords : array_like
            Row coordinates, offset 0 at the bottom
        a, b, c : float
            Plane constants
        digits : int, optional
            If given, truncate the result to this many decimal places

    Returns
    -------
        out : numpy.ndarray
            Values of shape ``(len(y_coords), len(x_coords))`` indexed as ``[y, x]``
    """
    xs = numpy.asarray(x_coords, dtype=numpy.float64)
    ys = numpy.asarray(y_coords, dtype=numpy.float64)
    out = a * ys[:, numpy.newaxis] + b * xs[numpy.newaxis, :] + c
    if digits is not None:
        out = truncate(out, digits)
    return out
