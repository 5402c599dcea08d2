"""Lookup tools

These classes and functions convert human editable text look up tables
(e.g. engine calibration maps) into a uniform accessor, and back.
"""

from .exceptions import (
    DimensionMismatch,
    FormatError,
    InvalidArgument,
    LayoutError,
    LookupTableError,
    NoFileSpecified,
    NotFound,
    OutOfRange,
)
from .plot_converters import plot_formats, render_plot
from .text_lookup import text_lookup
from .txt_converters import load_file, parse_lut_text, render_lut_text, save_file

__all__ = [
    "text_lookup",
    "parse_lut_text",
    "render_lut_text",
    "load_file",
    "save_file",
    "render_plot",
    "plot_formats",
    "LookupTableError",
    "FormatError",
    "LayoutError",
    "OutOfRange",
    "DimensionMismatch",
    "InvalidArgument",
    "NotFound",
    "NoFileSpecified",
]
