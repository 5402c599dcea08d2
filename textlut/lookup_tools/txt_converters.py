import gzip
import logging
import os

from ..util import format_number
from .exceptions import FormatError, LayoutError, NoFileSpecified, NotFound
from .text_lookup import _bracketed, _word, text_lookup

logger = logging.getLogger(__name__)

_SPACE = "  "


def _tokens(line):
    # splitting can leave pieces without any content (e.g. a lone bracket
    # or punctuation), only pieces with a word character count
    return [part for part in line.split() if _word.search(part)]


def _number(token, lineno):
    try:
        return float(token)
    except ValueError:
        raise FormatError(lineno, "irregular data on this line or before")


def _coordinate(token, lineno):
    match = _bracketed.match(token)
    if match is None:
        raise FormatError(lineno, "irregular data on this line or before")
    return _number(match.group(1), lineno)


def parse_lut_text(text):
    """Create a `text_lookup` by parsing its text representation

    The text is split on white space and, based on the number of pieces on
    each line, it is determined which data is which:

        - The x title is a line with a single word, above the coordinates.
        - The x coordinates line has N values in square brackets.
        - A regular row has a y coordinate in square brackets and N values.
        - The row carrying the y title has N + 2 pieces, the title first.

    Blank lines are ignored.  Rows are listed top to bottom in the text, so
    they are reversed to put y offset 0 at the bottom.

    Raises `FormatError` with the line number for malformed text.
    """
    x_title = None
    y_title = None
    x_coords = None
    y_coords = []
    rows = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        parts = _tokens(line)
        num_parts = len(parts)

        if num_parts == 0:
            continue

        if x_coords is None:
            # a lone bracketed number is the coordinates line of a one column table
            if num_parts == 1 and _bracketed.match(parts[0]) is None:
                if x_title is not None:
                    raise FormatError(lineno, "multiple x-title lines")
                x_title = parts[0]
                continue
            x_coords = [_coordinate(part, lineno) for part in parts]
            continue

        num_x = len(x_coords)

        # y title, 1 y coordinate, and data
        if num_parts == num_x + 2:
            if y_title is not None:
                raise FormatError(lineno, "multiple y-title lines")
            y_title = parts.pop(0)
            num_parts -= 1

        if num_parts == num_x + 1:
            y_coords.append(_coordinate(parts[0], lineno))
            rows.append([_number(part, lineno) for part in parts[1:]])
            continue

        raise FormatError(lineno, "irregular data on this line or before")

    if x_coords is None:
        raise FormatError(0, "no x coordinates line found")
    if not rows:
        raise FormatError(0, "no data rows found")

    rows.reverse()
    y_coords.reverse()
    logger.debug("parsed %dx%d look up table", len(x_coords), len(y_coords))
    return text_lookup(rows, x_coords, y_coords, x_title, y_title)


def _align(cells):
    width = max(len(cell) for cell in cells)
    return [cell.ljust(width) for cell in cells]


def render_lut_text(table):
    """Text representation of a `text_lookup`, readable by `parse_lut_text`

    The columns are left aligned, the x title is centered above the table and
    the y title is placed next to the middle row.  Raises `LayoutError` if the
    x title is wider than the table.
    """
    x_coords = table.get_x_coords()
    y_coords = table.get_y_coords()
    values = table.get_values()
    num_x = len(x_coords)
    num_y = len(y_coords)
    num_rows = num_y + 1  # add 1 for the x coordinates

    # rows are displayed top down, from the highest y offset, the y title
    # goes on the middle one but never on the x coordinates line
    title_row = max(num_y // 2, 1)
    yt_column = _align(
        [(table.y_title or "") if i == title_row else "" for i in range(num_rows)]
    )
    y_column = _align(
        [""] + ["[{}]".format(format_number(y_coords[i])) for i in reversed(range(num_y))]
    )
    val_columns = []
    for x in range(num_x):
        cells = ["[{}]".format(format_number(x_coords[x]))]
        cells.extend(format_number(values[y, x]) for y in reversed(range(num_y)))
        val_columns.append(_align(cells))

    lines = []
    for i in range(num_rows):
        line = yt_column[i] + _SPACE + y_column[i]
        for column in val_columns:
            line += _SPACE + column[i]
        lines.append(line)

    # the x title is centered over the full (padded) width
    x_title = table.x_title or ""
    width = len(lines[0])
    if len(x_title) > width:
        raise LayoutError(
            "x title '{}' is wider than the table ({} > {})".format(
                x_title, len(x_title), width
            )
        )
    fill = " " * ((width - len(x_title)) // 2)

    out = "\n" + (fill + x_title).rstrip() + "\n\n"
    out += "\n".join(line.rstrip() for line in lines)
    out += "\n"
    return out


def _open(path, mode):
    path = os.fsdecode(path)
    if path.endswith(".gz"):
        return gzip.open(path, mode + "t")
    return open(path, mode + "t")


def load_file(path):
    """Load a `text_lookup` from a text file (optionally gzipped)

    The file name is remembered so that `save_file` can be used without
    having to specify the file again.
    """
    path = os.fsdecode(path)
    if not os.path.exists(path):
        raise NotFound("File '{}' does not exist.".format(path))
    with _open(path, "r") as fin:
        text = fin.read()
    table = parse_lut_text(text)
    table.file = path
    logger.debug("loaded %s", path)
    return table


def save_file(table, path=None):
    """Write a `text_lookup` to ``path``, or to the last file it used

    Returns True.  Raises `NoFileSpecified` if there is neither.
    """
    if path is not None:
        path = os.fsdecode(path)
    if path is None or not path.strip():
        path = table.file
    if path is None or not path.strip():
        raise NoFileSpecified("trying to save but no file specified and no file stored.")
    text = render_lut_text(table)
    with _open(path, "w") as fout:
        fout.write(text)
    table.file = path
    logger.debug("saved %s", path)
    return True
