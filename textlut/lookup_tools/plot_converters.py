import logging

from jinja2 import Environment, PackageLoader, select_autoescape

from ..util import numpy as np
from ..util import format_number
from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)

# format name -> template
_plot_templates = {
    "R": "persp.R.tmpl",
    "R-lm": "lm.R.tmpl",
}

_env = None


def _environment():
    global _env
    if _env is None:
        _env = Environment(
            loader=PackageLoader("textlut", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
            keep_trailing_newline=True,
        )
    return _env


def _r_number(value):
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return format_number(value)


def plot_formats():
    """Names of the plot script formats `render_plot` can produce"""
    return sorted(_plot_templates)


def render_plot(table, format="R"):
    """Convert a `text_lookup` to a script for plotting it

    The string may need to be output to a file depending on how the
    plotting program is called.

    Parameters
    ----------
        table : text_lookup
            The table to plot
        format : str
            One of:

            - ``"R"``: a 3D surface (``persp3d``) using the rgl library
              [http://cran.r-project.org/web/packages/rgl/index.html].
            - ``"R-lm"``: a least squares plane fit of the values together with
              a scatter plot of them, using the scatterplot3d library.

    Returns
    -------
        out : str
            The script.  Load it in R with ``source(<file name>)``.
    """
    if format not in _plot_templates:
        raise InvalidArgument(
            "unknown plot format {!r}, choose from {}".format(
                format, ", ".join(plot_formats())
            )
        )
    x_coords = table.get_x_coords()
    y_coords = table.get_y_coords()
    values = table.get_values()
    num_x, num_y = len(x_coords), len(y_coords)

    # y major so that dim(z) <- c(nx, ny) fills R's column major matrix
    px = np.tile(x_coords, num_y)
    py = np.repeat(y_coords, num_x)
    pz = values.ravel()

    template = _environment().get_template(_plot_templates[format])
    logger.debug("rendering %s plot of a %dx%d table", format, num_x, num_y)
    return template.render(
        num_x=num_x,
        num_y=num_y,
        x_title=table.x_title or "x",
        y_title=table.y_title or "y",
        x_coords=[_r_number(v) for v in x_coords],
        y_coords=[_r_number(v) for v in y_coords],
        px=[_r_number(v) for v in px],
        py=[_r_number(v) for v in py],
        pz=[_r_number(v) for v in pz],
    )
