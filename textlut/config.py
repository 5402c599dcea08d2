"""Configuration

Defaults for the command line tools can be set in ``~/.textlut.toml``::

    plot_format = "R-lm"
    round_digits = 3
    log_level = "DEBUG"
"""
import os
from dataclasses import dataclass, fields

import toml

from .lookup_tools.exceptions import InvalidArgument
from .lookup_tools.plot_converters import plot_formats


def read_textlut_config():
    config_path = None
    if "HOME" in os.environ:
        config_path = os.path.join(os.environ["HOME"], ".textlut.toml")
    elif "TEXTLUT_CONFIG_DIR" in os.environ:
        config_path = os.path.join(os.environ["TEXTLUT_CONFIG_DIR"], ".textlut.toml")

    if config_path is not None and os.path.exists(config_path):
        with open(config_path) as f:
            return toml.loads(f.read())
    else:
        return dict()


@dataclass
class textlut_settings:
    plot_format: str = "R"
    round_digits: int = 2
    log_level: str = "INFO"

    def __post_init__(self):
        if self.plot_format not in plot_formats():
            raise InvalidArgument(
                "plot_format must be one of {}, got {!r}".format(
                    ", ".join(plot_formats()), self.plot_format
                )
            )
        if (
            not isinstance(self.round_digits, int)
            or isinstance(self.round_digits, bool)
            or self.round_digits < 0
        ):
            raise InvalidArgument(
                "round_digits must be a non-negative integer, got {!r}".format(
                    self.round_digits
                )
            )
        if self.log_level not in ("INFO", "DEBUG"):
            raise InvalidArgument(
                "log_level must be INFO or DEBUG, got {!r}".format(self.log_level)
            )

    @classmethod
    def from_config(cls, config=None):
        """Settings from a config dict, by default the one in ``~/.textlut.toml``

        Unknown keys are ignored.
        """
        if config is None:
            config = read_textlut_config()
        known = {field.name for field in fields(cls)}
        return cls(**{key: value for key, value in config.items() if key in known})
