import logging

import pytest
from rich.logging import RichHandler

from textlut.logger import json_str, reset_logger, setup_logger


@pytest.fixture(autouse=True)
def clean_logger():
    yield
    reset_logger()


def test_invalid_level():
    null_level = "NOT_ALLOWED"
    with pytest.raises(ValueError):
        setup_logger(level=null_level)
    with pytest.raises(ValueError):
        setup_logger(level="WARNING")


def test_setup_logger():
    root = logging.getLogger()
    before = list(root.handlers)

    logger = setup_logger()
    assert logger.name == "textlut"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    # the root logger is left alone
    assert root.handlers == before

    # calling again replaces the handlers
    logger = setup_logger("DEBUG")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_logfile(tmp_path):
    logfile = tmp_path / "textlut.log"
    logger = setup_logger(level="DEBUG", logfile=str(logfile))
    assert len(logger.handlers) == 2

    logging.getLogger("textlut.lookup_tools").debug("parsed table")
    logging.getLogger("numpy").warning("not shown")

    reset_logger()
    assert logger.handlers == []
    text = logfile.read_text()
    assert "parsed table" in text
    assert "not shown" not in text


def test_info_level_skips_debug(tmp_path):
    logfile = tmp_path / "textlut.log"
    setup_logger("INFO", str(logfile))
    logging.getLogger("textlut.scripts").debug("settings")
    logging.getLogger("textlut.scripts").info("wrote table")
    reset_logger()
    text = logfile.read_text()
    assert "wrote table" in text
    assert "settings" not in text


def test_json_str():
    assert json_str({"b": 1, "a": [1, 2]}) == '{\n    "a": [\n        1,\n        2\n    ],\n    "b": 1\n}'
