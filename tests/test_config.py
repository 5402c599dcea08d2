import pytest

from textlut.config import read_textlut_config, textlut_settings
from textlut.lookup_tools import InvalidArgument


def test_read_missing_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert read_textlut_config() == {}
    settings = textlut_settings.from_config()
    assert settings == textlut_settings()
    assert settings.plot_format == "R"
    assert settings.round_digits == 2
    assert settings.log_level == "INFO"


def test_read_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".textlut.toml").write_text(
        'plot_format = "R-lm"\nround_digits = 3\ncolor = "blue"\n'
    )
    assert read_textlut_config() == {
        "plot_format": "R-lm",
        "round_digits": 3,
        "color": "blue",
    }
    settings = textlut_settings.from_config()
    assert settings.plot_format == "R-lm"
    assert settings.round_digits == 3
    assert settings.log_level == "INFO"


def test_config_dir_fallback(tmp_path, monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setenv("TEXTLUT_CONFIG_DIR", str(tmp_path))
    (tmp_path / ".textlut.toml").write_text('log_level = "DEBUG"\n')
    assert textlut_settings.from_config().log_level == "DEBUG"


@pytest.mark.parametrize(
    "config",
    [
        {"plot_format": "gnuplot"},
        {"round_digits": -1},
        {"round_digits": "2"},
        {"round_digits": True},
        {"log_level": "WARNING"},
    ],
)
def test_invalid_config(config):
    with pytest.raises(InvalidArgument):
        textlut_settings.from_config(config)
