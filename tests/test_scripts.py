import shutil

import pytest

from textlut.logger import reset_logger
from textlut.lookup_tools import load_file
from textlut.scripts import lutasplot, planetable


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    yield home
    reset_logger()


@pytest.fixture
def table_copy(tmp_path, ign_file):
    path = tmp_path / "ign.tbl"
    shutil.copy(ign_file, path)
    return str(path)


def test_lutasplot(ign_file, capsys):
    assert lutasplot.main([ign_file]) == 0
    out = capsys.readouterr().out
    assert "persp3d(" in out

    assert lutasplot.main([ign_file, "R-lm"]) == 0
    out = capsys.readouterr().out
    assert "lm(z ~ x + y" in out


def test_lutasplot_configured_format(ign_file, isolated_home, capsys):
    (isolated_home / ".textlut.toml").write_text('plot_format = "R-lm"\n')
    assert lutasplot.main([ign_file, "-v"]) == 0
    assert "scatterplot3d" in capsys.readouterr().out


def test_lutasplot_errors(tmp_path, tests_directory, capsys):
    assert lutasplot.main([str(tmp_path / "missing.tbl")]) == 1
    assert "does not exist" in capsys.readouterr().err

    assert lutasplot.main([tests_directory + "/samples/broken.tbl"]) == 1
    assert "line 6" in capsys.readouterr().err

    with pytest.raises(SystemExit):
        lutasplot.main([tests_directory + "/samples/ign.tbl", "gnuplot"])


def test_planetable(table_copy):
    assert planetable.main([table_copy, "1", "0.5", "2"]) == 0
    tbl = load_file(table_copy)
    assert tbl.get_x_coords().tolist() == [1000, 1500, 2000, 2500]
    assert tbl.get_y_coords().tolist() == [80, 90, 100]
    for x, xc in enumerate(tbl.get_x_coords()):
        for y, yc in enumerate(tbl.get_y_coords()):
            assert tbl.get(x, y) == yc + 0.5 * xc + 2


def test_planetable_digits(table_copy, isolated_home):
    assert planetable.main([table_copy, "0", "0", "1.23456", "3"]) == 0
    assert load_file(table_copy).get(0, 0) == pytest.approx(1.234)

    (isolated_home / ".textlut.toml").write_text("round_digits = 1\n")
    assert planetable.main([table_copy, "0", "0", "1.23456"]) == 0
    assert load_file(table_copy).get(3, 2) == pytest.approx(1.2)

    assert planetable.main([table_copy, "0", "0", "-1.23456"]) == 0
    assert load_file(table_copy).get(1, 1) == pytest.approx(-1.2)


def test_planetable_errors(tmp_path, capsys):
    assert planetable.main([str(tmp_path / "missing.tbl"), "1", "2", "3"]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_logfile(table_copy, ign_file, tmp_path):
    logfile = tmp_path / "planetable.log"
    assert planetable.main([table_copy, "1", "0.5", "2", "--logfile", str(logfile)]) == 0
    reset_logger()
    text = logfile.read_text()
    assert "wrote" in text
    assert "settings" not in text

    logfile = tmp_path / "lutasplot.log"
    assert lutasplot.main([ign_file, "R-lm", "-v", "--logfile", str(logfile)]) == 0
    reset_logger()
    text = logfile.read_text()
    assert "settings" in text
    assert "plot script for" in text
