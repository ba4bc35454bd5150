import os
from pathlib import Path

import pytest

from clinvardl.paths import backup, check_dir, normalize_path


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    return home_dir


def test_check_dir_creates(tmp_path):
    target = tmp_path / "out"
    check_dir(target)
    assert target.is_dir()


def test_check_dir_keeps_existing(tmp_path):
    target = tmp_path / "out"
    target.mkdir()
    (target / "keep.txt").write_text("data")
    check_dir(target)
    assert (target / "keep.txt").read_text() == "data"


def test_check_dir_does_not_create_parents(tmp_path):
    target = tmp_path / "missing" / "out"
    check_dir(target)
    assert not target.exists()
    assert not (tmp_path / "missing").exists()


def test_backup_moves_files(tmp_path):
    src = tmp_path / "results"
    src.mkdir()
    (src / "a.txt").write_text("alpha")
    (src / "b.xlsx").write_bytes(b"\x00\x01")

    dst = backup(src)

    assert dst.parent == tmp_path / "backup"
    assert dst.name.startswith("results")
    assert (dst / "a.txt").read_text() == "alpha"
    assert (dst / "b.xlsx").read_bytes() == b"\x00\x01"
    assert list(src.iterdir()) == []


def test_backup_keeps_nested_layout(tmp_path):
    src = tmp_path / "results"
    (src / "sub").mkdir(parents=True)
    (src / "sub" / "c.txt").write_text("gamma")

    dst = backup(src)

    assert (dst / "sub" / "c.txt").read_text() == "gamma"
    assert not (src / "sub" / "c.txt").exists()


def test_backup_missing_source(tmp_path):
    dst = backup(tmp_path / "absent")
    assert not dst.exists()
    assert not (tmp_path / "backup").exists()


def test_normalize_home(home):
    assert normalize_path("~/docs/file.txt") == os.path.join(str(home), "docs", "file.txt")


def test_normalize_home_cleans(home):
    assert normalize_path("~/a/../b") == os.path.join(str(home), "b")


def test_normalize_home_alone(home):
    assert normalize_path("~/") == os.path.normpath(str(home))


def test_normalize_current_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = normalize_path("./data/q.txt")
    assert Path(result).is_absolute()
    assert Path(result) == Path(os.getcwd()) / "data" / "q.txt"


def test_normalize_plain_relative_unchanged():
    assert normalize_path("data") == "data"


def test_normalize_absolute_unchanged():
    absolute = os.path.join(os.sep, "var", "log")
    assert normalize_path(absolute) == absolute