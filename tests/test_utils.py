import os
import stat

import pytest

from todo_list.utils import atomic_write


def test_atomic_write(tmp_path):
    file = tmp_path / "file.txt"
    atomic_write(file, "hello")
    assert file.read_text() == "hello"


def test_atomic_write_overwrites(tmp_path):
    file = tmp_path / "file.txt"
    file.write_text("a much longer previous content")
    atomic_write(file, "short")
    assert file.read_text() == "short"
    assert os.listdir(tmp_path) == ["file.txt"]


def test_atomic_write_cleans_up_on_failure(tmp_path, monkeypatch):
    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", broken_replace)
    with pytest.raises(OSError):
        atomic_write(tmp_path / "file.txt", "hello")
    assert os.listdir(tmp_path) == []


@pytest.mark.parametrize("mode", [0o644, 0o640])
def test_atomic_write_keeps_existing_mode(tmp_path, mode):
    file = tmp_path / "file.txt"
    file.write_text("old")
    os.chmod(file, mode)
    atomic_write(file, "new")
    assert file.read_text() == "new"
    assert stat.S_IMODE(file.stat().st_mode) == mode
