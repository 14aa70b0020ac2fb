from pathlib import Path

import pytest

from seimei import resources


def test_env_var_overrides_data_dir(monkeypatch, tmp_path):
    monkeypatch.setenv(resources.DATA_DIR_ENV, str(tmp_path))
    assert resources.data_dir() == tmp_path


def test_default_data_dir_sits_next_to_package(monkeypatch):
    monkeypatch.delenv(resources.DATA_DIR_ENV, raising=False)
    directory = resources.data_dir()
    assert directory.name == "data"
    assert (directory.parent / "resources.py").is_file()


def test_read_bytes_round_trip(monkeypatch, tmp_path):
    monkeypatch.setenv(resources.DATA_DIR_ENV, str(tmp_path))
    nested = tmp_path / "joyo"
    nested.mkdir()
    payload = '[{"kanji": "太", "strokes": 4}]'.encode("utf-8")
    (nested / "strokes.json").write_bytes(payload)
    assert resources.read_bytes("joyo/strokes.json") == payload
    assert resources.read_bytes(Path("joyo") / "strokes.json") == payload


def test_read_bytes_missing_file(monkeypatch, tmp_path):
    monkeypatch.setenv(resources.DATA_DIR_ENV, str(tmp_path))
    with pytest.raises(FileNotFoundError):
        resources.read_bytes("sex/male.json")


def test_read_bytes_rejects_absolute_path(monkeypatch, tmp_path):
    monkeypatch.setenv(resources.DATA_DIR_ENV, str(tmp_path))
    with pytest.raises(ValueError):
        resources.read_bytes(tmp_path / "anything.json")