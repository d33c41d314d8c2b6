# tests/test_path_utils.py

import os

from cli.path_utils import (
    DATA_DIR_ENV_VAR,
    data_dir_from_env,
    get_data_dir,
    get_default_data_dir,
    resolve_data_dir,
)


def test_blank_input_uses_default():
    assert get_data_dir(None) == get_default_data_dir()
    assert get_data_dir("   ") == get_default_data_dir()
    assert get_default_data_dir().endswith(os.path.join("Documents", "StudentRecords"))


def test_resolve_creates_directory(tmp_path):
    target = tmp_path / "records" / "2024"

    resolved = resolve_data_dir(str(target))

    assert resolved == str(target)
    assert os.path.isdir(resolved)


def test_data_dir_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV_VAR, str(tmp_path))
    assert data_dir_from_env() == str(tmp_path)

    monkeypatch.setenv(DATA_DIR_ENV_VAR, "  ")
    assert data_dir_from_env() is None

    monkeypatch.delenv(DATA_DIR_ENV_VAR)
    assert data_dir_from_env() is None
