"""
Tests for the INI configuration loader.
"""

import pytest

from cclevels.config import CodecConfig, load_config
from cclevels.constants import LevelsetMagic
from cclevels.utils import close_logging, is_initialized


def test_defaults():
    config = load_config()

    assert config.default_type == 'ms'
    assert config.default_magic == LevelsetMagic.MS
    assert config.default_level_count == 1
    assert config.log_path is None


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(tmp_path / "missing.ini")

    assert config == CodecConfig()
    assert "Config file not found" in config.warnings[0]


def test_loading_does_not_start_logging(tmp_path, monkeypatch):
    close_logging()
    monkeypatch.chdir(tmp_path)

    load_config(tmp_path / "missing.ini")

    assert not is_initialized()
    assert not (tmp_path / "cclevels.log").exists()


def test_load_values(tmp_path):
    path = tmp_path / "cclevels.ini"
    path.write_text(
        "[cclevels]\n"
        "default_type = LynxPG  ; case insensitive\n"
        "default_level_count = 4\n"
        "log_path = logs/run.log\n"
    )

    config = load_config(path)

    assert config.default_magic == LevelsetMagic.LYNX_PG
    assert config.default_level_count == 4
    assert config.log_path == "logs/run.log"
    assert config.warnings == []


def test_missing_section_uses_defaults(tmp_path):
    path = tmp_path / "cclevels.ini"
    path.write_text("[other]\nkey = value\n")

    config = load_config(path)

    assert config == CodecConfig()
    assert config.warnings == [f"No [cclevels] section in {path}, using defaults"]


def test_invalid_type(tmp_path):
    path = tmp_path / "cclevels.ini"
    path.write_text("[cclevels]\ndefault_type = atari\n")

    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize("value", ["-1", "many"])
def test_invalid_level_count(tmp_path, value):
    path = tmp_path / "cclevels.ini"
    path.write_text(f"[cclevels]\ndefault_level_count = {value}\n")

    with pytest.raises(ValueError):
        load_config(path)
