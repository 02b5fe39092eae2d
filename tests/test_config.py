# tests/test_config.py
import logging
import os
from pathlib import Path

import pytest

from wizard_scorekeeper.config import (
    Settings,
    configure_logging,
    load_settings,
    open_scorekeeper,
    resolve_state_path,
)

ENV_NAMES = (
    "WIZARD_DATA_DIR",
    "WIZARD_STATE_FILE",
    "WIZARD_VALIDATE_ON_LOAD",
    "WIZARD_LOG_LEVEL",
)


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    old_level = root.level
    yield root
    root.setLevel(old_level)


def test_load_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()
    # Saved games live in the working directory, not the package.
    assert settings.state_file == Path.cwd() / "wizard_state.json"
    assert settings.validate_on_load is False
    assert settings.log_level == "INFO"


def test_load_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WIZARD_STATE_FILE", str(tmp_path / "game.json"))
    monkeypatch.setenv("WIZARD_VALIDATE_ON_LOAD", "yes")
    monkeypatch.setenv("WIZARD_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.state_file == tmp_path / "game.json"
    assert settings.validate_on_load is True
    assert settings.log_level == "DEBUG"


def test_load_settings_relative_file_goes_in_data_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("WIZARD_DATA_DIR", str(tmp_path / "saves"))
    monkeypatch.setenv("WIZARD_STATE_FILE", "family.json")

    assert load_settings().state_file == tmp_path / "saves" / "family.json"


def test_load_settings_reads_dotenv(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WIZARD_VALIDATE_ON_LOAD", raising=False)
    (tmp_path / ".env").write_text("WIZARD_VALIDATE_ON_LOAD=true\n", encoding="utf-8")

    try:
        assert load_settings(tmp_path / ".env").validate_on_load is True
    finally:
        os.environ.pop("WIZARD_VALIDATE_ON_LOAD", None)


def test_resolve_state_path(tmp_path):
    absolute = tmp_path / "elsewhere.json"
    assert resolve_state_path(absolute, tmp_path / "data") == absolute
    assert resolve_state_path("game.json", tmp_path) == tmp_path / "game.json"


def test_open_scorekeeper_uses_state_file(tmp_path, root_logger):
    settings = Settings(state_file=tmp_path / "game.json", validate_on_load=True)

    keeper = open_scorekeeper(["A", "B", "C"], settings=settings)
    keeper.advance_round([1, 0, 0], [1, 0, 0])
    assert keeper.validate_on_load is True
    assert (tmp_path / "game.json").exists()

    resumed = open_scorekeeper(settings=settings)
    assert resumed.state == keeper.state


def test_open_scorekeeper_applies_log_level(monkeypatch, tmp_path, root_logger):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WIZARD_DATA_DIR", raising=False)
    monkeypatch.delenv("WIZARD_STATE_FILE", raising=False)
    monkeypatch.setenv("WIZARD_LOG_LEVEL", "DEBUG")
    root_logger.setLevel(logging.WARNING)

    open_scorekeeper(["A", "B", "C"])

    assert root_logger.level == logging.DEBUG


def test_configure_logging_sets_level(root_logger):
    configure_logging("warning")
    assert root_logger.level == logging.WARNING

    # Unknown names fall back to INFO.
    configure_logging("chatty")
    assert root_logger.level == logging.INFO
