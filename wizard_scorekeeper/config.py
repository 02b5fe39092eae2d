# wizard_scorekeeper/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from .engine import ScoreKeeper
from .storage import JsonFileStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_STATE_FILE = "wizard_state.json"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from the environment (and a .env file)."""

    state_file: Path
    validate_on_load: bool = False
    log_level: str = "INFO"


def resolve_state_path(path_like: str | Path, data_dir: str | Path) -> Path:
    """
    Resolve the configured state file against the data directory.

    Absolute paths are returned unchanged; relative ones are placed under
    `data_dir`.
    """
    path = Path(path_like).expanduser()
    if path.is_absolute():
        return path
    return Path(data_dir).expanduser() / path


def load_settings(env_file: Optional[str | Path] = None) -> Settings:
    # Load environment variables from a .env file if present; variables
    # already set in the environment take precedence.
    load_dotenv(env_file)
    data_dir = os.getenv("WIZARD_DATA_DIR") or Path.cwd()
    return Settings(
        state_file=resolve_state_path(
            os.getenv("WIZARD_STATE_FILE", DEFAULT_STATE_FILE), data_dir
        ),
        validate_on_load=(
            os.getenv("WIZARD_VALIDATE_ON_LOAD", "").strip().lower() in _TRUTHY
        ),
        log_level=os.getenv("WIZARD_LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )


def configure_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(numeric_level)


def open_scorekeeper(
    players: Optional[Sequence[str]] = None,
    settings: Optional[Settings] = None,
) -> ScoreKeeper:
    """Apply logging settings and build a ScoreKeeper backed by the state file."""
    if settings is None:
        settings = load_settings()
    configure_logging(settings.log_level)

    store = JsonFileStore(settings.state_file)
    logger.debug("Using state file %s", store.path)
    return ScoreKeeper(
        store=store,
        players=players,
        validate_on_load=settings.validate_on_load,
    )
