# wizard_scorekeeper/storage/file_store.py
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from .base import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """
    Keeps every key in a single JSON object on disk.

    Each write replaces the whole file, going through a temporary file so a
    crash mid-write never leaves a truncated document behind. Two processes
    sharing a file simply overwrite each other (last write wins).

    Reading a damaged file raises ValueError. Writing over one starts from an
    empty object, so a caller can always replace a damaged store.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        text = self.path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        # json.JSONDecodeError is a ValueError.
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self.path} does not hold a JSON object")
        return data

    def _read_for_update(self) -> Dict[str, str]:
        try:
            return self._read_all()
        except ValueError as exc:
            logger.warning("Overwriting unreadable store file %s: %s", self.path, exc)
            return {}

    def _write_all(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)
        logger.debug("Wrote %d key(s) to %s", len(data), self.path)

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_for_update()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_for_update()
        if key not in data:
            return
        del data[key]
        self._write_all(data)
