# wizard_scorekeeper/storage/memory_store.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .base import KeyValueStore


@dataclass
class InMemoryStore(KeyValueStore):
    """Dict-backed store for tests and sessions that need no persistence."""

    data: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
