from .base import GAME_STATE_KEY, PLAYERS_KEY, KeyValueStore
from .file_store import JsonFileStore
from .memory_store import InMemoryStore

__all__ = [
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
    "GAME_STATE_KEY",
    "PLAYERS_KEY",
]
