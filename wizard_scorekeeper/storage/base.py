# wizard_scorekeeper/storage/base.py
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

# Serialized GameState of the game in progress.
GAME_STATE_KEY = "wizardGameState"
# Serialized list of player names from the last submitted roster.
PLAYERS_KEY = "wizardPlayers"


@runtime_checkable
class KeyValueStore(Protocol):
    """
    Durable string key-value storage the scorekeeper saves its game into.

    Values are JSON text; the store does not interpret them.
    """

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        """Remove the key. Removing an absent key is a no-op."""
        raise NotImplementedError
