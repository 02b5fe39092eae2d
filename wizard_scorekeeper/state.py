# wizard_scorekeeper/state.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple

# Wizard is played with a 60-card deck; the number of rounds is how many
# full hands can be dealt to every player.
DECK_SIZE = 60


def total_rounds_for(num_players: int) -> int:
    """Number of rounds in a game for the given player count."""
    if num_players <= 0:
        raise ValueError("A game needs at least one player")
    return DECK_SIZE // num_players


@dataclass(frozen=True)
class RoundResult:
    bids: Tuple[int, ...]
    tricks: Tuple[int, ...]
    # Net score change per player for this round.
    points: Tuple[int, ...]


@dataclass(frozen=True)
class GameState:
    players: Tuple[str, ...]
    scores: Tuple[int, ...]
    current_round: int
    total_rounds: int
    current_dealer_index: int = 0
    round_results: Tuple[RoundResult, ...] = field(default_factory=tuple)

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def is_complete(self) -> bool:
        """True once every round of the game has been scored."""
        return len(self.round_results) >= self.total_rounds

    @property
    def dealer_name(self) -> str:
        return self.players[self.current_dealer_index]


def new_game_state(players: Sequence[str]) -> GameState:
    """Fresh state for a roster: zero scores, round 1, first seat deals."""
    players = tuple(players)
    return GameState(
        players=players,
        scores=tuple(0 for _ in players),
        current_round=1,
        total_rounds=total_rounds_for(len(players)),
        current_dealer_index=0,
        round_results=(),
    )


def round_result_to_dict(result: RoundResult) -> Dict[str, Any]:
    return {
        "bids": list(result.bids),
        "tricks": list(result.tricks),
        "points": list(result.points),
    }


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """Convert a GameState to the JSON-serializable persisted layout."""
    return {
        "players": list(state.players),
        "scores": list(state.scores),
        "currentRound": state.current_round,
        "roundResults": [round_result_to_dict(r) for r in state.round_results],
        "totalRounds": state.total_rounds,
        "currentDealerIndex": state.current_dealer_index,
    }


def state_from_dict(data: Dict[str, Any]) -> GameState:
    """
    Rebuild a GameState from its persisted layout.

    Values are taken as stored; nothing is checked beyond the keys being
    present. Use validate_state_payload for an untrusted payload.
    """
    return GameState(
        players=tuple(data["players"]),
        scores=tuple(data["scores"]),
        current_round=data["currentRound"],
        total_rounds=data["totalRounds"],
        current_dealer_index=data["currentDealerIndex"],
        round_results=tuple(
            RoundResult(
                bids=tuple(r["bids"]),
                tricks=tuple(r["tricks"]),
                points=tuple(r["points"]),
            )
            for r in data["roundResults"]
        ),
    )


def _is_int(value: Any) -> bool:
    # bool is a subclass of int, but never a valid score or count.
    return isinstance(value, int) and not isinstance(value, bool)


def _int_list(data: Dict[str, Any], key: str, length: int, where: str) -> None:
    values = data.get(key)
    if not isinstance(values, list) or not all(_is_int(v) for v in values):
        raise ValueError(f"{where}'{key}' must be a list of integers")
    if len(values) != length:
        raise ValueError(
            f"{where}'{key}' has {len(values)} entries, expected {length}"
        )


def validate_state_payload(data: Any) -> GameState:
    """
    Check the shape and types of a persisted payload and return the GameState.

    Raises ValueError describing the first problem found.
    """
    if not isinstance(data, dict):
        raise ValueError("Game state payload must be a JSON object")

    players = data.get("players")
    if (
        not isinstance(players, list)
        or not players
        or not all(isinstance(p, str) and p for p in players)
    ):
        raise ValueError("'players' must be a non-empty list of names")
    num_players = len(players)

    _int_list(data, "scores", num_players, "")

    for key in ("currentRound", "totalRounds", "currentDealerIndex"):
        if not _is_int(data.get(key)):
            raise ValueError(f"'{key}' must be an integer")

    total_rounds = data["totalRounds"]
    if total_rounds != total_rounds_for(num_players):
        raise ValueError(
            f"'totalRounds' is {total_rounds}, expected "
            f"{total_rounds_for(num_players)} for {num_players} players"
        )
    current_round = data["currentRound"]
    if not 1 <= current_round <= total_rounds:
        raise ValueError(f"'currentRound' {current_round} is out of range")
    if not 0 <= data["currentDealerIndex"] < num_players:
        raise ValueError("'currentDealerIndex' is out of range")

    results = data.get("roundResults")
    if not isinstance(results, list):
        raise ValueError("'roundResults' must be a list")
    # The final round is scored without advancing currentRound.
    if len(results) not in (current_round - 1, current_round):
        raise ValueError(
            f"{len(results)} round results do not match round {current_round}"
        )
    if len(results) == current_round and current_round != total_rounds:
        raise ValueError("Only the final round may be scored without advancing")

    for i, result in enumerate(results):
        where = f"roundResults[{i}]."
        if not isinstance(result, dict):
            raise ValueError(f"roundResults[{i}] must be an object")
        for key in ("bids", "tricks", "points"):
            _int_list(result, key, num_players, where)

    return state_from_dict(data)
