# wizard_scorekeeper/history.py
from __future__ import annotations

from typing import Any, Dict, List, Tuple

from .state import GameState, RoundResult

FIELDNAMES = [
    "round",
    "dealer_index",
    "player_index",
    "player_name",
    "bid",
    "tricks",
    "points",
    "total_score",
]


def build_history_rows(state: GameState) -> List[Dict[str, Any]]:
    """
    Build a list of rows summarizing every completed round.

    Each row corresponds to (round, player) and has keys in FIELDNAMES.
    `total_score` is the running total after that round, so the last row for a
    player matches their current score.
    """
    running_scores = [0] * state.num_players
    rows: List[Dict[str, Any]] = []

    for round_index, result in enumerate(state.round_results):
        # The first seat deals round 1 and the deal moves one seat per round.
        dealer_index = round_index % state.num_players
        for pid, name in enumerate(state.players):
            running_scores[pid] += result.points[pid]
            rows.append(
                {
                    "round": round_index + 1,
                    "dealer_index": dealer_index,
                    "player_index": pid,
                    "player_name": name,
                    "bid": result.bids[pid],
                    "tricks": result.tricks[pid],
                    "points": result.points[pid],
                    "total_score": running_scores[pid],
                }
            )

    return rows


def format_round_cell(result: RoundResult, player_index: int) -> str:
    """History table cell such as "30 (1/1)": points, then bid/tricks."""
    return (
        f"{result.points[player_index]} "
        f"({result.bids[player_index]}/{result.tricks[player_index]})"
    )


def leader_index(state: GameState) -> int:
    """Index of the highest score; the earliest seat wins ties."""
    return state.scores.index(max(state.scores))


def standings(state: GameState) -> List[Tuple[int, str, int]]:
    """(rank, name, score) from highest to lowest score, seat order on ties."""
    ordered = sorted(
        zip(state.players, state.scores),
        key=lambda entry: entry[1],
        reverse=True,
    )
    return [(rank, name, score) for rank, (name, score) in enumerate(ordered, 1)]
