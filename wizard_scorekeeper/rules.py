# wizard_scorekeeper/rules.py
from __future__ import annotations

from typing import Iterable, List, Sequence

MIN_PLAYERS = 3
MAX_PLAYERS = 6


def score_bid(bid: int, tricks: int) -> int:
    """
    Score one player's round according to Wizard scoring:

    - If tricks == bid: 20 + 10 * tricks
    - Else: -10 * abs(tricks - bid)
    """
    if tricks == bid:
        return 20 + 10 * tricks
    return -10 * abs(tricks - bid)


def score_round(bids: Sequence[int], tricks: Sequence[int]) -> List[int]:
    """Return the score delta for every player, index-aligned with the inputs."""
    return [score_bid(bid, won) for bid, won in zip(bids, tricks)]


def round_input_errors(
    bids: Sequence[int],
    tricks: Sequence[int],
    current_round: int,
    num_players: int,
) -> List[str]:
    """
    Check the bids and tricks entered for a round before they are scored.

    Rules implemented:
    - One bid and one trick count per player.
    - Every bid lies in 0..current_round.
    - No negative trick counts.
    - Tricks won add up to the number of cards dealt (current_round).

    Returns a list of problems; an empty list means the input can be scored.
    """
    errors: List[str] = []
    if len(bids) != num_players:
        errors.append(f"Expected {num_players} bids, got {len(bids)}")
    if len(tricks) != num_players:
        errors.append(f"Expected {num_players} trick counts, got {len(tricks)}")

    for i, bid in enumerate(bids):
        if bid < 0 or bid > current_round:
            errors.append(
                f"Bid {bid} for player {i + 1} must be between 0 and {current_round}"
            )
    for i, won in enumerate(tricks):
        if won < 0:
            errors.append(f"Tricks for player {i + 1} cannot be negative")

    trick_sum = sum(tricks)
    if trick_sum != current_round:
        errors.append(
            f"Tricks add up to {trick_sum}; the sum of tricks must equal "
            f"{current_round}"
        )
    return errors


def is_valid_round_input(
    bids: Sequence[int],
    tricks: Sequence[int],
    current_round: int,
    num_players: int,
) -> bool:
    return not round_input_errors(bids, tricks, current_round, num_players)


def remaining_tricks(bids: Sequence[int], current_round: int) -> int:
    """Tricks not yet claimed by the bids so far (negative when overbid)."""
    return current_round - sum(bids)


def clean_roster(names: Iterable[str]) -> List[str]:
    """
    Drop blank entries from a submitted roster and check the player count.

    Raises ValueError when fewer than 3 or more than 6 names remain.
    """
    players = [name.strip() for name in names if name.strip()]
    if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
        raise ValueError(
            f"Please enter {MIN_PLAYERS} to {MAX_PLAYERS} player names."
        )
    return players
