# wizard_scorekeeper/engine.py
from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from .rules import score_round
from .state import (
    GameState,
    RoundResult,
    new_game_state,
    state_from_dict,
    state_to_dict,
    validate_state_payload,
)
from .storage import GAME_STATE_KEY, PLAYERS_KEY, KeyValueStore

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class ScoreKeeper:
    """
    Owns the state of one Wizard game and keeps it in sync with a store.

    The scorekeeper does no rendering and collects no input. A front end reads
    `state` (or subscribes to changes) and calls `advance_round` once the
    bids and tricks for a round have been entered and checked.
    """

    def __init__(
        self,
        store: KeyValueStore,
        players: Optional[Sequence[str]] = None,
        validate_on_load: bool = False,
    ) -> None:
        self.store = store
        self.validate_on_load = validate_on_load
        self._listeners: List[StateListener] = []
        self._roster: Optional[List[str]] = list(players) if players else None
        self._state: Optional[GameState] = None

        saved = self._load_saved_state()
        if saved is not None:
            self._state = saved
            self._roster = list(saved.players)
            logger.info(
                "Resumed game at round %d/%d with %s",
                saved.current_round,
                saved.total_rounds,
                ", ".join(saved.players),
            )
        elif self._roster is not None:
            self._state = new_game_state(self._roster)
            self._save_state()
            logger.info("Started new game with %s", ", ".join(self._roster))

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def state(self) -> Optional[GameState]:
        """The current game, or None before a roster has been submitted."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Call `listener` with the new state after every completed change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def saved_players(self) -> Optional[List[str]]:
        """Roster from the last submitted player list, if one was saved."""
        raw = self.store.get(PLAYERS_KEY)
        if raw is None:
            return None
        return json.loads(raw)

    def initialize(self, players: Sequence[str]) -> GameState:
        """Start a fresh game for `players` and save it."""
        self._roster = list(players)
        self.store.set(PLAYERS_KEY, json.dumps(self._roster))
        self._state = new_game_state(self._roster)
        self._save_state()
        logger.info("Started new game with %s", ", ".join(self._roster))
        self._notify()
        return self._state

    def advance_round(
        self, bids: Sequence[int], tricks: Sequence[int]
    ) -> GameState:
        """
        Score the current round and move on to the next one.

        The caller must have checked the input already (see
        rules.round_input_errors): one entry per player, every bid in
        0..current_round, no negative tricks, and tricks adding up to
        current_round. Nothing is re-checked here.

        On the final round the round number and dealer stay where they are;
        the game is over once `state.is_complete` is true.
        """
        state = self._require_state()

        deltas = score_round(bids, tricks)
        new_scores = tuple(
            score + delta for score, delta in zip(state.scores, deltas)
        )
        points = tuple(new - old for new, old in zip(new_scores, state.scores))
        result = RoundResult(bids=tuple(bids), tricks=tuple(tricks), points=points)

        current_round = state.current_round
        dealer_index = state.current_dealer_index
        if current_round < state.total_rounds:
            current_round += 1
            dealer_index = (dealer_index + 1) % state.num_players

        self._state = replace(
            state,
            scores=new_scores,
            current_round=current_round,
            current_dealer_index=dealer_index,
            round_results=state.round_results + (result,),
        )
        self._save_state()
        logger.info(
            "Finished round %d/%d",
            len(self._state.round_results),
            self._state.total_rounds,
        )
        if self._state.is_complete:
            logger.info("Finished game; final scores %s", list(self._state.scores))
        self._notify()
        return self._state

    def reset(self) -> GameState:
        """Clear the saved game and start over with the same players."""
        if self._roster is None:
            raise RuntimeError("Cannot reset: no players have been entered")
        self.store.delete(GAME_STATE_KEY)
        self.store.delete(PLAYERS_KEY)
        self._state = new_game_state(self._roster)
        self._save_state()
        logger.info("Reset game for %s", ", ".join(self._roster))
        self._notify()
        return self._state

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def _load_saved_state(self) -> Optional[GameState]:
        if not self.validate_on_load:
            raw = self.store.get(GAME_STATE_KEY)
            if raw is None:
                return None
            return state_from_dict(json.loads(raw))

        try:
            raw = self.store.get(GAME_STATE_KEY)
            if raw is None:
                return None
            return validate_state_payload(json.loads(raw))
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError as well.
            logger.warning("Discarding saved game state: %s", exc)
            return None

    def _save_state(self) -> None:
        state = self._require_state()
        self.store.set(GAME_STATE_KEY, json.dumps(state_to_dict(state)))

    def _require_state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("No game in progress; call initialize() first")
        return self._state

    def _notify(self) -> None:
        state = self._require_state()
        for listener in list(self._listeners):
            listener(state)
