"""
Pig Dice - Game Session

Owns the current snapshot for one table: the random source, who controls
the second seat, and the guard predicates the presentation layer uses to
enable or disable its controls. Each intent replaces the snapshot; a
callback receives the resulting events.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable

from src.config.settings import Settings, get_settings
from src.engine.ai_policy import Decision
from src.engine.base import GameMode, GameState, RuleMode
from src.engine.turn_engine import TurnEngine
from src.session.events import EventPayload, SessionAction, classify_transition

logger = logging.getLogger(__name__)

COMPUTER_INDEX = 1


class GameSession:
    """A single in-memory game between two seats.

    Human intents (roll/hold) are ignored while the computer is to act;
    the computer's moves go through apply_computer_decision() instead.
    """

    def __init__(
        self,
        *,
        rule_mode: RuleMode = RuleMode.SINGLE_DIE,
        game_mode: GameMode = GameMode.VS_HUMAN,
        rng: random.Random | None = None,
        settings: Settings | None = None,
        on_event: Callable[[EventPayload], None] | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._rng = rng or random.Random()
        self._on_event = on_event
        self._lock = threading.RLock()
        self._game_mode = game_mode
        self._generation = 0
        self._state = TurnEngine.new_game(
            (self._settings.player_one_name, self._second_seat_name(game_mode)),
            rule_mode,
        )

    # -- Observable state ------------------------------------------------

    @property
    def state(self) -> GameState:
        """The current immutable snapshot."""
        return self._state

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def game_mode(self) -> GameMode:
        return self._game_mode

    @property
    def rule_mode(self) -> RuleMode:
        return self._state.rule_mode

    @property
    def generation(self) -> int:
        """Bumped on every reset; stale computer steps compare against it."""
        return self._generation

    def is_computer_turn_in(self, state: GameState) -> bool:
        return (
            self._game_mode is GameMode.VS_COMPUTER
            and state.active_index == COMPUTER_INDEX
            and not state.game_over
        )

    @property
    def is_computer_turn(self) -> bool:
        return self.is_computer_turn_in(self._state)

    @property
    def can_roll(self) -> bool:
        """Whether the Roll control should be enabled."""
        return self._state.can_roll and not self.is_computer_turn

    @property
    def can_hold(self) -> bool:
        """Whether the Hold control should be enabled."""
        return self._state.can_hold and not self.is_computer_turn

    # -- Human intents ---------------------------------------------------

    def roll(self) -> GameState:
        """Roll for the human player to act."""
        with self._lock:
            if self.is_computer_turn:
                logger.debug("Roll ignored: computer is playing")
                return self._state
            return self._apply(SessionAction.ROLL)

    def hold(self) -> GameState:
        """Hold for the human player to act."""
        with self._lock:
            if self.is_computer_turn:
                logger.debug("Hold ignored: computer is playing")
                return self._state
            return self._apply(SessionAction.HOLD)

    def reset(self, preserve_stats: bool = True) -> GameState:
        """Restart the game; abandons any computer turn in flight."""
        with self._lock:
            return self._apply(
                SessionAction.RESET,
                lambda state: TurnEngine.reset(state, preserve_stats=preserve_stats),
            )

    def set_rule_mode(self, mode: RuleMode) -> GameState:
        """Switch dice rules; scores reset, statistics are kept."""
        with self._lock:
            return self._apply(
                SessionAction.RESET,
                lambda state: TurnEngine.set_rule_mode(state, mode),
            )

    def set_game_mode(self, mode: GameMode) -> GameState:
        """Switch between a human and a computer opponent."""
        with self._lock:
            self._game_mode = mode
            name = self._second_seat_name(mode)
            logger.info("Game mode set to %s", mode.value)
            return self._apply(
                SessionAction.RESET,
                lambda state: TurnEngine.reset(
                    TurnEngine.rename_player(state, COMPUTER_INDEX, name)
                ),
            )

    # -- Computer intents ------------------------------------------------

    def apply_computer_decision(
        self, decision: Decision, expected: GameState
    ) -> bool:
        """Apply a computer decision made against ``expected``.

        The decision is dropped when the snapshot has changed since it was
        taken, or when it is no longer the computer's turn.

        Returns:
            True if the decision was applied
        """
        with self._lock:
            if self._state is not expected or not self.is_computer_turn:
                logger.debug("Stale computer %s dropped", decision.value)
                return False
            action = SessionAction.HOLD if decision is Decision.HOLD else SessionAction.ROLL
            self._apply(action)
            return True

    # -- Internals -------------------------------------------------------

    def _second_seat_name(self, mode: GameMode) -> str:
        if mode is GameMode.VS_COMPUTER:
            return self._settings.computer_name
        return self._settings.player_two_name

    def _apply(
        self,
        action: SessionAction,
        transition: Callable[[GameState], GameState] | None = None,
    ) -> GameState:
        previous = self._state
        actor = previous.active_index

        if transition is not None:
            current = transition(previous)
        elif action is SessionAction.ROLL:
            current = TurnEngine.roll(previous, rng=self._rng)
        else:
            current = TurnEngine.hold(previous)

        if action is SessionAction.RESET:
            self._generation += 1

        self._state = current
        self._emit(action, previous, current, actor)
        return current

    def _emit(
        self,
        action: SessionAction,
        previous: GameState,
        current: GameState,
        actor: int,
    ) -> None:
        if self._on_event is None:
            return

        for event in classify_transition(action, previous, current):
            payload = EventPayload(
                event=event,
                player_index=None if action is SessionAction.RESET else actor,
                data={"state": current.to_dict()},
            )
            try:
                self._on_event(payload)
            except Exception:
                logger.exception("Error handling event %s", event.name)
