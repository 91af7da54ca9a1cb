"""
Pig Dice - Computer Turn Runner

Drives the computer opponent one paced step at a time. Every step
re-checks the session before acting, so a reset or mode change while a
step is pending simply ends the turn.
"""

from __future__ import annotations

import logging
import threading

from src.engine.ai_policy import AIPolicy, Decision
from src.session.game_session import COMPUTER_INDEX, GameSession

logger = logging.getLogger(__name__)


class ComputerTurnRunner:
    """Plays the computer's turns for a GameSession.

    Use run_turn() to play a turn on the calling thread, or start() to
    play it on a background thread that cancel() can stop.
    """

    def __init__(
        self,
        session: GameSession,
        policy: type[AIPolicy] = AIPolicy,
        step_delay: float | None = None,
    ) -> None:
        self._session = session
        self._policy = policy
        self._step_delay = (
            session.settings.computer_step_delay if step_delay is None else step_delay
        )
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._run_generation: int | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def step(self) -> Decision | None:
        """Take one decision for the computer and apply it.

        Returns:
            The decision applied, or None if it is not the computer's turn
            or the session changed before the decision could be applied
        """
        state = self._session.state
        if not self._session.is_computer_turn_in(state):
            return None

        decision = self._policy.decide(state, COMPUTER_INDEX)
        if not self._session.apply_computer_decision(decision, state):
            return None

        logger.debug("Computer chose to %s", decision.value)
        return decision

    def run_turn(self, stop_event: threading.Event | None = None) -> list[Decision]:
        """Play until the computer holds, busts, wins, or is interrupted.

        Args:
            stop_event: Event that ends the turn when set (a fresh one
                when omitted, so an earlier cancel() does not carry over)

        Returns:
            The decisions applied, in order
        """
        if stop_event is None:
            stop_event = threading.Event()
        generation = self._session.generation
        decisions: list[Decision] = []

        while not stop_event.is_set():
            if not self._session.is_computer_turn:
                break
            if self._step_delay and stop_event.wait(self._step_delay):
                break
            if self._session.generation != generation:
                logger.debug("Computer turn abandoned after reset")
                break

            decision = self.step()
            if decision is None:
                break
            decisions.append(decision)
            if decision is Decision.HOLD:
                break

        return decisions

    def start(self) -> bool:
        """Play the computer's turn on a background thread.

        A thread still waiting out a turn from before a reset is stopped
        and replaced.

        Returns:
            True if a new turn was started
        """
        if not self._session.is_computer_turn:
            return False
        if self.is_running:
            if self._run_generation == self._session.generation:
                return False
            logger.debug("Replacing computer turn left over from a reset")
            self.cancel()

        self._stop_event = threading.Event()
        self._run_generation = self._session.generation
        self._thread = threading.Thread(
            target=self._run_safely,
            args=(self._stop_event,),
            daemon=True,
            name="computer-turn",
        )
        self._thread.start()
        return True

    def cancel(self, timeout: float | None = None) -> None:
        """Signal the background turn to stop and wait for it."""
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run_safely(self, stop_event: threading.Event) -> None:
        try:
            self.run_turn(stop_event)
        except Exception:
            logger.exception("Computer turn failed")
