"""
Pig Dice - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from dataclasses import replace
from typing import Iterable

import pytest

from src.config.settings import Settings
from src.engine.base import GameState, PlayerPair, RuleMode
from src.engine.turn_engine import TurnEngine


class ScriptedRandom(random.Random):
    """Random source that returns pre-set die faces in order."""

    def __init__(self, faces: Iterable[int]) -> None:
        super().__init__(0)
        self._faces = list(faces)

    def randint(self, a: int, b: int) -> int:
        if not self._faces:
            raise AssertionError("ScriptedRandom ran out of faces")
        return self._faces.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._faces)


def make_state(
    rule_mode: RuleMode = RuleMode.SINGLE_DIE,
    totals: tuple[int, int] = (0, 0),
    turn_score: int = 0,
    active_index: int = 0,
    forced_roll: bool = False,
    records: tuple[tuple[int, int], tuple[int, int]] = ((0, 0), (0, 0)),
) -> GameState:
    """Build a mid-game state without playing up to it."""
    base = TurnEngine.new_game(rule_mode=rule_mode)
    players = PlayerPair(
        first=replace(
            base.players[0], total_score=totals[0], wins=records[0][0], losses=records[0][1]
        ),
        second=replace(
            base.players[1], total_score=totals[1], wins=records[1][0], losses=records[1][1]
        ),
    )
    return base.evolve(
        players=players,
        turn_score=turn_score,
        active_index=active_index,
        forced_roll=forced_roll,
    )


# =============================================================================
# ROLL DATA
# =============================================================================

@pytest.fixture
def double_die_rolls() -> dict[str, tuple[tuple[int, int], bool, bool, bool]]:
    """
    Double-die roll patterns.

    Returns:
        Dict mapping name to (faces, turn_ends, total_resets, must_continue)
    """
    return {
        "double_ones": ((1, 1), True, True, False),
        "one_first": ((1, 4), True, False, False),
        "one_second": ((6, 1), True, False, False),
        "double_twos": ((2, 2), False, False, True),
        "double_sixes": ((6, 6), False, False, True),
        "mixed_low": ((2, 3), False, False, False),
        "mixed_high": ((5, 6), False, False, False),
    }


# =============================================================================
# SESSION FIXTURES
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with no pacing so computer turns run instantly."""
    return Settings(
        player_one_name="Alice",
        player_two_name="Bob",
        computer_name="Computer",
        computer_step_delay=0.0,
    )


@pytest.fixture
def single_die_state() -> GameState:
    return TurnEngine.new_game(rule_mode=RuleMode.SINGLE_DIE)


@pytest.fixture
def double_die_state() -> GameState:
    return TurnEngine.new_game(rule_mode=RuleMode.DOUBLE_DIE)


@pytest.fixture
def state_factory():
    """Factory for mid-game states (see make_state)."""
    return make_state


@pytest.fixture
def scripted_rng():
    """Factory for a random source that yields the given faces."""
    return ScriptedRandom
