"""
Pig Dice - Session Event Definitions

Event types and payloads describing what changed between two snapshots.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from src.engine.base import GameState, RuleMode


class GameEvent(Enum):
    """Events that can occur during a game."""

    DICE_ROLLED = auto()
    PLAYER_BUST = auto()
    DOUBLE_ONES = auto()
    FORCED_ROLL = auto()
    TURN_BANKED = auto()
    TURN_ADVANCED = auto()
    GAME_WON = auto()
    GAME_RESET = auto()


class SessionAction(Enum):
    """Intents a session applies to the engine."""

    ROLL = "roll"
    HOLD = "hold"
    RESET = "reset"


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    player_index: int | None = None
    data: dict[str, Any] = field(default_factory=dict)


def classify_transition(
    action: SessionAction, previous: GameState, current: GameState
) -> list[GameEvent]:
    """Determine the game events implied by applying ``action``.

    Returns an empty list when the action was ignored (same snapshot).
    """
    if action is SessionAction.RESET:
        return [GameEvent.GAME_RESET]

    if current is previous:
        return []

    events: list[GameEvent] = []
    handed_over = current.active_index != previous.active_index

    if action is SessionAction.ROLL:
        events.append(GameEvent.DICE_ROLLED)
        if handed_over:
            if (
                current.rule_mode is RuleMode.DOUBLE_DIE
                and current.last_roll is not None
                and current.last_roll.values == (1, 1)
            ):
                events.append(GameEvent.DOUBLE_ONES)
            events.append(GameEvent.PLAYER_BUST)
            events.append(GameEvent.TURN_ADVANCED)
        elif current.forced_roll:
            events.append(GameEvent.FORCED_ROLL)
        return events

    events.append(GameEvent.TURN_BANKED)
    if current.game_over:
        events.append(GameEvent.GAME_WON)
    elif handed_over:
        events.append(GameEvent.TURN_ADVANCED)
    return events
