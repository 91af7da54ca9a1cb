"""
Pig Dice Sessions.

Snapshot ownership, guard predicates and the computer opponent's turn loop.
"""

from src.session.computer_turn import ComputerTurnRunner
from src.session.events import EventPayload, GameEvent, SessionAction, classify_transition
from src.session.game_session import COMPUTER_INDEX, GameSession

__all__ = [
    "COMPUTER_INDEX",
    "ComputerTurnRunner",
    "EventPayload",
    "GameEvent",
    "GameSession",
    "SessionAction",
    "classify_transition",
]
