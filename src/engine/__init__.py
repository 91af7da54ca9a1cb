"""
Pig Dice Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, roll resolution, turn handover, win detection
and the computer opponent's decisions.
"""

from src.engine.ai_policy import AIPolicy, Decision
from src.engine.base import (
    TARGET_SCORE,
    DiceRoll,
    GameMode,
    GameState,
    Player,
    PlayerPair,
    RollResolution,
    RuleMode,
)
from src.engine.dice_resolver import DiceResolver
from src.engine.turn_engine import TurnEngine

__all__ = [
    # Data Classes
    "DiceRoll",
    "GameState",
    "Player",
    "PlayerPair",
    "RollResolution",
    # Enums
    "Decision",
    "GameMode",
    "RuleMode",
    # Engines
    "AIPolicy",
    "DiceResolver",
    "TurnEngine",
    # Constants
    "TARGET_SCORE",
]
