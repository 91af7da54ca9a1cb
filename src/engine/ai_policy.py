"""
Pig Dice - Computer Opponent Policy

Fixed-threshold hold/roll heuristic. The computer keeps rolling until its
turn score reaches the risk threshold for the rule mode, or until banking
would win the game. A forced roll always rolls.
"""

from enum import Enum
from typing import ClassVar

from src.engine.base import GameState, RuleMode
from src.engine.validators import validate_player_index


class Decision(Enum):
    """What the computer does next."""
    ROLL = "roll"
    HOLD = "hold"


class AIPolicy:
    """Stateless decision function for the computer-controlled player."""

    RISK_THRESHOLDS: ClassVar[dict[RuleMode, int]] = {
        RuleMode.SINGLE_DIE: 20,
        RuleMode.DOUBLE_DIE: 18,
    }

    @classmethod
    def risk_threshold(cls, mode: RuleMode) -> int:
        """Turn score at which the computer stops pushing its luck."""
        return cls.RISK_THRESHOLDS[mode]

    @classmethod
    def decide(cls, state: GameState, player_index: int = 1) -> Decision:
        """
        Choose between rolling and holding.

        Args:
            state: Current snapshot (should be the computer's turn)
            player_index: Seat of the computer player

        Returns:
            Decision.HOLD or Decision.ROLL
        """
        validate_player_index(player_index)

        if state.forced_roll or state.turn_score == 0:
            return Decision.ROLL

        potential = state.players[player_index].total_score + state.turn_score
        if potential >= state.target_score:
            return Decision.HOLD
        if state.turn_score >= cls.risk_threshold(state.rule_mode):
            return Decision.HOLD

        return Decision.ROLL
