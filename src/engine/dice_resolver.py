"""
Pig Dice - Dice Resolver

Resolves a roll into its effect on the turn. Single-die: 2-6 adds face
value, 1 wipes the turn score. Double-die: any 1 wipes the turn score,
double ones also wipe the banked total, and a matching non-one pair must
be rolled again.

Resolution is deterministic; randomness only enters through roll_dice().
"""

import random

from src.engine.base import DIE_FACES, DiceRoll, RollResolution, RuleMode
from src.engine.validators import dice_count_for, validate_dice_values, validate_score


_SINGLE_DIE_RULES = (
    "Roll a 1: turn score is lost and the turn ends.",
    "Roll 2-6: the face value is added to the turn score.",
    "Hold to bank the turn score into your total.",
    "First to 100 total points wins.",
)

_DOUBLE_DIE_RULES = (
    "Exactly one die shows 1: turn score is lost and the turn ends.",
    "Both dice show 1: turn score AND total score are lost, and the turn ends.",
    "Matching pair other than 1s: the sum is added and you must roll again.",
    "Any other roll: the sum is added to the turn score.",
    "First to 100 total points wins.",
)


class DiceResolver:
    """
    Stateless resolver for both rule modes.

    All methods are class methods operating on immutable data.
    """

    @classmethod
    def dice_count(cls, mode: RuleMode) -> int:
        """Number of dice thrown per roll."""
        return dice_count_for(mode)

    @classmethod
    def roll_dice(cls, mode: RuleMode, rng: random.Random | None = None) -> DiceRoll:
        """Throw the dice required by ``mode``.

        Args:
            mode: Rule mode
            rng: Optional random source (module-level random when omitted)

        Returns:
            DiceRoll with one or two values (1-6)
        """
        source = rng if rng is not None else random
        values = tuple(source.randint(1, DIE_FACES) for _ in range(cls.dice_count(mode)))
        return DiceRoll(values=values)

    @classmethod
    def resolve(
        cls,
        mode: RuleMode,
        dice: DiceRoll | tuple[int, ...],
        turn_score: int = 0,
        total_score: int = 0,
    ) -> RollResolution:
        """Resolve a roll under ``mode``.

        Args:
            mode: Rule mode the roll was made under
            dice: A DiceRoll or tuple of dice values
            turn_score: Active player's unbanked points
            total_score: Active player's banked points

        Returns:
            RollResolution describing the effect

        Raises:
            ValueError: If the dice do not fit the mode
        """
        values = dice.values if isinstance(dice, DiceRoll) else tuple(dice)
        values = validate_dice_values(values, mode)
        validate_score(turn_score)
        validate_score(total_score)

        if mode is RuleMode.SINGLE_DIE:
            return cls.resolve_single(values[0], turn_score)
        return cls.resolve_double(values[0], values[1], turn_score, total_score)

    @classmethod
    def resolve_single(cls, face: int, turn_score: int) -> RollResolution:
        """Single-die rule."""
        if face == 1:
            return RollResolution(
                turn_score_delta=-turn_score,
                turn_ends=True,
                description="Rolled a 1, turn score lost",
            )

        return RollResolution(
            turn_score_delta=face,
            turn_ends=False,
            description=f"Rolled {face}",
        )

    @classmethod
    def resolve_double(
        cls, d1: int, d2: int, turn_score: int, total_score: int
    ) -> RollResolution:
        """Double-die rule."""
        if d1 == 1 and d2 == 1:
            return RollResolution(
                turn_score_delta=-turn_score,
                turn_ends=True,
                total_score_resets=True,
                description=f"Double ones, {total_score} banked points lost",
            )

        if d1 == 1 or d2 == 1:
            return RollResolution(
                turn_score_delta=-turn_score,
                turn_ends=True,
                description=f"Rolled {d1} and {d2}, turn score lost",
            )

        if d1 == d2:
            return RollResolution(
                turn_score_delta=d1 + d2,
                turn_ends=False,
                must_continue=True,
                description=f"Double {d1}s, must roll again",
            )

        return RollResolution(
            turn_score_delta=d1 + d2,
            turn_ends=False,
            description=f"Rolled {d1} and {d2}",
        )

    @classmethod
    def rules(cls, mode: RuleMode) -> tuple[str, ...]:
        """Human-readable rule lines for ``mode``."""
        if mode is RuleMode.SINGLE_DIE:
            return _SINGLE_DIE_RULES
        return _DOUBLE_DIE_RULES
