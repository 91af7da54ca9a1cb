"""
Pig Dice - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from src.engine.base import DIE_FACES, RuleMode


def dice_count_for(mode: RuleMode) -> int:
    """Number of dice thrown per roll under ``mode``."""
    return 2 if mode is RuleMode.DOUBLE_DIE else 1


def validate_dice_values(values: Sequence[int], mode: RuleMode) -> tuple[int, ...]:
    """
    Validate and normalize dice values for a rule mode.

    Args:
        values: Sequence of dice values to validate
        mode: Rule mode (determines how many dice a roll has)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    expected = dice_count_for(mode)

    if len(values_tuple) != expected:
        raise ValueError(
            f"{mode.name} rolls use {expected} dice, got {len(values_tuple)}."
        )

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_score(score: int) -> int:
    """
    Validate a score value.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_player_index(index: int) -> int:
    """
    Validate a player seat index.

    Raises:
        ValueError: If index is not 0 or 1
    """
    if not isinstance(index, int):
        raise ValueError(f"Player index must be an integer, got {type(index).__name__}.")

    if index not in (0, 1):
        raise ValueError(f"Player index must be 0 or 1, got {index}.")

    return index


def validate_player_name(name: str) -> str:
    """
    Validate and normalize a display name.

    Raises:
        ValueError: If the name is empty or too long
    """
    if not isinstance(name, str):
        raise ValueError(f"Player name must be a string, got {type(name).__name__}.")

    stripped = name.strip()
    if not stripped:
        raise ValueError("Player name cannot be empty.")
    if len(stripped) > 30:
        raise ValueError(f"Player name must be at most 30 characters, got {len(stripped)}.")

    return stripped
