"""
Pig Dice - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. All classes are immutable (frozen dataclasses) so a snapshot
handed to the presentation layer can never change underneath it.
"""

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterator, Sequence

TARGET_SCORE = 100
DIE_FACES = 6


class RuleMode(Enum):
    """Dice rule variants."""
    SINGLE_DIE = "single_die"
    DOUBLE_DIE = "double_die"


class GameMode(Enum):
    """Who controls the second player."""
    VS_HUMAN = "vs_human"
    VS_COMPUTER = "vs_computer"


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a dice roll.

    Attributes:
        values: Tuple of one or two die faces
    """
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate dice values are within valid range."""
        if not 1 <= len(self.values) <= 2:
            raise ValueError(
                f"A roll has one or two dice, got {len(self.values)}."
            )
        for value in self.values:
            if not (1 <= value <= DIE_FACES):
                raise ValueError(
                    f"Invalid die value {value}. "
                    f"Must be between 1 and {DIE_FACES}."
                )

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "DiceRoll":
        """Create a DiceRoll from any sequence type."""
        return cls(values=tuple(values))


@dataclass(frozen=True)
class RollResolution:
    """
    Outcome of resolving a single roll.

    Attributes:
        turn_score_delta: Change applied to the turn score
        turn_ends: Whether the roll hands the turn to the opponent
        total_score_resets: Whether the active player's total drops to 0
        must_continue: Whether the player is barred from holding
        description: Human-readable summary
    """
    turn_score_delta: int
    turn_ends: bool
    total_score_resets: bool = False
    must_continue: bool = False
    description: str = ""

    @property
    def is_bust(self) -> bool:
        """Returns True if the roll wiped the turn score."""
        return self.turn_ends

    def __str__(self) -> str:
        return self.description or f"{self.turn_score_delta:+d} points"


@dataclass(frozen=True)
class Player:
    """
    One seat at the table.

    Attributes:
        name: Display name
        total_score: Banked points
        wins: Games won this session
        losses: Games lost this session
        id: Opaque identifier
    """
    name: str
    total_score: int = 0
    wins: int = 0
    losses: int = 0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Player name cannot be empty.")
        for label, value in (
            ("total_score", self.total_score),
            ("wins", self.wins),
            ("losses", self.losses),
        ):
            if value < 0:
                raise ValueError(f"{label} cannot be negative, got {value}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "total_score": self.total_score,
            "wins": self.wins,
            "losses": self.losses,
        }


@dataclass(frozen=True)
class PlayerPair:
    """
    Exactly two players addressed by index 0 or 1.

    Attributes:
        first: Player at index 0
        second: Player at index 1
    """
    first: Player
    second: Player

    @staticmethod
    def _check_index(index: int) -> int:
        if index not in (0, 1):
            raise ValueError(f"Player index must be 0 or 1, got {index}.")
        return index

    def __getitem__(self, index: int) -> Player:
        return self.second if self._check_index(index) else self.first

    def __iter__(self) -> Iterator[Player]:
        yield self.first
        yield self.second

    def __len__(self) -> int:
        return 2

    @classmethod
    def other(cls, index: int) -> int:
        """Index of the opponent of ``index``."""
        return 1 - cls._check_index(index)

    def replace(self, index: int, player: Player) -> "PlayerPair":
        """Return a new pair with the player at ``index`` swapped out."""
        if self._check_index(index) == 0:
            return PlayerPair(first=player, second=self.second)
        return PlayerPair(first=self.first, second=player)

    @classmethod
    def from_names(cls, names: Sequence[str]) -> "PlayerPair":
        if len(names) != 2:
            raise ValueError(f"Exactly two player names required, got {len(names)}.")
        return cls(first=Player(name=names[0]), second=Player(name=names[1]))


@dataclass(frozen=True)
class GameState:
    """
    Complete snapshot of a game session.

    Attributes:
        players: The two seats
        rule_mode: Single-die or double-die rules
        active_index: Index of the player whose turn it is
        turn_score: Points accumulated this turn (not yet banked)
        last_roll: Most recent roll, None before the first roll
        forced_roll: Whether the active player must roll again
        game_over: Whether a player has reached the target
        winner_index: Index of the winner once the game is over
        target_score: Score needed to win
    """
    players: PlayerPair
    rule_mode: RuleMode = RuleMode.SINGLE_DIE
    active_index: int = 0
    turn_score: int = 0
    last_roll: DiceRoll | None = None
    forced_roll: bool = False
    game_over: bool = False
    winner_index: int | None = None
    target_score: int = TARGET_SCORE

    def __post_init__(self) -> None:
        """Validate state consistency."""
        if self.active_index not in (0, 1):
            raise ValueError(f"Active index must be 0 or 1, got {self.active_index}.")
        if self.turn_score < 0:
            raise ValueError(f"Turn score cannot be negative, got {self.turn_score}.")
        if self.game_over != (self.winner_index is not None):
            raise ValueError("A finished game needs a winner and only a finished game has one.")
        if self.winner_index is not None and self.winner_index not in (0, 1):
            raise ValueError(f"Winner index must be 0 or 1, got {self.winner_index}.")
        if self.forced_roll and self.rule_mode is RuleMode.SINGLE_DIE:
            raise ValueError("Forced rolls only exist in double-die mode.")

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    @property
    def winner(self) -> Player | None:
        if self.winner_index is None:
            return None
        return self.players[self.winner_index]

    @property
    def can_roll(self) -> bool:
        """Returns True if a roll would change the state."""
        return not self.game_over

    @property
    def can_hold(self) -> bool:
        """Returns True if a hold would change the state."""
        return not self.game_over and self.turn_score > 0 and not self.forced_roll

    def evolve(self, **changes: Any) -> "GameState":
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view for presentation layers."""
        return {
            "players": [p.to_dict() for p in self.players],
            "rule_mode": self.rule_mode.value,
            "active_index": self.active_index,
            "turn_score": self.turn_score,
            "last_roll": list(self.last_roll.values) if self.last_roll else None,
            "forced_roll": self.forced_roll,
            "game_over": self.game_over,
            "winner_index": self.winner_index,
            "target_score": self.target_score,
        }
