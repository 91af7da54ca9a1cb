"""
Pig Dice - Turn Engine

State machine for a two-player game. Every operation takes a GameState
and returns the next one; disallowed calls return the input unchanged.

Transitions:
- roll: resolve fresh dice, bank nothing, hand over on a bust
- hold: bank the turn score, win at the target or hand over
- reset: clear scores (and optionally statistics) for a new game
"""

import logging
import random
from dataclasses import replace
from typing import Sequence

from src.engine.base import DiceRoll, GameState, PlayerPair, RuleMode
from src.engine.dice_resolver import DiceResolver
from src.engine.validators import validate_player_index, validate_player_name

logger = logging.getLogger(__name__)


class TurnEngine:
    """
    Stateless engine for turn progression.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    DEFAULT_NAMES = ("Player 1", "Player 2")

    @classmethod
    def new_game(
        cls,
        player_names: Sequence[str] = DEFAULT_NAMES,
        rule_mode: RuleMode = RuleMode.SINGLE_DIE,
    ) -> GameState:
        """Create the initial state: player 0 to act, nothing scored."""
        names = [validate_player_name(name) for name in player_names]
        return GameState(players=PlayerPair.from_names(names), rule_mode=rule_mode)

    @classmethod
    def roll(
        cls,
        state: GameState,
        roll: DiceRoll | Sequence[int] | None = None,
        rng: random.Random | None = None,
    ) -> GameState:
        """Roll for the active player.

        No win check happens here: a roll never raises the banked total.

        Args:
            state: Current state
            roll: Optional pre-determined roll (for testing), as a DiceRoll
                or a plain sequence of faces
            rng: Optional random source used when ``roll`` is omitted

        Returns:
            The next state, or ``state`` itself when the game is over
        """
        if state.game_over:
            logger.debug("Roll ignored: game is over")
            return state

        if roll is None:
            roll = DiceResolver.roll_dice(state.rule_mode, rng)
        elif not isinstance(roll, DiceRoll):
            roll = DiceRoll.from_sequence(roll)

        player = state.active_player
        resolution = DiceResolver.resolve(
            state.rule_mode, roll, state.turn_score, player.total_score
        )

        players = state.players
        if resolution.total_score_resets:
            logger.info(
                "%s rolled double ones and loses %d banked points",
                player.name, player.total_score,
            )
            players = players.replace(state.active_index, replace(player, total_score=0))

        next_state = state.evolve(
            players=players,
            turn_score=max(0, state.turn_score + resolution.turn_score_delta),
            last_roll=roll,
            forced_roll=resolution.must_continue,
        )

        if resolution.is_bust:
            logger.debug("%s busts: %s", player.name, resolution)
            return cls.handover(next_state)

        return next_state

    @classmethod
    def hold(cls, state: GameState) -> GameState:
        """Bank the turn score for the active player.

        Returns:
            The next state, or ``state`` itself when holding is not allowed
        """
        if state.game_over:
            logger.debug("Hold ignored: game is over")
            return state
        if state.turn_score == 0:
            logger.debug("Hold ignored: nothing to bank")
            return state
        if state.forced_roll:
            logger.debug("Hold ignored: matching pair must be rolled again")
            return state

        index = state.active_index
        player = state.active_player
        new_total = player.total_score + state.turn_score
        players = state.players.replace(index, replace(player, total_score=new_total))

        if new_total < state.target_score:
            logger.debug("%s banks %d (total %d)", player.name, state.turn_score, new_total)
            return cls.handover(state.evolve(players=players, turn_score=0))

        opponent_index = PlayerPair.other(index)
        winner = players[index]
        loser = players[opponent_index]
        players = players.replace(
            index, replace(winner, wins=winner.wins + 1)
        ).replace(
            opponent_index, replace(loser, losses=loser.losses + 1)
        )
        finished = state.evolve(
            players=players,
            turn_score=0,
            game_over=True,
            winner_index=index,
        )
        logger.info("%s wins with %d points", finished.winner.name, new_total)
        return finished

    @classmethod
    def handover(cls, state: GameState) -> GameState:
        """Pass control to the other player. Never ends the game."""
        return state.evolve(
            turn_score=0,
            forced_roll=False,
            active_index=PlayerPair.other(state.active_index),
        )

    @classmethod
    def reset(cls, state: GameState, preserve_stats: bool = True) -> GameState:
        """Start a fresh game with the same players and rule mode.

        Args:
            state: Current state
            preserve_stats: Keep win/loss records when True
        """
        players = state.players
        for index, player in enumerate(state.players):
            if preserve_stats:
                cleared = replace(player, total_score=0)
            else:
                cleared = replace(player, total_score=0, wins=0, losses=0)
            players = players.replace(index, cleared)

        logger.info("Game reset (stats %s)", "kept" if preserve_stats else "cleared")
        return GameState(
            players=players,
            rule_mode=state.rule_mode,
            target_score=state.target_score,
        )

    @classmethod
    def set_rule_mode(cls, state: GameState, mode: RuleMode) -> GameState:
        """Switch rule mode; equivalent to a reset that keeps statistics."""
        logger.info("Rule mode set to %s", mode.value)
        return cls.reset(state.evolve(rule_mode=mode, forced_roll=False), preserve_stats=True)

    @classmethod
    def rename_player(cls, state: GameState, index: int, name: str) -> GameState:
        """Change a player's display name."""
        validate_player_index(index)
        renamed = replace(state.players[index], name=validate_player_name(name))
        return state.evolve(players=state.players.replace(index, renamed))
