"""
Pig Dice - Rule Property Tests

Property-based checks of dice resolution and turn transitions.
"""

from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from src.engine.ai_policy import AIPolicy, Decision
from src.engine.base import DiceRoll, Player, RuleMode
from src.engine.dice_resolver import DiceResolver
from src.engine.turn_engine import TurnEngine

faces = st.integers(min_value=1, max_value=6)
modes = st.sampled_from(list(RuleMode))
intents = st.lists(
    st.one_of(
        st.just("hold"),
        st.tuples(faces, faces),
    ),
    max_size=80,
)


def _apply(state, intent):
    if intent == "hold":
        return TurnEngine.hold(state)
    values = intent[:1] if state.rule_mode is RuleMode.SINGLE_DIE else intent
    return TurnEngine.roll(state, DiceRoll(values=values))


@pytest.mark.unit
@given(modes, intents)
def test_hold_never_applies_during_forced_roll(mode, script) -> None:
    state = TurnEngine.new_game(rule_mode=mode)
    for intent in script:
        if state.forced_roll:
            assert TurnEngine.hold(state) is state
        state = _apply(state, intent)


@pytest.mark.unit
@given(modes, intents)
def test_state_invariants_hold_along_any_game(mode, script) -> None:
    state = TurnEngine.new_game(rule_mode=mode)
    for intent in script:
        previous = state
        state = _apply(state, intent)

        assert all(p.total_score >= 0 for p in state.players)
        assert state.game_over == (state.winner_index is not None)
        if mode is RuleMode.SINGLE_DIE:
            assert state.forced_roll is False
        if state.active_index != previous.active_index:
            assert state.active_index == 1 - previous.active_index
            assert state.turn_score == 0
            assert state.forced_roll is False
        if previous.game_over:
            assert state is previous


@pytest.mark.unit
@given(modes, intents)
def test_totals_only_drop_on_double_ones(mode, script) -> None:
    state = TurnEngine.new_game(rule_mode=mode)
    for intent in script:
        previous = state
        state = _apply(state, intent)
        for before, after in zip(previous.players, state.players):
            if after.total_score < before.total_score:
                assert mode is RuleMode.DOUBLE_DIE
                assert state.last_roll.values == (1, 1)
                assert after.total_score == 0


@pytest.mark.unit
@given(faces, st.integers(min_value=0, max_value=200))
def test_single_die_one_always_ends_turn(face, turn_score) -> None:
    result = DiceResolver.resolve(RuleMode.SINGLE_DIE, (face,), turn_score=turn_score)
    assert result.turn_ends is (face == 1)
    assert result.total_score_resets is False
    if face == 1:
        assert turn_score + result.turn_score_delta == 0


@pytest.mark.unit
@given(faces, faces, st.integers(min_value=0, max_value=200))
def test_double_die_pair_forces_only_without_ones(d1, d2, turn_score) -> None:
    result = DiceResolver.resolve(RuleMode.DOUBLE_DIE, (d1, d2), turn_score=turn_score)
    assert result.must_continue is (d1 == d2 and d1 != 1)
    assert result.turn_ends is (1 in (d1, d2))
    assert not (result.must_continue and result.turn_ends)


@pytest.mark.unit
@given(
    st.integers(min_value=0, max_value=99),
    st.integers(min_value=0, max_value=60),
)
def test_policy_rolls_whenever_forced(total, turn_score) -> None:
    state = TurnEngine.new_game(rule_mode=RuleMode.DOUBLE_DIE)
    state = state.evolve(
        players=state.players.replace(1, Player(name="CPU", total_score=total)),
        active_index=1,
        turn_score=turn_score,
        forced_roll=True,
    )
    assert AIPolicy.decide(state) is Decision.ROLL
