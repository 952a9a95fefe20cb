"""
Main game reducer.
Applies actions to series state, enforcing rules and producing new state.
Returns (new_state, events) where events describe what happened.
"""

import logging

from backend.engine.actions import PLAY_ROUND, RECORD_ROUND, Action
from backend.engine.actions import record_round as record_round_action
from backend.engine.definitions import Outcome, Play
from backend.engine.events import (
    GameEvent,
    round_lost,
    round_tied,
    round_won,
    series_completed,
)
from backend.engine.queries import get_result, is_complete
from backend.engine.rules import evaluate, parse_play
from backend.engine.state import RoundRecord, SeriesState, new_series
from backend.engine.utils import ChoiceGenerator

logger = logging.getLogger(__name__)


def _count_outcome(
    state: SeriesState,
    outcome: Outcome,
    player_play: Play | None = None,
    computer_play: Play | None = None,
) -> list[GameEvent]:
    """
    Update counters on a state the caller already owns.
    Ties leave the counters alone; the round is replayed.
    """
    if outcome == Outcome.TIE:
        return [round_tied(player_play, computer_play)]

    if outcome == Outcome.PLAYER_WIN:
        state.player_wins += 1
        state.rounds_played += 1
        events = [round_won(player_play, computer_play, state.rounds_played, state.player_wins)]
    else:
        state.rounds_played += 1
        events = [round_lost(player_play, computer_play, state.rounds_played, state.player_wins)]

    if is_complete(state):
        result = get_result(state)
        events.append(series_completed(result.summary, result.is_player_winning))
    return events


def record_round(state: SeriesState, outcome: Outcome) -> tuple[SeriesState, list[GameEvent]]:
    """
    Record one round outcome against the series.

    Raises:
        ValueError: if the series is already complete or the outcome is unknown
    """
    return apply_action(state, record_round_action(outcome))


def _apply_play_round(
    state: SeriesState,
    payload: dict,
    generator: ChoiceGenerator,
) -> list[GameEvent]:
    player_play = parse_play(payload["player_play"])
    computer_play = payload.get("computer_play")
    computer_play = parse_play(computer_play) if computer_play is not None else generator.next()

    outcome = evaluate(player_play, computer_play)
    state.rounds.append(RoundRecord(player_play, computer_play, outcome))
    return _count_outcome(state, outcome, player_play, computer_play)


def apply_action(
    state: SeriesState,
    action: Action,
    generator: ChoiceGenerator | None = None,
) -> tuple[SeriesState, list[GameEvent]]:
    """
    Apply a single action to the current state, returning new state and events.

    Args:
        state: Current series state (left untouched)
        action: Action to apply
        generator: Source of computer plays when the action does not carry one

    Returns:
        Tuple of (new_state, events) where events describe what happened

    Raises:
        InvalidPlay: if a play in the action is not recognized
        ValueError: if the series is complete or the action type is unknown
    """
    if is_complete(state):
        raise ValueError(f"Series is complete ({get_result(state).summary}); start a new series")

    new_state = state.copy()

    if action.type == PLAY_ROUND:
        events = _apply_play_round(new_state, action.payload, generator or ChoiceGenerator())
    elif action.type == RECORD_ROUND:
        events = _count_outcome(new_state, Outcome(action.payload["outcome"]))
    else:
        raise ValueError(f"Unknown action type: {action.type}")

    logger.debug(
        "Applied %s: %s (%d/%d of %d)",
        action.type,
        [e.type for e in events],
        new_state.player_wins,
        new_state.rounds_played,
        new_state.best_of,
    )
    return new_state, events


def replay_from_actions(
    best_of: int,
    actions: list[Action],
    generator: ChoiceGenerator | None = None,
) -> tuple[SeriesState, list[GameEvent]]:
    """Rebuild a series by applying actions in order from a fresh start."""
    state = new_series(best_of)
    all_events: list[GameEvent] = []
    for action in actions:
        state, events = apply_action(state, action, generator)
        all_events.extend(events)
    return state, all_events
