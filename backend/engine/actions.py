"""
Action definitions for the game.
Actions are immutable, deterministic instructions applied by the reducer.
"""

from dataclasses import dataclass

from backend.engine.definitions import Outcome, Play

PLAY_ROUND = "play_round"
RECORD_ROUND = "record_round"


@dataclass(frozen=True)
class Action:
    """Base action class. All actions have a type and payload."""
    type: str  # "play_round" or "record_round"
    payload: dict  # Action-specific data


def play_round(player_play: str | Play, computer_play: str | Play | None = None) -> Action:
    """
    Play a round against the computer.
    When computer_play is omitted the reducer draws one from its choice generator.
    Example: play_round("rock") or play_round("rock", "scissors")
    """
    payload = {"player_play": player_play}
    if computer_play is not None:
        payload["computer_play"] = computer_play
    return Action(type=PLAY_ROUND, payload=payload)


def record_round(outcome: Outcome) -> Action:
    """Record an already decided outcome against the series."""
    return Action(type=RECORD_ROUND, payload={"outcome": outcome})
