"""
Query functions for UI integration.
These functions help the UI understand the series without mutating state.
"""

from dataclasses import dataclass
from typing import Any

from backend.engine.actions import PLAY_ROUND, RECORD_ROUND, Action
from backend.engine.definitions import Outcome
from backend.engine.errors import InvalidPlay
from backend.engine.rules import parse_play
from backend.engine.state import SeriesState


@dataclass
class ValidationResult:
    """Result of action validation."""
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "error": self.error}


@dataclass
class SeriesResult:
    """Score snapshot; final once the series is complete."""
    player_wins: int
    rounds_played: int
    best_of: int
    is_player_winning: bool
    summary: str  # "player_wins/rounds_played"

    @property
    def message(self) -> str:
        return f"Score: {self.summary}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_wins": self.player_wins,
            "rounds_played": self.rounds_played,
            "best_of": self.best_of,
            "is_player_winning": self.is_player_winning,
            "summary": self.summary,
            "message": self.message,
        }


# ===== Series Queries =====

def is_complete(state: SeriesState) -> bool:
    return state.rounds_played == state.best_of


def is_player_winning(state: SeriesState) -> bool:
    return state.player_wins > state.rounds_played / 2


def get_result(state: SeriesState) -> SeriesResult:
    return SeriesResult(
        player_wins=state.player_wins,
        rounds_played=state.rounds_played,
        best_of=state.best_of,
        is_player_winning=is_player_winning(state),
        summary=f"{state.player_wins}/{state.rounds_played}",
    )


def get_score(state: SeriesState) -> dict[str, Any]:
    """Current score message and whether the player is winning."""
    result = get_result(state)
    return {"message": result.message, "is_player_winning": result.is_player_winning}


def get_rounds_remaining(state: SeriesState) -> int:
    """Counted rounds left before the series completes."""
    return state.best_of - state.rounds_played


# ===== Action Validation =====

def validate_action(state: SeriesState, action: Action) -> ValidationResult:
    """
    Validate an action without applying it.
    Returns ValidationResult with valid=True or valid=False with error message.
    """
    if is_complete(state):
        return ValidationResult(False, f"Series is complete ({get_result(state).summary}).")

    if action.type == PLAY_ROUND:
        try:
            parse_play(action.payload.get("player_play"))
            if action.payload.get("computer_play") is not None:
                parse_play(action.payload["computer_play"])
        except InvalidPlay as e:
            return ValidationResult(False, str(e))
        return ValidationResult(True)

    if action.type == RECORD_ROUND:
        try:
            Outcome(action.payload.get("outcome"))
        except ValueError:
            return ValidationResult(False, f"Unknown outcome: {action.payload.get('outcome')!r}")
        return ValidationResult(True)

    return ValidationResult(False, f"Unknown action type: {action.type}")
