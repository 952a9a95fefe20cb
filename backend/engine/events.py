"""
Game events for UI hooks and logging.
Events describe what happened during action processing.
"""

from dataclasses import dataclass
from typing import Any

from backend.engine.definitions import Play


@dataclass
class GameEvent:
    """Base event class. All events have a type and payload."""
    type: str
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        return cls(type=data["type"], payload=data["payload"])


# ===== Event Type Constants =====

# Round events
ROUND_TIED = "round_tied"
ROUND_WON = "round_won"
ROUND_LOST = "round_lost"

# Series events
SERIES_COMPLETED = "series_completed"

ROUND_EVENT_TYPES = (ROUND_TIED, ROUND_WON, ROUND_LOST)


# ===== Messages =====

def tie_message() -> str:
    return "TIE game!"


def win_message(player_play: Play, computer_play: Play) -> str:
    return f"You Win! {player_play.display_name} beats {computer_play.display_name}"


def loss_message(player_play: Play, computer_play: Play) -> str:
    return f"You Lose! {computer_play.display_name} beats {player_play.display_name}"


# ===== Event Factory Functions =====

def _round_payload(player_play: Play | None, computer_play: Play | None) -> dict[str, Any]:
    return {
        "player_play": player_play.value if player_play else None,
        "computer_play": computer_play.value if computer_play else None,
    }


def round_tied(player_play: Play | None = None, computer_play: Play | None = None) -> GameEvent:
    return GameEvent(ROUND_TIED, {
        **_round_payload(player_play, computer_play),
        "message": tie_message(),
    })


def round_won(
    player_play: Play | None,
    computer_play: Play | None,
    rounds_played: int,
    player_wins: int,
) -> GameEvent:
    message = win_message(player_play, computer_play) if player_play and computer_play else "You Win!"
    return GameEvent(ROUND_WON, {
        **_round_payload(player_play, computer_play),
        "message": message,
        "rounds_played": rounds_played,
        "player_wins": player_wins,
    })


def round_lost(
    player_play: Play | None,
    computer_play: Play | None,
    rounds_played: int,
    player_wins: int,
) -> GameEvent:
    message = loss_message(player_play, computer_play) if player_play and computer_play else "You Lose!"
    return GameEvent(ROUND_LOST, {
        **_round_payload(player_play, computer_play),
        "message": message,
        "rounds_played": rounds_played,
        "player_wins": player_wins,
    })


def series_completed(summary: str, is_player_winning: bool) -> GameEvent:
    return GameEvent(SERIES_COMPLETED, {
        "summary": summary,
        "is_player_winning": is_player_winning,
    })
