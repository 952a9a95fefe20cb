"""
Series state representation.
The reducer never mutates a state in place; it works on a copy and returns it.
Includes JSON serialization for the API layer.
"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any

from backend.engine.definitions import Outcome, Play
from backend.engine.errors import InvalidConfiguration


def validate_best_of(best_of: Any) -> int:
    """Return best_of if it is a positive odd integer, else raise InvalidConfiguration."""
    # bool is an int subclass; True would otherwise pass as best-of-1
    if isinstance(best_of, bool) or not isinstance(best_of, int):
        raise InvalidConfiguration(f"best_of must be an integer, got {best_of!r}")
    if best_of <= 0 or best_of % 2 == 0:
        raise InvalidConfiguration(f"best_of must be a positive odd number, got {best_of}")
    return best_of


@dataclass
class RoundRecord:
    """One evaluated round, ties included."""
    player_play: Play
    computer_play: Play
    outcome: Outcome

    def to_dict(self) -> dict[str, Any]:
        return {
            "player_play": self.player_play.value,
            "computer_play": self.computer_play.value,
            "outcome": self.outcome.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoundRecord":
        return cls(
            player_play=Play(data["player_play"]),
            computer_play=Play(data["computer_play"]),
            outcome=Outcome(data["outcome"]),
        )


@dataclass
class SeriesState:
    """Score of a best-of-N series. Only non-tied rounds count toward rounds_played."""
    best_of: int
    rounds_played: int = 0
    player_wins: int = 0
    # Every evaluated round in order, including replayed ties. Does not affect the counters.
    rounds: list[RoundRecord] = field(default_factory=list)

    def __post_init__(self):
        validate_best_of(self.best_of)
        if not 0 <= self.player_wins <= self.rounds_played <= self.best_of:
            raise ValueError(
                f"Invalid series counters: player_wins={self.player_wins}, "
                f"rounds_played={self.rounds_played}, best_of={self.best_of}"
            )

    @property
    def status(self) -> str:
        """'in_progress' or 'complete'."""
        return "complete" if self.rounds_played == self.best_of else "in_progress"

    def copy(self) -> "SeriesState":
        """Return a deep copy of this series state."""
        return deepcopy(self)

    # ===== Serialization Methods =====

    def to_dict(self) -> dict[str, Any]:
        return {
            "best_of": self.best_of,
            "rounds_played": self.rounds_played,
            "player_wins": self.player_wins,
            "status": self.status,
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SeriesState":
        return cls(
            best_of=data["best_of"],
            rounds_played=int(data.get("rounds_played", 0)),
            player_wins=int(data.get("player_wins", 0)),
            rounds=[RoundRecord.from_dict(r) for r in data.get("rounds", [])],
        )


def new_series(best_of: int) -> SeriesState:
    """Start a series in progress with no rounds played."""
    return SeriesState(best_of=validate_best_of(best_of))
