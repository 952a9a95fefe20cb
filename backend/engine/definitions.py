"""
Static definitions for plays and round outcomes.
Plays and outcomes are string enums so they serialize directly into JSON payloads.
"""

from enum import Enum


class Play(str, Enum):
    """One of the three shapes a player can throw."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


class Outcome(str, Enum):
    """Result of a round, from the player's point of view."""
    TIE = "tie"
    PLAYER_WIN = "player_win"
    PLAYER_LOSS = "player_loss"


# Ordered list of valid plays; the choice generator indexes into it.
VALID_PLAYS: list[Play] = [Play.ROCK, Play.PAPER, Play.SCISSORS]

DISPLAY_NAMES: dict[Play, str] = {
    Play.ROCK: "Rock",
    Play.PAPER: "Paper",
    Play.SCISSORS: "Scissors",
}

# play -> the play it beats
BEATS: dict[Play, Play] = {
    Play.ROCK: Play.SCISSORS,
    Play.SCISSORS: Play.PAPER,
    Play.PAPER: Play.ROCK,
}
