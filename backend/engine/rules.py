"""
Round rules: input normalization and outcome evaluation.
"""

from backend.engine.definitions import BEATS, Outcome, Play
from backend.engine.errors import InvalidPlay


def normalize_play(text: str) -> str:
    """Trim and lowercase free-text input (button labels, console entry)."""
    return text.strip().lower()


def is_valid_play(text: str) -> bool:
    return normalize_play(text) in {play.value for play in Play}


def parse_play(value: str | Play) -> Play:
    """
    Validate and convert input into a Play.

    Raises:
        InvalidPlay: if the normalized text is not rock, paper or scissors.
    """
    if isinstance(value, Play):
        return value
    if not isinstance(value, str):
        raise InvalidPlay(repr(value))
    try:
        return Play(normalize_play(value))
    except ValueError:
        raise InvalidPlay(value) from None


def evaluate(player_play: str | Play, computer_play: str | Play) -> Outcome:
    """
    Decide a single round.

    Rock beats scissors, scissors beats paper, paper beats rock; identical plays tie.
    Callers are expected to validate player input with parse_play first.
    """
    player = parse_play(player_play)
    computer = parse_play(computer_play)

    if player == computer:
        return Outcome.TIE
    if BEATS[player] == computer:
        return Outcome.PLAYER_WIN
    return Outcome.PLAYER_LOSS
