"""
Console based game of Rock, Paper, Scissors.
Prompts for a play each round until the best-of series is decided.
"""

from typing import Callable

from backend.config import DEFAULT_BEST_OF
from backend.engine.actions import play_round
from backend.engine.errors import InvalidPlay
from backend.engine.queries import get_result, is_complete
from backend.engine.reducer import apply_action
from backend.engine.rules import parse_play
from backend.engine.state import SeriesState, new_series
from backend.engine.utils import ChoiceGenerator

PROMPT = "Select your play (rock, paper, or scissors)"
INVALID_SELECTION = 'Invalid selection. Expected one of: "rock", "paper", or "scissors".'


def run_console_series(
    best_of: int,
    read_play: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
    generator: ChoiceGenerator | None = None,
) -> SeriesState:
    """Play rounds until the series is complete and return the final state."""
    state = new_series(best_of)
    read_play = read_play or input
    generator = generator or ChoiceGenerator()

    while not is_complete(state):
        raw = read_play(f"{PROMPT}: ")
        try:
            player_play = parse_play(raw)
        except InvalidPlay:
            # Invalid input never counts as a round
            write(INVALID_SELECTION)
            continue

        computer_play = generator.next()
        state, events = apply_action(state, play_round(player_play, computer_play))
        for event in events:
            if "message" in event.payload:
                write(event.payload["message"])

    return state


def play_console_game(
    best_of: int = DEFAULT_BEST_OF,
    read_play: Callable[[str], str] | None = None,
    write: Callable[[str], None] = print,
    generator: ChoiceGenerator | None = None,
) -> bool:
    """
    Play a console game of Rock, Paper, Scissors.

    Args:
        best_of: Number of counted rounds; must be a positive odd integer
        read_play: Prompt function returning the player's raw entry
        write: Output function for round messages and the final score
        generator: Source of computer plays

    Returns:
        True if the player has won the series, False if they have lost

    Raises:
        InvalidConfiguration: if best_of is not a positive odd integer
    """
    state = run_console_series(best_of, read_play, write, generator)
    result = get_result(state)
    write(result.message)
    return result.is_player_winning
