"""
Utility functions for the game engine: random plays and state printing.
"""

import itertools
import math
import random
from typing import Callable

from backend.engine import PLAY_COUNT
from backend.engine.definitions import VALID_PLAYS, Play
from backend.engine.state import SeriesState


def get_random_int(maximum: int, source: Callable[[], float] = random.random) -> int:
    """
    Scale a uniform [0, 1) source to an integer in [0, maximum).

    Args:
        maximum: Exclusive upper bound
        source: Uniform random source; defaults to random.random
    """
    value = math.floor(source() * maximum)
    # Guard against sources that return exactly 1.0
    return min(value, maximum - 1)


class ChoiceGenerator:
    """Produces computer plays uniformly at random from the three valid plays."""

    def __init__(self, source: Callable[[], float] | None = None, seed: int | None = None):
        """
        Args:
            source: Uniform [0, 1) random source. Tests pass a fixed sequence here.
            seed: Optional seed for reproducibility when no source is given
        """
        if source is None:
            source = random.Random(seed).random
        self._source = source

    def next(self) -> Play:
        return VALID_PLAYS[get_random_int(PLAY_COUNT, self._source)]

    def __iter__(self):
        return self

    def __next__(self) -> Play:
        return self.next()


def fixed_source(values: list[float]) -> Callable[[], float]:
    """Return a source that yields the given values in order, cycling when exhausted."""
    return itertools.cycle(values).__next__


def print_series_state(state: SeriesState, verbose: bool = False):
    """
    Pretty-print the current series state.

    Args:
        state: Current series state
        verbose: If True, list every evaluated round, ties included
    """
    print(f"\n{'='*40}")
    print(f"Best of {state.best_of} | Status: {state.status}")
    print(f"Score: {state.player_wins}/{state.rounds_played}")
    print(f"{'='*40}")

    if verbose:
        for number, record in enumerate(state.rounds, start=1):
            print(
                f"  {number:>2}. {record.player_play.display_name} vs "
                f"{record.computer_play.display_name}: {record.outcome.value}")
