"""
Computer play generation.
"""

from collections import Counter

from backend.engine.definitions import VALID_PLAYS, Play
from backend.engine.utils import ChoiceGenerator, fixed_source, get_random_int


def test_fixed_source_is_deterministic():
    generator = ChoiceGenerator(fixed_source([0.0, 0.5, 0.99, 0.34]))
    plays = [generator.next() for _ in range(5)]
    assert plays == [Play.ROCK, Play.PAPER, Play.SCISSORS, Play.PAPER, Play.ROCK]


def test_get_random_int_scales_source():
    assert get_random_int(3, lambda: 0.0) == 0
    assert get_random_int(3, lambda: 0.3333) == 0
    assert get_random_int(3, lambda: 0.3334) == 1
    assert get_random_int(3, lambda: 0.9999) == 2
    # A source returning exactly 1.0 stays in range
    assert get_random_int(3, lambda: 1.0) == 2


def test_seeded_generators_agree():
    first = ChoiceGenerator(seed=7)
    second = ChoiceGenerator(seed=7)
    assert [first.next() for _ in range(20)] == [second.next() for _ in range(20)]


def test_plays_are_roughly_uniform():
    generator = ChoiceGenerator(seed=1234)
    draws = 30000
    counts = Counter(next(generator) for _ in range(draws))

    assert set(counts) == set(VALID_PLAYS)
    expected = draws / 3
    for play in VALID_PLAYS:
        assert abs(counts[play] - expected) < expected * 0.05
