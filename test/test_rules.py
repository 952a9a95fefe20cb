"""
Round evaluation and play parsing.
"""

import itertools

import pytest

from backend.engine.definitions import VALID_PLAYS, Outcome, Play
from backend.engine.errors import InvalidPlay
from backend.engine.rules import evaluate, is_valid_play, normalize_play, parse_play


@pytest.mark.parametrize(
    "player, computer, expected",
    [
        (Play.ROCK, Play.SCISSORS, Outcome.PLAYER_WIN),
        (Play.SCISSORS, Play.PAPER, Outcome.PLAYER_WIN),
        (Play.PAPER, Play.ROCK, Outcome.PLAYER_WIN),
        (Play.SCISSORS, Play.ROCK, Outcome.PLAYER_LOSS),
        (Play.PAPER, Play.SCISSORS, Outcome.PLAYER_LOSS),
        (Play.ROCK, Play.PAPER, Outcome.PLAYER_LOSS),
    ],
)
def test_outcome_table(player, computer, expected):
    assert evaluate(player, computer) == expected


def test_identical_plays_tie():
    for play in VALID_PLAYS:
        assert evaluate(play, play) == Outcome.TIE


def test_evaluate_is_antisymmetric():
    for a, b in itertools.permutations(VALID_PLAYS, 2):
        forward = evaluate(a, b)
        backward = evaluate(b, a)
        assert forward != Outcome.TIE
        if forward == Outcome.PLAYER_WIN:
            assert backward == Outcome.PLAYER_LOSS
        else:
            assert backward == Outcome.PLAYER_WIN


def test_evaluate_normalizes_case_and_whitespace():
    assert evaluate("Rock ", "scissors") == Outcome.PLAYER_WIN
    assert evaluate("  PAPER", "Scissors\n") == Outcome.PLAYER_LOSS


def test_parse_play():
    assert parse_play("rock") is Play.ROCK
    assert parse_play(" Scissors ") is Play.SCISSORS
    assert parse_play(Play.PAPER) is Play.PAPER
    assert normalize_play("  PaPeR\t") == "paper"


@pytest.mark.parametrize("text", ["lizard", "", "rocks", "spock"])
def test_unknown_play_is_rejected_before_evaluation(text):
    assert not is_valid_play(text)
    with pytest.raises(InvalidPlay) as excinfo:
        parse_play(text)
    assert excinfo.value.text == text


def test_non_string_play_is_rejected():
    with pytest.raises(InvalidPlay):
        parse_play(None)


def test_display_names():
    assert [p.display_name for p in VALID_PLAYS] == ["Rock", "Paper", "Scissors"]
