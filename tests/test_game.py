from collections import Counter

import numpy as np
import pytest
from scipy.stats import chisquare

from monty_hall.errors import PreconditionViolation
from monty_hall.game import (
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)
from monty_hall.state import Outcome

ALL_GAMES = [
    ["car", "goat", "goat"],
    ["goat", "car", "goat"],
    ["goat", "goat", "car"],
]


def test_create_game_hides_one_car_and_two_goats(rng):
    for _ in range(200):
        game = create_game(rng=rng)
        assert game.shape == (3,)
        assert Counter(game.tolist()) == {"goat": 2, "car": 1}


def test_create_game_places_the_car_everywhere(rng):
    car_doors = Counter(int(np.flatnonzero(create_game(rng=rng) == "car")[0]) + 1 for _ in range(3_000))
    assert set(car_doors) == {1, 2, 3}
    assert chisquare(list(car_doors.values())).pvalue > 0.001


def test_create_game_is_read_only(rng):
    game = create_game(rng=rng)
    with pytest.raises(ValueError):
        game[0] = "car"


def test_create_game_without_rng():
    assert sorted(create_game().tolist()) == ["car", "goat", "goat"]


def test_select_door_is_uniform_over_three_doors(rng):
    picks = Counter(select_door(rng=rng) for _ in range(3_000))
    assert set(picks) == {1, 2, 3}
    assert all(isinstance(pick, int) for pick in picks)
    assert chisquare(list(picks.values())).pvalue > 0.001


@pytest.mark.parametrize("game", ALL_GAMES)
@pytest.mark.parametrize("pick", [1, 2, 3])
def test_host_opens_a_goat_door_other_than_the_pick(game, pick, rng):
    for _ in range(50):
        opened = open_goat_door(game, pick, rng=rng)
        assert opened in (1, 2, 3)
        assert opened != pick
        assert game[opened - 1] == "goat"


@pytest.mark.parametrize(
    "game, pick, expected",
    [
        (["car", "goat", "goat"], 2, 3),
        (["car", "goat", "goat"], 3, 2),
        (["goat", "car", "goat"], 1, 3),
        (["goat", "car", "goat"], 3, 1),
        (["goat", "goat", "car"], 1, 2),
        (["goat", "goat", "car"], 2, 1),
    ],
)
def test_host_is_forced_when_the_pick_hides_a_goat(game, pick, expected, rng):
    state = rng.bit_generator.state
    assert open_goat_door(game, pick, rng=rng) == expected
    # no randomness is consumed in this branch
    assert rng.bit_generator.state == state


def test_host_is_uniform_when_the_pick_hides_the_car(rng):
    opened = Counter(open_goat_door(["car", "goat", "goat"], 1, rng=rng) for _ in range(10_000))
    assert set(opened) == {2, 3}
    assert chisquare([opened[2], opened[3]]).pvalue > 0.001


def test_host_accepts_a_numpy_game(rng):
    game = np.array(["goat", "car", "goat"])
    assert open_goat_door(game, np.int64(1), rng=rng) == 3


@pytest.mark.parametrize("pick", [0, 4, -1, "1", 1.0, True, None])
def test_host_rejects_invalid_picks(pick):
    with pytest.raises(PreconditionViolation):
        open_goat_door(["car", "goat", "goat"], pick)


@pytest.mark.parametrize(
    "game",
    [
        ["car", "goat"],
        ["car", "goat", "goat", "goat"],
        ["car", "car", "goat"],
        ["goat", "goat", "goat"],
        ["car", "goat", "horse"],
        [],
        42,
    ],
)
def test_host_rejects_malformed_games(game):
    with pytest.raises(PreconditionViolation):
        open_goat_door(game, 1)


def test_precondition_violation_is_a_value_error():
    assert issubclass(PreconditionViolation, ValueError)


@pytest.mark.parametrize(
    "opened, pick",
    [(2, 1), (3, 1), (1, 2), (3, 2), (1, 3), (2, 3)],
)
def test_change_door(opened, pick):
    assert change_door(True, opened, pick) == pick
    final = change_door(False, opened, pick)
    assert final in (1, 2, 3)
    assert final not in (opened, pick)


def test_change_door_switch_requires_distinct_doors():
    with pytest.raises(PreconditionViolation):
        change_door(False, 2, 2)


@pytest.mark.parametrize("opened, pick", [(0, 1), (2, 4), ("2", 1)])
def test_change_door_rejects_invalid_doors(opened, pick):
    with pytest.raises(PreconditionViolation):
        change_door(True, opened, pick)


@pytest.mark.parametrize("game", ALL_GAMES)
@pytest.mark.parametrize("final", [1, 2, 3])
def test_determine_winner(game, final):
    expected = Outcome.WIN if game[final - 1] == "car" else Outcome.LOSE
    outcome = determine_winner(final, game)
    assert outcome is expected
    assert outcome == expected.value


def test_determine_winner_rejects_invalid_final():
    with pytest.raises(PreconditionViolation):
        determine_winner(4, ["car", "goat", "goat"])


def test_example_trace_car_picked(rng):
    game = ["car", "goat", "goat"]
    opened = open_goat_door(game, 1, rng=rng)
    assert opened in (2, 3)
    assert determine_winner(change_door(True, opened, 1), game) == "WIN"
    assert determine_winner(change_door(False, opened, 1), game) == "LOSE"

    # with door 2 opened the switch lands on door 3
    assert change_door(False, 2, 1) == 3


def test_example_trace_goat_picked():
    game = ["car", "goat", "goat"]
    opened = open_goat_door(game, 2)
    assert opened == 3
    assert determine_winner(change_door(True, opened, 2), game) == "LOSE"
    assert change_door(False, opened, 2) == 1
    assert determine_winner(change_door(False, opened, 2), game) == "WIN"


@pytest.mark.parametrize("game", [["car", "car", "goat"], ["goat", "goat"], ["car", "goat", "cow"]])
def test_determine_winner_rejects_malformed_games(game):
    with pytest.raises(PreconditionViolation):
        determine_winner(1, game)
