"""
The steps of a single Monty Hall game: hiding the prizes, the contestant's first pick,
the host opening a goat door, the stay/switch decision and the final verdict.

Doors are numbered 1, 2 and 3 everywhere in the public API. A game (door assignment) is a
read-only NumPy vector of prize labels where ``game[door - 1]`` is the prize behind ``door``.
Every random step draws from an injected ``numpy.random.Generator`` so that a seeded
generator replays the same games.
"""

from .errors import PreconditionViolation
from .state import DOORS, N_DOORS, PRIZES, Outcome, Prize

from collections.abc import Iterable

import numpy as np


def _rng(rng: np.random.Generator | None) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def _check_door(door, name: str) -> int:
    """Returns ``door`` as a plain int, raising if it is not one of 1, 2 or 3."""
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)) or door not in DOORS:
        raise PreconditionViolation(f"{name} must be one of {DOORS}, got {door!r}.")
    return int(door)


def _as_game(game: Iterable) -> np.ndarray:
    """Validates a door assignment and returns it as a vector of plain prize labels.

    Raises:
        PreconditionViolation: if the game is not exactly three doors hiding one car and two goats.
    """
    try:
        labels = [Prize(label).value for label in game]
    except (TypeError, ValueError) as err:
        raise PreconditionViolation(f"Invalid game {game!r}: {err}") from err

    if len(labels) != N_DOORS:
        raise PreconditionViolation(f"A game has exactly {N_DOORS} doors, got {len(labels)}.")
    if labels.count(Prize.CAR.value) != 1:
        raise PreconditionViolation(f"A game hides exactly one car, got {labels!r}.")
    return np.array(labels)


def create_game(*, rng: np.random.Generator | None = None) -> np.ndarray:
    """Hides two goats and one car behind the three doors, uniformly at random.

    Args:
        rng (np.random.Generator | None, optional): source of randomness. Defaults to a fresh,
            unseeded generator.

    Returns:
        np.ndarray: read-only vector of length 3, a permutation of ``("goat", "goat", "car")``.
    """
    game = _rng(rng).permutation(np.array([prize.value for prize in PRIZES]))
    game.flags.writeable = False
    return game


def select_door(*, rng: np.random.Generator | None = None) -> int:
    """The contestant's first pick, uniform over the doors and blind to the game."""
    return int(_rng(rng).integers(1, N_DOORS + 1))


def open_goat_door(game: Iterable, pick: int, *, rng: np.random.Generator | None = None) -> int:
    """Chooses the door the host opens after the contestant's first pick.

    The host never opens the picked door and always reveals a goat. When the pick hides the
    car both other doors hide goats and one of them is drawn uniformly. When the pick hides a
    goat only one door qualifies and it is returned without consuming randomness.

    Args:
        game (Iterable): door assignment, see :func:`create_game`.
        pick (int): the contestant's first pick (1, 2 or 3).
        rng (np.random.Generator | None, optional): source of randomness. Defaults to a fresh,
            unseeded generator.

    Raises:
        PreconditionViolation: for a malformed game or a pick outside of 1, 2 and 3.

    Returns:
        int: the opened door (1, 2 or 3).
    """
    game = _as_game(game)
    pick = _check_door(pick, "pick")
    doors = np.array(DOORS)
    goats = game != Prize.CAR.value

    if game[pick - 1] == Prize.CAR.value:
        opened = _rng(rng).choice(doors[goats])
    else:
        (opened,) = doors[goats & (doors != pick)]

    return int(opened)


def change_door(stay: bool, opened: int, pick: int) -> int:
    """Applies a strategy to the first pick.

    Args:
        stay (bool): ``True`` keeps the first pick, ``False`` switches to the remaining closed door.
        opened (int): the door opened by the host.
        pick (int): the contestant's first pick.

    Raises:
        PreconditionViolation: for door numbers outside of 1, 2 and 3, or when switching away
            from a pick that is also the opened door.

    Returns:
        int: the final pick.
    """
    opened = _check_door(opened, "opened")
    pick = _check_door(pick, "pick")
    if stay:
        return pick

    if opened == pick:
        raise PreconditionViolation(f"The host cannot open the picked door {pick}.")
    (final,) = (door for door in DOORS if door not in (opened, pick))
    return final


def determine_winner(final: int, game: Iterable) -> Outcome:
    """``Outcome.WIN`` if the final pick hides the car, ``Outcome.LOSE`` otherwise."""
    game = _as_game(game)
    final = _check_door(final, "final")
    return Outcome.WIN if game[final - 1] == Prize.CAR.value else Outcome.LOSE
