from enum import Enum

DOORS: tuple[int, ...] = (1, 2, 3)
N_DOORS = len(DOORS)


class Prize(str, Enum):
    """What hides behind a door."""

    GOAT = "goat"
    CAR = "car"


class Strategy(str, Enum):
    """Final decision of the contestant once the host has opened a door."""

    STAY = "stay"  # Keep the initial pick
    SWITCH = "switch"  # Take the other closed door


class Outcome(str, Enum):
    """Result of a final pick."""

    WIN = "WIN"
    LOSE = "LOSE"


# Prizes shuffled onto the doors at the start of every game
PRIZES: tuple[Prize, ...] = (Prize.GOAT, Prize.GOAT, Prize.CAR)
