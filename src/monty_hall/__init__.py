"""
A simulation of the Monty Hall game show puzzle comparing the stay and switch strategies.
"""

from .common import THEORETICAL_WIN_RATES, has_converged
from .errors import PreconditionViolation
from .game import change_door, create_game, determine_winner, open_goat_door, select_door
from .simulation import (
    MontyHallSimulator,
    SimulationConfig,
    StrategyOutcomeRecord,
    TrialBatch,
    iter_games,
    play_game,
    play_n_games,
)
from .state import Outcome, Prize, Strategy

__all__ = [
    "MontyHallSimulator",
    "Outcome",
    "PreconditionViolation",
    "Prize",
    "SimulationConfig",
    "THEORETICAL_WIN_RATES",
    "Strategy",
    "StrategyOutcomeRecord",
    "TrialBatch",
    "change_door",
    "create_game",
    "determine_winner",
    "has_converged",
    "iter_games",
    "open_goat_door",
    "play_game",
    "play_n_games",
    "select_door",
]
