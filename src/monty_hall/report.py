"""report.py

Text report of a batch of Monty Hall games: the row proportions of the strategy/outcome
table, rounded for display.

Usage:
    batch = play_n_games(1_000)
    print(render_table(batch))      # rounded to 2 decimals
"""
from .simulation import TrialBatch
from .state import Outcome, Strategy

import numpy as np

_COLUMNS = (Outcome.LOSE, Outcome.WIN)


def proportion_table(batch: TrialBatch, decimals: int = 2) -> np.ndarray:
    """Share of LOSE and WIN per strategy, rounded to ``decimals``.

    Args:
        batch (TrialBatch): played games.
        decimals (int, optional): rounding of every cell. Defaults to ``2``.

    Returns:
        np.ndarray: float array of shape ``(2, 2)``, rows stay/switch and columns LOSE/WIN.
        Rows of a strategy without any record are ``nan``.
    """
    counts = batch.counts().astype(float)
    totals = counts.sum(axis=1, keepdims=True)
    with np.errstate(invalid="ignore", divide="ignore"):
        proportions = counts / totals
    return np.round(proportions, decimals)


def render_table(batch: TrialBatch, decimals: int = 2) -> str:
    """Renders :func:`proportion_table` as aligned plain text."""
    if not batch:
        return "No games played."

    table = proportion_table(batch, decimals)
    width = max(len(column.value) for column in _COLUMNS) + decimals + 2
    header = f"{'strategy':<10}" + "".join(f"{column.value:>{width}}" for column in _COLUMNS)
    rows = [
        f"{strategy.value:<10}" + "".join(f"{cell:>{width}.{decimals}f}" for cell in row)
        for strategy, row in zip(Strategy, table)
    ]
    return "\n".join([header, *rows])
