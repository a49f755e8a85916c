from __future__ import annotations

from .state import Strategy

from fractions import Fraction
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .simulation import TrialBatch

# Long-run win proportions: the first pick hides the car one time in three
THEORETICAL_WIN_RATES: dict[Strategy, Fraction] = {
    Strategy.STAY: Fraction(1, 3),
    Strategy.SWITCH: Fraction(2, 3),
}


def has_converged(batch: TrialBatch, tolerance: float = 0.02) -> bool:
    """Return ``True`` if every strategy's win proportion is close to its theoretical value.

    Args:
        batch (TrialBatch): Records of the games played so far.
        tolerance (float, optional): Largest accepted absolute deviation.
            Defaults to ``0.02``.

    Returns:
        bool: ``False`` for an empty batch, otherwise whether both the stay and the switch
        proportion lie within ``tolerance`` of 1/3 and 2/3 respectively.
    """
    proportions = batch.win_proportions()
    if not proportions:
        return False

    converged = all(
        strategy in proportions
        and abs(float(proportions[strategy]) - float(expected)) <= tolerance
        for strategy, expected in THEORETICAL_WIN_RATES.items()
    )
    if converged:
        logger.success(
            "Converged after {n} games (tolerance {tol})", n=batch.n_games, tol=tolerance
        )
    return converged
