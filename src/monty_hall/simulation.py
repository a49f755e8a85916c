"""simulation.py

Plays Monty Hall games and aggregates their outcomes per strategy.

One game is played once and judged twice: the stay and the switch strategy are evaluated
against the *same* door assignment, first pick and opened door. A batch of ``n`` games
therefore holds ``2 * n`` records, and the win proportion of each strategy converges to the
textbook 1/3 (stay) and 2/3 (switch).

Example:
    >>> from monty_hall.simulation import MontyHallSimulator, SimulationConfig
    >>> batch = MontyHallSimulator(SimulationConfig(n_games=10_000, seed=7)).run()
    >>> {strategy.value: float(p) for strategy, p in batch.win_proportions().items()}
    {'stay': 0.33..., 'switch': 0.66...}
"""
from __future__ import annotations

from .common import has_converged
from .game import change_door, create_game, determine_winner, open_goat_door, select_door
from .state import Outcome, Strategy

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from fractions import Fraction
from itertools import chain

import numpy as np
from loguru import logger


@dataclass(frozen=True, slots=True)
class StrategyOutcomeRecord:
    """How one strategy fared in one game."""

    strategy: Strategy
    outcome: Outcome


@dataclass(frozen=True, slots=True)
class TrialBatch:
    """Ordered outcome records of one or more games, one stay and one switch record per game.

    Attributes:
        records (tuple[StrategyOutcomeRecord, ...]): records in the order they were played.
    """

    records: tuple[StrategyOutcomeRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[StrategyOutcomeRecord]:
        return iter(self.records)

    @property
    def n_games(self) -> int:
        return len(self.records) // len(Strategy)

    def games(self, strategy: Strategy) -> int:
        """Number of records played with ``strategy``."""
        return sum(1 for record in self.records if record.strategy == strategy)

    def wins(self, strategy: Strategy) -> int:
        """Number of records won with ``strategy``."""
        return sum(
            1
            for record in self.records
            if record.strategy == strategy and record.outcome == Outcome.WIN
        )

    def win_proportions(self) -> dict[Strategy, Fraction]:
        """Exact share of wins per strategy.

        Returns:
            dict[Strategy, Fraction]: ``wins / games`` for every strategy present in the
            batch, unrounded. An empty batch yields an empty dict.
        """
        proportions: dict[Strategy, Fraction] = {}
        for strategy in Strategy:
            games = self.games(strategy)
            if games:
                proportions[strategy] = Fraction(self.wins(strategy), games)
        return proportions

    def counts(self) -> np.ndarray:
        """Contingency table of the batch.

        Returns:
            np.ndarray: integer array of shape ``(2, 2)``; rows follow :class:`Strategy`
            (stay, switch) and columns are ``(LOSE, WIN)``.
        """
        columns = (Outcome.LOSE, Outcome.WIN)
        table = np.zeros((len(Strategy), len(columns)), dtype=np.int64)
        for record in self.records:
            table[list(Strategy).index(record.strategy), columns.index(record.outcome)] += 1
        return table

    def to_records(self) -> list[dict[str, str]]:
        """Plain ``{"strategy": ..., "outcome": ...}`` rows, e.g. for a data frame."""
        return [
            {"strategy": record.strategy.value, "outcome": record.outcome.value}
            for record in self.records
        ]


@dataclass(slots=True)
class SimulationConfig:
    """Settings of a batch of games.

    Attributes:
        n_games (int): Number of games to play. Zero or negative plays no game at all.
        seed (int | None): RNG seed for reproducibility. ``None`` disables seeding.
        log_interval (int): Frequency (in games) at which progress is written to the log.
        decimals (int): Rounding applied by the report only, never by the simulation.
    """
    n_games: int = 100
    seed: int | None = None
    log_interval: int = 1_000
    decimals: int = 2

    def __post_init__(self) -> None:
        if isinstance(self.n_games, bool) or not isinstance(self.n_games, (int, np.integer)):
            raise ValueError(f"n_games must be an integer, got {self.n_games!r}.")
        if self.log_interval <= 0:
            raise ValueError(f"log_interval must be positive, got {self.log_interval!r}.")
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals!r}.")


def play_game(*, rng: np.random.Generator | None = None) -> TrialBatch:
    """Plays one game and judges both strategies on it.

    Randomness is drawn in a fixed order: the door assignment, the first pick and, only when
    the first pick hides the car, the host's choice between the two goat doors.

    Args:
        rng (np.random.Generator | None, optional): source of randomness. Defaults to a fresh,
            unseeded generator.

    Returns:
        TrialBatch: exactly two records, stay first and switch second.
    """
    rng = rng if rng is not None else np.random.default_rng()

    game = create_game(rng=rng)
    pick = select_door(rng=rng)
    opened = open_goat_door(game, pick, rng=rng)

    final_stay = change_door(True, opened, pick)
    final_switch = change_door(False, opened, pick)

    return TrialBatch((
        StrategyOutcomeRecord(Strategy.STAY, determine_winner(final_stay, game)),
        StrategyOutcomeRecord(Strategy.SWITCH, determine_winner(final_switch, game)),
    ))


def iter_games(n: int, *, rng: np.random.Generator | None = None) -> Iterator[TrialBatch]:
    """Lazily plays ``n`` independent games on one generator (none if ``n <= 0``)."""
    rng = rng if rng is not None else np.random.default_rng()
    return (play_game(rng=rng) for _ in range(max(int(n), 0)))


class MontyHallSimulator:
    """Runs a batch of games sequentially on a single generator.

    Args:
        config (SimulationConfig): batch settings.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config: SimulationConfig = config if config is not None else SimulationConfig()
        self.log = logger.bind(simulator="MontyHall")

    def _with_progress(self, games: Iterable[TrialBatch]) -> Iterator[TrialBatch]:
        for game_idx, game in enumerate(games, 1):
            if game_idx % self.config.log_interval == 0:
                self.log.debug(
                    "Game {idx:>7d} / {total}",
                    idx=game_idx,
                    total=self.config.n_games,
                )
            yield game

    def run(self, rng: np.random.Generator | None = None) -> TrialBatch:
        """Plays ``config.n_games`` games.

        Args:
            rng (np.random.Generator | None, optional): generator to draw from. Defaults to a
                new generator seeded with ``config.seed``.

        Returns:
            TrialBatch: ``2 * n_games`` records, or an empty batch when ``n_games <= 0``.
        """
        n_games = int(self.config.n_games)
        if n_games < 0:
            self.log.warning("Asked for {n} games, playing none", n=n_games)
        if rng is None:
            rng = np.random.default_rng(self.config.seed)

        games = self._with_progress(iter_games(n_games, rng=rng))
        batch = TrialBatch(tuple(chain.from_iterable(games)))

        if batch:
            proportions = batch.win_proportions()
            self.log.info(
                "Played {n} games | stay: {stay:.3f} | switch: {switch:.3f}",
                n=batch.n_games,
                stay=float(proportions[Strategy.STAY]),
                switch=float(proportions[Strategy.SWITCH]),
            )
            if not has_converged(batch):
                self.log.debug("Win proportions still away from 1/3 and 2/3")
        return batch


def play_n_games(
    n: int = 100,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> TrialBatch:
    """Plays ``n`` games and collects the records of all of them.

    Args:
        n (int, optional): number of games. Zero or negative plays none. Defaults to ``100``.
        rng (np.random.Generator | None, optional): generator to draw from.
        seed (int | None, optional): seed for a new generator, when ``rng`` is not given.

    Raises:
        ValueError: if both ``rng`` and ``seed`` are given.

    Returns:
        TrialBatch: ``2 * n`` records; see :meth:`TrialBatch.win_proportions` for the summary.
    """
    if rng is not None and seed is not None:
        raise ValueError("Pass either rng or seed, not both.")
    return MontyHallSimulator(SimulationConfig(n_games=n, seed=seed)).run(rng=rng)
