"""Batch simulation of Wahoo games between heuristic strategies."""

import concurrent.futures
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

import numpy as np
import pandas as pd
from tqdm import tqdm

from ..game.constants import DEFAULT_NUM_LEGS, DEFAULT_LEG_HEIGHT
from ..game.game_state import Game, GameContext, DecisionFunction
from ..game.topology import Topology
from ..strategy import DEFAULT_PRIORITY, build_strategy, random_priority
from .statistics import win_histogram, best_player, win_uniformity_pvalue, turn_summary

logger = logging.getLogger(__name__)

Priority = List[str]

RESULT_COLUMNS = ['game', 'seed', 'winner', 'turns', 'completed', 'captures']


@dataclass
class SimulationSettings:
    """Parameters for a batch of games."""
    num_legs: int = DEFAULT_NUM_LEGS
    leg_height: int = DEFAULT_LEG_HEIGHT
    num_players: int = 6
    num_games: int = 100
    num_sets: int = 20
    max_turns: int = 5000
    seed: Optional[int] = None
    workers: int = 1

    @property
    def topology(self) -> Topology:
        return Topology(self.num_legs, self.leg_height).validate()


@dataclass
class GameRecord:
    """Outcome of one simulated game."""
    game: int
    seed: Optional[int]
    winner: Optional[int]
    turns: int
    completed: bool
    captures: int


@dataclass
class SetSummary:
    """Outcome of one set of games in a strategy search."""
    set_index: int
    priorities: List[Priority]
    histogram: np.ndarray
    best_player: int
    best_priority: Priority
    p_value: float
    mean_turns: float
    results: pd.DataFrame


def _game_streams(seed: Optional[int]) -> Tuple[np.random.Generator, np.random.Generator]:
    """Independent dice and strategy generators derived from one seed."""
    dice_seq, strategy_seq = np.random.SeedSequence(seed).spawn(2)
    return np.random.default_rng(dice_seq), np.random.default_rng(strategy_seq)


def setup_game(settings: SimulationSettings,
               priorities: Sequence[Priority],
               seed: Optional[int] = None,
               log: Optional[logging.Logger] = None) -> Tuple[Game, DecisionFunction]:
    """Create a game and the decision function that plays every seat.

    Player ``p`` uses the heuristic order ``priorities[p]``.
    """
    if len(priorities) < settings.num_players:
        raise ValueError(f"Need {settings.num_players} priorities, got {len(priorities)}")

    dice_rng, strategy_rng = _game_streams(seed)
    game = Game(settings.topology, settings.num_players, GameContext(rng=dice_rng, logger=log or logger))
    strategies = [build_strategy(priorities[p], strategy_rng) for p in range(settings.num_players)]

    def decide(player, moves, roll, board):
        return strategies[player](player, moves, roll, board)

    return game, decide


def play_game(settings: SimulationSettings,
              priorities: Sequence[Priority],
              seed: Optional[int] = None,
              game_index: int = 0) -> GameRecord:
    """Play one game to the end.

    The game is abandoned (``completed=False``) once it reaches
    ``settings.max_turns`` turns without a winner.
    """
    game, decide = setup_game(settings, priorities, seed)
    captures = 0
    while not game.is_over and game.turn_counter < settings.max_turns:
        result = game.play_turn(decide)
        if result.captured is not None:
            captures += 1

    if not game.is_over:
        logger.warning(f"Game {game_index} stopped after {game.turn_counter} turns without a winner")

    return GameRecord(
        game=game_index,
        seed=seed,
        winner=game.winner,
        turns=game.turn_counter,
        completed=game.is_over,
        captures=captures,
    )


def _play_game_worker(args) -> GameRecord:
    settings, priorities, seed, game_index = args
    return play_game(settings, priorities, seed, game_index)


def run_set(settings: SimulationSettings,
            priorities: Sequence[Priority],
            seed: Optional[int] = None,
            show_progress: bool = False,
            desc: str = "Games") -> pd.DataFrame:
    """Play ``settings.num_games`` games and return one row per game.

    Game ``i`` is seeded with ``seed + i`` so a batch is reproducible from a
    single seed. With ``settings.workers > 1`` games run in separate
    processes; each game owns its board and generators so nothing is shared.
    """
    jobs = [
        (settings, [list(p) for p in priorities], (seed + i) if seed is not None else None, i)
        for i in range(settings.num_games)
    ]
    records: List[GameRecord] = []

    if settings.workers > 1:
        with ProcessPoolExecutor(max_workers=settings.workers) as executor:
            futures = [executor.submit(_play_game_worker, job) for job in jobs]
            for future in tqdm(concurrent.futures.as_completed(futures), total=len(futures),
                               desc=desc, disable=not show_progress):
                records.append(future.result())
    else:
        for job in tqdm(jobs, desc=desc, disable=not show_progress):
            records.append(_play_game_worker(job))

    frame = pd.DataFrame([vars(record) for record in records], columns=RESULT_COLUMNS)
    return frame.sort_values('game').reset_index(drop=True)


def evolve_strategies(settings: SimulationSettings,
                      show_progress: bool = False) -> Tuple[List[SetSummary], Priority]:
    """Search for a good heuristic ordering.

    Every set gives each player a random priority order, except that player 0
    inherits the order of the previous set's best player. Returns the per-set
    summaries and the best order of the final set.
    """
    rng = np.random.default_rng(settings.seed)
    summaries: List[SetSummary] = []
    best: Optional[Priority] = None

    for set_index in range(settings.num_sets):
        priorities = [random_priority(rng) for _ in range(settings.num_players)]
        if best is not None:
            priorities[0] = best
            logger.info(f"best strat: {' '.join(best)}")

        set_seed = None if settings.seed is None else settings.seed + set_index * settings.num_games
        results = run_set(settings, priorities, set_seed, show_progress, desc=f"Set {set_index}")

        histogram = win_histogram(results, settings.num_players)
        winner = best_player(histogram)
        best = priorities[winner]
        summary = SetSummary(
            set_index=set_index,
            priorities=priorities,
            histogram=histogram,
            best_player=winner,
            best_priority=best,
            p_value=win_uniformity_pvalue(histogram),
            mean_turns=turn_summary(results)['mean'],
            results=results,
        )
        logger.info(f"Set {set_index}: wins {histogram.tolist()}, best player {winner}")
        summaries.append(summary)

    return summaries, (best or list(DEFAULT_PRIORITY))


def count_turns(settings: SimulationSettings,
                leg_counts: Iterable[int],
                leg_heights: Iterable[int],
                show_progress: bool = False) -> pd.DataFrame:
    """Average game length for each board size, every seat playing the default order."""
    leg_heights = list(leg_heights)
    rows = []
    for num_legs in leg_counts:
        for leg_height in leg_heights:
            sized = replace(settings, num_legs=num_legs, leg_height=leg_height, num_players=num_legs)
            priorities = [list(DEFAULT_PRIORITY)] * num_legs
            results = run_set(sized, priorities, settings.seed, show_progress,
                              desc=f"{num_legs} legs, height {leg_height}")
            summary = turn_summary(results)
            rows.append({
                'num_legs': num_legs,
                'leg_height': leg_height,
                'mean_turns': summary['mean'],
                'median_turns': summary['median'],
                'stalled': int((~results['completed']).sum()),
            })
            logger.info(f"{num_legs} legs, leg length {leg_height}: {summary['mean']:.1f} turns")
    return pd.DataFrame(rows, columns=['num_legs', 'leg_height', 'mean_turns', 'median_turns', 'stalled'])
