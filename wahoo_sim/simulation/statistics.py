"""Summary statistics over batches of simulated games."""

from typing import Dict

import numpy as np
import pandas as pd
from scipy import stats


def win_histogram(results: pd.DataFrame, num_players: int) -> np.ndarray:
    """Number of games won by each player. Unfinished games are ignored."""
    winners = results.loc[results['completed'], 'winner'].astype(int).to_numpy()
    return np.bincount(winners, minlength=num_players)[:num_players]


def best_player(histogram: np.ndarray) -> int:
    """Player with the most wins; ties go to the highest player id."""
    return int(np.flatnonzero(histogram == histogram.max())[-1])


def win_uniformity_pvalue(histogram: np.ndarray) -> float:
    """Chi-square p-value for the hypothesis that every player wins equally often.

    Small values mean the win counts are unlikely to come from equally
    strong players.
    """
    counts = np.asarray(histogram, dtype=float)
    if counts.size < 2 or counts.sum() == 0:
        return float('nan')
    return float(stats.chisquare(counts).pvalue)


def turn_summary(results: pd.DataFrame) -> Dict[str, float]:
    """Mean, median and maximum game length over completed games."""
    turns = results.loc[results['completed'], 'turns']
    if turns.empty:
        return {'games': 0, 'mean': float('nan'), 'median': float('nan'), 'max': float('nan')}
    return {
        'games': int(turns.size),
        'mean': float(turns.mean()),
        'median': float(turns.median()),
        'max': float(turns.max()),
    }
