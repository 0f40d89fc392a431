"""Batch simulation and statistics for Wahoo strategies."""

from .runner import (
    SimulationSettings,
    GameRecord,
    SetSummary,
    setup_game,
    play_game,
    run_set,
    evolve_strategies,
    count_turns,
)
from .statistics import win_histogram, best_player, win_uniformity_pvalue, turn_summary

__all__ = [
    'SimulationSettings',
    'GameRecord',
    'SetSummary',
    'setup_game',
    'play_game',
    'run_set',
    'evolve_strategies',
    'count_turns',
    'win_histogram',
    'best_player',
    'win_uniformity_pvalue',
    'turn_summary',
]
