"""Charts of simulation results."""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from typing import List, Optional
from pathlib import Path
import logging


class SimulationVisualizer:
    """Saves win-count and game-length charts for simulated games."""

    def __init__(self, output_dir: str = "plots"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Set up logging
        self.logger = logging.getLogger("SimulationVisualizer")

        sns.set_theme(style="whitegrid")
        self.colors = {
            'wins': '#3498db',
            'best': '#e74c3c',
            'turns': '#2ecc71',
        }

    def _finish(self, name: Optional[str]) -> Optional[Path]:
        if name is None:
            plt.show()
            return None
        path = self.output_dir / name
        plt.savefig(path, bbox_inches='tight', dpi=150)
        plt.close()
        self.logger.info(f"Saved chart to {path}")
        return path

    def plot_win_histogram(self, histogram: np.ndarray, title: str = 'Wins per Player',
                           highlight: Optional[int] = None,
                           name: Optional[str] = 'wins.png') -> Optional[Path]:
        """Bar chart of wins per player, optionally highlighting one player."""
        plt.figure(figsize=(8, 5))
        players = np.arange(len(histogram))
        colors = [self.colors['best'] if p == highlight else self.colors['wins'] for p in players]
        plt.bar(players, np.asarray(histogram), color=colors)
        plt.xticks(players)

        plt.title(title, fontsize=14, pad=20)
        plt.xlabel('Player', fontsize=12)
        plt.ylabel('Games Won', fontsize=12)
        return self._finish(name)

    def plot_turn_distribution(self, results: pd.DataFrame,
                               name: Optional[str] = 'turns.png') -> Optional[Path]:
        """Histogram of game lengths over completed games."""
        plt.figure(figsize=(10, 5))
        turns = results.loc[results['completed'], 'turns']
        sns.histplot(turns, bins=30, color=self.colors['turns'])

        plt.title('Game Length', fontsize=14, pad=20)
        plt.xlabel('Turns', fontsize=12)
        plt.ylabel('Games', fontsize=12)
        return self._finish(name)

    def plot_set_progress(self, histograms: List[np.ndarray],
                          name: Optional[str] = 'sets.png') -> Optional[Path]:
        """Heatmap of wins per player across sets of a strategy search."""
        plt.figure(figsize=(10, max(3, len(histograms) * 0.4)))
        sns.heatmap(np.vstack(histograms), annot=True, fmt='d', cmap='Blues', cbar=False)

        plt.title('Wins per Player by Set', fontsize=14, pad=20)
        plt.xlabel('Player', fontsize=12)
        plt.ylabel('Set', fontsize=12)
        return self._finish(name)
