"""
Simulate command for searching heuristic orderings.
"""

import json
import click
from typing import Optional

from ...game.errors import WahooError
from ..config import get_config
from ...simulation.runner import evolve_strategies
from ...utils.visualization import SimulationVisualizer


@click.command()
@click.option('--sets', type=int, help='Number of sets to play')
@click.option('--games', '-g', type=int, help='Games per set')
@click.option('--seed', '-s', type=int, help='Seed for the whole search')
@click.option('--workers', '-w', type=int, help='Worker processes per set')
@click.option('--plot', 'plot_dir', type=click.Path(file_okay=False),
              help='Directory to save charts into')
@click.option('--format', '-f', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
def simulate(sets: Optional[int], games: Optional[int], seed: Optional[int],
             workers: Optional[int], plot_dir: Optional[str], output_format: str):
    """
    Search for a strong ordering of the heuristics.

    Each set plays a batch of games with every player using a random ordering,
    except player 0, who keeps the ordering of the previous set's winner.

    \b
    Examples:
        wahoo-sim simulate --sets 20 --games 100
        wahoo-sim simulate --sets 5 --games 50 --seed 7 --workers 4 --plot plots/
    """
    config = get_config()
    config.update({'num_sets': sets, 'num_games': games, 'seed': seed, 'workers': workers})
    settings = config.to_settings()
    show_progress = not config.get('quiet', False) and output_format == 'table'

    if output_format == 'table':
        click.echo(f"{settings.num_sets} sets of {settings.num_games} games...")

    try:
        summaries, best = evolve_strategies(settings, show_progress=show_progress)
    except WahooError as e:
        raise click.ClickException(str(e))

    if output_format == 'json':
        click.echo(json.dumps({
            'sets': [
                {
                    'set': s.set_index,
                    'wins': s.histogram.tolist(),
                    'best_player': s.best_player,
                    'best_priority': s.best_priority,
                    'p_value': s.p_value,
                    'mean_turns': s.mean_turns,
                }
                for s in summaries
            ],
            'best_priority': best,
        }, indent=2))
    else:
        for s in summaries:
            click.echo(f"Set {s.set_index}: wins {' '.join(str(n) for n in s.histogram)}  "
                       f"p={s.p_value:.3f}  mean turns {s.mean_turns:.1f}")
        click.echo(click.style(f"Best strategy: {' '.join(best)}", fg="green"))

    if plot_dir and summaries:
        visualizer = SimulationVisualizer(plot_dir)
        visualizer.plot_win_histogram(summaries[-1].histogram, highlight=summaries[-1].best_player)
        visualizer.plot_set_progress([s.histogram for s in summaries])
        visualizer.plot_turn_distribution(summaries[-1].results)
