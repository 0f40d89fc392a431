"""
Count-turns command for comparing game length across board sizes.
"""

import click
from typing import Optional, Tuple

from ...game.errors import WahooError
from ..config import get_config
from ...simulation.runner import count_turns as run_count_turns


@click.command(name='count-turns')
@click.option('--legs', '-l', multiple=True, type=int,
              help='Leg counts to try (can be used multiple times)')
@click.option('--heights', '-h', multiple=True, type=int,
              help='Leg heights to try (can be used multiple times)')
@click.option('--games', '-g', type=int, help='Games per board size')
@click.option('--seed', '-s', type=int, help='Seed for the batches')
def count_turns(legs: Tuple[int, ...], heights: Tuple[int, ...],
                games: Optional[int], seed: Optional[int]):
    """
    Average number of turns per game for each board size.

    \b
    Examples:
        wahoo-sim count-turns
        wahoo-sim count-turns -l 4 -l 6 -h 3 -h 5 --games 20
    """
    config = get_config()
    config.update({'num_games': games, 'seed': seed})
    settings = config.to_settings()
    leg_counts = legs or (3, 4, 5, 6, 7)
    leg_heights = heights or (3, 4, 5)

    click.echo(f"Testing leg counts {list(leg_counts)}; sets of {settings.num_games} games...")
    try:
        table = run_count_turns(settings, leg_counts, leg_heights,
                                show_progress=not config.get('quiet', False))
    except WahooError as e:
        raise click.ClickException(str(e))

    for row in table.itertuples(index=False):
        click.echo(f"{row.num_legs} legs, leg length {row.leg_height}: "
                   f"{row.mean_turns:.0f} turns ({row.stalled} stalled)")
