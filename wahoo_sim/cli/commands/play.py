"""
Play command for running a single game.
"""

import click
from typing import Optional

from ...game.errors import WahooError
from ..config import get_config
from ...strategy import DEFAULT_PRIORITY
from ...simulation.runner import setup_game


@click.command()
@click.option('--seed', '-s', type=int, help='Seed for dice and random choices')
@click.option('--legs', type=int, help='Number of board legs')
@click.option('--height', type=int, help='Leg height')
@click.option('--players', '-p', type=int, help='Number of players (at most the number of legs)')
@click.option('--max-turns', type=int, help='Give up after this many turns')
@click.option('--show-board', is_flag=True, help='Print the board after every move')
def play(seed: Optional[int], legs: Optional[int], height: Optional[int],
         players: Optional[int], max_turns: Optional[int], show_board: bool):
    """
    Play one game with every seat using the default heuristic order.

    \b
    Examples:
        wahoo-sim play --seed 42
        wahoo-sim play --legs 4 --height 4 --players 4 --show-board
    """
    config = get_config()
    config.update({'seed': seed, 'num_legs': legs, 'leg_height': height,
                   'num_players': players, 'max_turns': max_turns})
    if legs is not None and players is None:
        config.set('num_players', legs)
    settings = config.to_settings()

    try:
        game, decide = setup_game(settings, [list(DEFAULT_PRIORITY)] * settings.num_players, settings.seed)
        while not game.is_over and game.turn_counter < settings.max_turns:
            result = game.play_turn(decide)
            if show_board and result.move is not None:
                click.echo(f"Turn {result.turn}: player {result.player} rolled {result.roll}, moved {result.move}")
                click.echo(str(game.board))
    except WahooError as e:
        raise click.ClickException(str(e))

    if game.is_over:
        click.echo(click.style(f"Winner: player {game.winner} after {game.turn_counter} turns", fg="green"))
    else:
        click.echo(click.style(f"No winner after {game.turn_counter} turns", fg="yellow"))
    if not show_board:
        click.echo(str(game.board))
