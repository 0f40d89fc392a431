"""
Main CLI entry point for the Wahoo simulator.

This module provides the main command-line interface for the wahoo-sim tool.
"""

import logging
import click
from typing import Optional

from .. import __version__
from .config import set_config, SimConfig
from .commands import play, simulate, count_turns


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group(name='wahoo-sim', invoke_without_command=True)
@click.option('--config', '-c',
              help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True,
              help='Log every turn')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.version_option(version=__version__, prog_name='wahoo-sim')
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool, quiet: bool):
    """
    Wahoo strategy simulator

    Plays automated games of Wahoo to compare heuristic move-choice
    strategies.

    Examples:
        wahoo-sim play --seed 42
        wahoo-sim simulate --sets 20 --games 100
        wahoo-sim count-turns -l 4 -l 6 -h 5
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    # Load configuration fresh for every invocation
    cli_config = SimConfig(config_file=config)

    # Override config with command line options
    if verbose:
        cli_config.set('verbose', True)
    if quiet:
        cli_config.set('quiet', True)

    setup_logging(cli_config.get('verbose', False), cli_config.get('quiet', False))
    set_config(cli_config)

    ctx.ensure_object(dict)
    ctx.obj['config'] = cli_config


# Register commands
cli.add_command(play.play)
cli.add_command(simulate.simulate)
cli.add_command(count_turns.count_turns)


@cli.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""
    config_obj = ctx.obj['config']

    click.echo("Current configuration:")
    click.echo("=" * 50)

    for key, value in config_obj.to_dict().items():
        click.echo(f"{key:<25}: {value}")

    if config_obj._config_file:
        click.echo(f"\nLoaded from: {config_obj._config_file}")
    else:
        click.echo("\nUsing default configuration (no config file found)")


if __name__ == '__main__':
    cli()
