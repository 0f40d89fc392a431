"""
Command modules for the Wahoo simulator CLI.
"""

from . import play
from . import simulate
from . import count_turns

__all__ = ['play', 'simulate', 'count_turns']
