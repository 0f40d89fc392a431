"""
Command-line interface for the Wahoo simulator.
"""

from .main import cli

__all__ = ['cli']
