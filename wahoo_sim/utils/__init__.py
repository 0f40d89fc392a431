"""Utility functions and classes."""

from .visualization import SimulationVisualizer

__all__ = ['SimulationVisualizer']
