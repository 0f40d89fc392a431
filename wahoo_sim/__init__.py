"""Wahoo board game simulator for comparing heuristic strategies."""

__version__ = "0.1.0"
