"""Heuristic field classification."""
