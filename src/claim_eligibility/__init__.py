"""Heuristic insurance claim eligibility from free-text queries."""

__version__ = "1.0.0"
