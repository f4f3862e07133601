"""Gale - fetch GitHub release metadata into a JSON file."""

__version__ = "4.5.0"
