"""Livestock lifecycle schedules and rule-based farm recommendations."""

__version__ = "0.1.0"
