"""Crane unloading route planner."""

__version__ = "0.1.0"
