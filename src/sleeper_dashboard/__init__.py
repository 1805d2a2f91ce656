"""Sleeper Dashboard - fantasy football league dashboard and analytics."""

__version__ = "0.1.0"
