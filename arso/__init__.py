"""ARSO earthquake and weather observation API."""

__version__ = "1.0.0"
