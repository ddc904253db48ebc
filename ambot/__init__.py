"""Airline Manager 4 automation bot."""

__version__ = "0.3.0"
