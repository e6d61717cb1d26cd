"""Preference-weighted ethical alignment scores for companies."""

__version__ = "0.1.0"
