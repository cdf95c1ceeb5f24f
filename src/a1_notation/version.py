"""Version information for a1-notation."""

__version__ = "0.1.0"
