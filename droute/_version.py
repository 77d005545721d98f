"""Version information for droute."""

__version__ = "0.1.0"
