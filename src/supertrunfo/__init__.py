"""Super Trunfo: two-card city comparison game."""

__version__ = "0.1.0"
