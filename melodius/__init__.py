"""Note model, tuning table, playback buffering and numerical helpers for melody analysis."""

__version__ = "0.1.0"