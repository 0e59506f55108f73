"""LinguaLeap - Language learning quiz with local progress tracking."""

__version__ = "0.1.0"
