"""Small solutions to classic string, number and collection puzzles."""

__version__ = "0.1.0"