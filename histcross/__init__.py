"""A history crossword puzzle game: JSON level loading, answer checking and a Tk interface."""

__version__ = "1.0.0"