"""A turn-based kitchen game: a grid board with a cook and stations, and a game loop."""

__version__ = "0.1.0"