"""Game logic pieces for a tile-map side-scrolling platformer."""

__version__ = "0.1.0"