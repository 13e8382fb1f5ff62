"""Building blocks for 2D games: math, timing, images, sprite data and an SPSC queue."""

__version__ = "0.1.0"