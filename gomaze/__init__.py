"""A tile-based maze arcade game with apples to collect and ghosts that roam the board."""

__version__ = "0.1.0"