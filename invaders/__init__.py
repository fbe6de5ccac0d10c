"""A turn-based Space Invaders game for the terminal: board pieces and the game loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]