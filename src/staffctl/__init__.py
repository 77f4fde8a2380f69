"""staffctl — menu-driven staff and department manager."""

__version__ = "0.1.0"
