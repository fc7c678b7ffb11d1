"""A two-paddle Pong game with keyboard players and simple bots."""

__version__ = "1.0.0"

__all__ = ["controller", "game", "match", "objects", "render", "vector"]