"""A tile-breaking side-scrolling arcade game with its own GIF decoder, animation player and collision shapes."""

__version__ = "0.1.0"