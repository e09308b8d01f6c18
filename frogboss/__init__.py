"""An arcade boss fight against a frog, with its game logic usable without a window."""

__version__ = "0.1.0"