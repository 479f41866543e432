"""A Cluedo game engine: board graph, cards, players and a threaded game loop."""

__version__ = "0.1.0"