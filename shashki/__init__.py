"""Draughts against a neural-network bot trained by a genetic algorithm."""

__version__ = "0.1.0"
__all__ = ["game", "network", "trainer", "view", "session", "cli"]