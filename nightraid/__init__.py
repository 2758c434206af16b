"""Game logic for a top-down night-time shooter: maps, pathfinding, entities and session state."""

__version__ = "0.1.0"