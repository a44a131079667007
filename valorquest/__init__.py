"""A turn-based text role-playing game with heroes, areas, enemies, items and save files."""

__version__ = "1.0.0"