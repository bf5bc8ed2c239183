"""Game rules for a grid-based wizard tower-defense: vectors, tile maps, effects, waves, enemies, bullets, the player and menu flow."""

__version__ = "0.1.0"