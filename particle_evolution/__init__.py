"""Charged-particle sandbox with attraction, collisions, bonding and a pygame viewer."""

__version__ = "0.1.0"

__all__ = ["components", "simulation", "app"]