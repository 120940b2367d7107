"""Vectors, constellations and an analytic model of Sun, Moon and planet positions."""

__version__ = "0.1.0"
__all__ = ["geometry", "constellations", "series", "planets"]