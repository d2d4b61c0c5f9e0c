"""Orbital mechanics helpers: two-body dynamics, integrators, reference frames, colour themes, layout and file utilities."""

__version__ = "0.1.0"