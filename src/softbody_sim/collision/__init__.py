# MIT License (see LICENSE)
"""
Boundary handling.

    - CircularArena: box clamp, wall reflection and radial projection for
      the circular arena.
"""
from .arena import CircularArena

__all__ = ["CircularArena"]
