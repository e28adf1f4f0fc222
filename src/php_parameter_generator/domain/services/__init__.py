#!/usr/bin/env python3

"""Domain services layer."""

from . import generation, reflection

__all__ = [
    "generation",
    "reflection",
]
