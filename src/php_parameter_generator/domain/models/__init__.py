#!/usr/bin/env python3

"""Domain models."""

from . import php

__all__ = ["php"]
