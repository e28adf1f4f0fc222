#!/usr/bin/env python3

"""Parameter descriptor model for PHP declaration generation."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class _NoDefault:
    """Marker for a parameter without a default clause."""

    _instance: "_NoDefault | None" = None

    def __new__(cls) -> "_NoDefault":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


# None is a real default (PHP null), so absence needs its own marker
NO_DEFAULT: Any = _NoDefault()


class ParameterKind(Enum):
    """Syntactic variant of a parameter declaration."""

    POSITIONAL = "positional"
    VARIADIC = "variadic"
    PROMOTED = "promoted"  # Constructor property promotion


@dataclass(frozen=True)
class ParameterDescriptor:
    """Information about a single function or method parameter.

    A variadic descriptor may still carry a default value; the assembler
    never emits it.
    """

    name: str
    position: int = 0
    type: str | None = None
    passed_by_reference: bool = False
    variadic: bool = False
    default_value: Any = NO_DEFAULT
    default_unresolved: bool = False  # True when NULL stands in for an unknown default
    visibility: str | None = None

    @property
    def has_default(self) -> bool:
        """Check if a default value is stored (an explicit NULL counts)."""
        return self.default_value is not NO_DEFAULT

    @property
    def kind(self) -> ParameterKind:
        """Get the declaration variant of this parameter."""
        if self.visibility:
            return ParameterKind.PROMOTED
        if self.variadic:
            return ParameterKind.VARIADIC
        return ParameterKind.POSITIONAL
