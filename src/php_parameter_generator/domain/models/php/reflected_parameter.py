#!/usr/bin/env python3

"""Raw reflected parameter facts, as handed over by a reflection layer."""

from dataclasses import dataclass
from typing import Any, Protocol

from .parameter_descriptor import NO_DEFAULT


@dataclass(frozen=True)
class DefaultValueResult:
    """Outcome of reading a parameter's default value.

    Either ``resolved`` is True and ``value`` holds the default, or the
    default exists but cannot be captured statically (for instance a
    constant expression only known at call time).
    """

    resolved: bool
    value: Any = None
    reason: str | None = None

    @classmethod
    def of(cls, value: Any) -> "DefaultValueResult":
        return cls(resolved=True, value=value)

    @classmethod
    def unresolved(cls, reason: str | None = None) -> "DefaultValueResult":
        return cls(resolved=False, reason=reason)


UNRESOLVED = DefaultValueResult.unresolved()


class ReflectedParameterFacts(Protocol):
    """What the descriptor factory needs to know about a reflected parameter."""

    name: str
    position: int
    is_optional: bool
    is_variadic: bool
    is_passed_by_reference: bool
    is_array_type: bool
    is_callable_type: bool
    resolved_class_name: str | None

    def get_default_value(self) -> DefaultValueResult: ...


@dataclass(frozen=True)
class ReflectedParameter:
    """Plain-value implementation of reflected parameter facts."""

    name: str
    position: int = 0
    is_optional: bool = False
    is_variadic: bool = False
    is_passed_by_reference: bool = False
    is_array_type: bool = False
    is_callable_type: bool = False
    resolved_class_name: str | None = None
    default_value: Any = NO_DEFAULT
    default_resolvable: bool = True
    visibility: str | None = None

    def get_default_value(self) -> DefaultValueResult:
        """Read the default value without raising.

        Returns:
            Resolved result, or UNRESOLVED when the value is not statically known
        """
        if not self.default_resolvable:
            return DefaultValueResult.unresolved(
                f"Default value of ${self.name} is not statically resolvable"
            )
        if self.default_value is NO_DEFAULT:
            # Optional without a default: variadic parameters end up here
            return DefaultValueResult.unresolved(f"No default value available for ${self.name}")
        return DefaultValueResult.of(self.default_value)
