#!/usr/bin/env python3

"""PHP parameter domain models."""

from .parameter_descriptor import NO_DEFAULT, ParameterDescriptor, ParameterKind
from .reflected_parameter import (
    UNRESOLVED,
    DefaultValueResult,
    ReflectedParameter,
    ReflectedParameterFacts,
)
from .type_category import TypeCategory
from .type_constants import (
    DEFAULT_SIMPLE_TYPES,
    INTERNAL_TYPES,
    NAMESPACE_SEPARATOR,
    VARIADIC_MIN_PHP_VERSION,
    VISIBILITY_KEYWORDS,
)

__all__ = [
    "DEFAULT_SIMPLE_TYPES",
    "DefaultValueResult",
    "INTERNAL_TYPES",
    "NAMESPACE_SEPARATOR",
    "NO_DEFAULT",
    "ParameterDescriptor",
    "ParameterKind",
    "ReflectedParameter",
    "ReflectedParameterFacts",
    "TypeCategory",
    "UNRESOLVED",
    "VARIADIC_MIN_PHP_VERSION",
    "VISIBILITY_KEYWORDS",
]
