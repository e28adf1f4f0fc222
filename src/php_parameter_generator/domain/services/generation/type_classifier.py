#!/usr/bin/env python3

"""Type-hint classification for PHP parameter declarations.

Decides whether a parameter type is emitted as nothing at all, as a bare
keyword, or as a fully qualified class name. Use these methods instead of
inspecting type strings directly so every generated signature agrees.
"""

from collections.abc import Iterable

from ....infrastructure.logging import get_logger
from ...models.php.type_category import TypeCategory
from ...models.php.type_constants import (
    DEFAULT_SIMPLE_TYPES,
    INTERNAL_TYPES,
    NAMESPACE_SEPARATOR,
)

logger = get_logger(__name__)


class TypeClassifier:
    """Classifies parameter type strings and renders their hint prefix."""

    def __init__(self, simple_types: Iterable[str] = DEFAULT_SIMPLE_TYPES) -> None:
        """Initialize classifier with the set of hint-less types.

        Args:
            simple_types: Type names that never get a hint (matched case-sensitively)
        """
        self.simple_types = frozenset(simple_types)

    def is_simple_type(self, type_name: str | None) -> bool:
        """Check if a type needs no hint.

        Examples:
            - None: True
            - "int" (configured as simple): True
            - "Int": False (simple types match exactly)
        """
        return not type_name or type_name in self.simple_types

    @staticmethod
    def is_internal_type(type_name: str | None) -> bool:
        """Check if a type is a built-in compound keyword (array, callable).

        Examples:
            - "array": True
            - "Callable": True
            - "ArrayObject": False
        """
        return bool(type_name) and type_name.lower() in INTERNAL_TYPES

    def classify(self, type_name: str | None) -> TypeCategory:
        """Classify a parameter type.

        Args:
            type_name: Stored type string, or None when untyped

        Returns:
            TypeCategory of the type
        """
        if self.is_simple_type(type_name):
            return TypeCategory.SIMPLE
        if self.is_internal_type(type_name):
            return TypeCategory.INTERNAL
        return TypeCategory.QUALIFIED

    def generate_prefix(self, type_name: str | None) -> str:
        """Render the type hint prefix, including its trailing space.

        Internal keywords keep their original casing. Class names always get
        exactly one leading namespace separator.

        Args:
            type_name: Stored type string, or None when untyped

        Returns:
            Hint prefix ("" for simple types)
        """
        category = self.classify(type_name)

        if category is TypeCategory.SIMPLE or type_name is None:
            return ""
        if category is TypeCategory.INTERNAL:
            return f"{type_name} "

        qualified = NAMESPACE_SEPARATOR + type_name.strip(NAMESPACE_SEPARATOR)
        logger.debug(f"Qualified type hint {type_name!r} as {qualified!r}")
        return f"{qualified} "
