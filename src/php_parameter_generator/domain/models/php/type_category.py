"""Type categories for PHP parameter type hints."""

from enum import Enum


class TypeCategory(Enum):
    """How a parameter type is rendered in a declaration."""

    SIMPLE = "simple"  # No hint at all
    INTERNAL = "internal"  # Bare keyword (array, callable)
    QUALIFIED = "qualified"  # \Fully\Qualified\Name
