#!/usr/bin/env python3

"""PHP parameter declaration assembly.

Builds the declaration fragment for one parameter, for example
``\\App\\Thing &$thing = NULL`` or ``array ...$items``. Parts are always
emitted in the same order:

1. visibility keyword (promoted constructor properties only)
2. type hint prefix
3. reference marker ``&``
4. variadic marker ``...``
5. ``$`` and the parameter name
6. default clause (never for variadic parameters)
"""

from typing import Protocol

from ...models.php.parameter_descriptor import ParameterDescriptor, ParameterKind
from ...models.php.type_constants import (
    REFERENCE_MARKER,
    VARIADIC_MARKER,
    VARIABLE_SIGIL,
)
from .default_value_renderer import DefaultValueRenderer
from .type_classifier import TypeClassifier


class DeclarationGenerator(Protocol):
    """Anything that produces a declaration fragment from a descriptor."""

    def generate(self, descriptor: ParameterDescriptor) -> str: ...


class DeclarationAssembler:
    """Assembles parameter declarations from descriptors."""

    def __init__(
        self,
        type_classifier: TypeClassifier | None = None,
        default_renderer: DefaultValueRenderer | None = None,
    ) -> None:
        """Initialize assembler with its collaborators.

        Args:
            type_classifier: Classifier for type hints (default simple-type set if None)
            default_renderer: Renderer for default clauses (long array syntax if None)
        """
        self.type_classifier = type_classifier or TypeClassifier()
        self.default_renderer = default_renderer or DefaultValueRenderer()

    def generate(self, descriptor: ParameterDescriptor) -> str:
        """Generate the declaration fragment for a parameter.

        Args:
            descriptor: Parameter to declare

        Returns:
            Declaration text, e.g. "array &$bar"
        """
        parts = [
            self._generate_modifier(descriptor),
            self.type_classifier.generate_prefix(descriptor.type),
            REFERENCE_MARKER if descriptor.passed_by_reference else "",
            VARIADIC_MARKER if descriptor.variadic else "",
            VARIABLE_SIGIL + descriptor.name,
        ]

        if not descriptor.variadic:
            parts.append(self.default_renderer.render(descriptor.default_value))

        return "".join(parts)

    @staticmethod
    def _generate_modifier(descriptor: ParameterDescriptor) -> str:
        if descriptor.kind is ParameterKind.PROMOTED:
            return f"{descriptor.visibility} "
        return ""
