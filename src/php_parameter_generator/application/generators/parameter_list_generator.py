#!/usr/bin/env python3

"""Parameter list generator orchestrator (Application Layer).

Wires the domain components together from configuration:
- DescriptorFactory: reflected facts to descriptors
- TypeClassifier: type hint prefixes
- DefaultValueRenderer: default value clauses
- DeclarationAssembler: one declaration per parameter
"""

from collections.abc import Iterable

from ...domain.models.php import ParameterDescriptor, ReflectedParameterFacts
from ...domain.services.generation import (
    ArraySyntax,
    DeclarationAssembler,
    DeclarationGenerator,
    DefaultValueRenderer,
    TypeClassifier,
)
from ...domain.services.reflection import DescriptorFactory
from ...infrastructure.config import Config
from ...infrastructure.logging import get_logger, log_timing

logger = get_logger(__name__)

PARAMETER_SEPARATOR = ", "


def generate_parameter_list(
    descriptors: Iterable[ParameterDescriptor],
    assembler: DeclarationGenerator,
) -> str:
    """Join the declarations of several parameters, ordered by position.

    Args:
        descriptors: Parameters of one callable
        assembler: Generator for each declaration

    Returns:
        Comma-separated parameter list ("" for no parameters)
    """
    ordered = sorted(descriptors, key=lambda descriptor: descriptor.position)
    return PARAMETER_SEPARATOR.join(assembler.generate(descriptor) for descriptor in ordered)


class ParameterListGenerator:
    """Generates PHP parameter lists from reflected parameters."""

    def __init__(
        self,
        factory: DescriptorFactory | None = None,
        assembler: DeclarationGenerator | None = None,
    ) -> None:
        self.factory = factory or DescriptorFactory()
        self.assembler = assembler or DeclarationAssembler()

    @classmethod
    def from_config(cls, config: Config) -> "ParameterListGenerator":
        """Create a generator for the configured PHP target."""
        array_syntax = ArraySyntax.SHORT if config.short_arrays else ArraySyntax.LONG
        assembler = DeclarationAssembler(
            type_classifier=TypeClassifier(config.simple_types),
            default_renderer=DefaultValueRenderer(array_syntax),
        )
        logger.debug(
            f"Target PHP {config.php_version} "
            f"(variadic support: {config.supports_variadic}, arrays: {array_syntax.value})"
        )
        return cls(DescriptorFactory(config.supports_variadic), assembler)

    def generate_declaration(self, reflected: ReflectedParameterFacts) -> str:
        """Generate the declaration of a single reflected parameter."""
        return self.assembler.generate(self.factory.from_reflection(reflected))

    @log_timing
    def generate(self, reflected_parameters: Iterable[ReflectedParameterFacts]) -> str:
        """Generate the full parameter list of a reflected callable.

        Args:
            reflected_parameters: Raw facts for each parameter

        Returns:
            Comma-separated parameter list
        """
        descriptors = self.factory.from_reflection_list(reflected_parameters)
        return generate_parameter_list(descriptors, self.assembler)
