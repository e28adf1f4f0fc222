#!/usr/bin/env python3

"""Builds parameter descriptors from reflected parameter facts."""

from collections.abc import Iterable
from typing import Any

from ....infrastructure.logging import get_logger, log_timing
from ...models.php.parameter_descriptor import NO_DEFAULT, ParameterDescriptor
from ...models.php.reflected_parameter import ReflectedParameterFacts
from .type_extractor import extract_parameter_type

logger = get_logger(__name__)


class DescriptorFactory:
    """Creates ParameterDescriptor objects from a reflection layer's output.

    The factory performs no validation: facts are copied through as given.
    """

    def __init__(self, supports_variadic: bool = True) -> None:
        """Initialize factory with target runtime capabilities.

        Args:
            supports_variadic: Whether the target PHP version has ...$args syntax
        """
        self.supports_variadic = supports_variadic

    def from_reflection(self, reflected: ReflectedParameterFacts) -> ParameterDescriptor:
        """Build a descriptor for one reflected parameter.

        Args:
            reflected: Raw parameter facts

        Returns:
            Populated ParameterDescriptor
        """
        default_value, default_unresolved = self._extract_default_value(reflected)

        return ParameterDescriptor(
            name=reflected.name,
            position=reflected.position,
            type=extract_parameter_type(reflected),
            passed_by_reference=reflected.is_passed_by_reference,
            variadic=self.supports_variadic and reflected.is_variadic,
            default_value=default_value,
            default_unresolved=default_unresolved,
            visibility=getattr(reflected, "visibility", None),
        )

    @log_timing
    def from_reflection_list(
        self, reflected_parameters: Iterable[ReflectedParameterFacts]
    ) -> list[ParameterDescriptor]:
        """Build descriptors for every parameter of a callable."""
        return [self.from_reflection(reflected) for reflected in reflected_parameters]

    @staticmethod
    def _extract_default_value(reflected: ReflectedParameterFacts) -> tuple[Any, bool]:
        """Read the default value of an optional parameter.

        A default that cannot be resolved statically becomes an explicit NULL,
        which keeps generated signatures callable the same way.

        Returns:
            Tuple of (default value or NO_DEFAULT, whether NULL was substituted)
        """
        if not reflected.is_optional:
            return NO_DEFAULT, False

        result = reflected.get_default_value()
        if result.resolved:
            return result.value, False

        logger.debug(
            f"Substituting NULL default for ${reflected.name}: "
            f"{result.reason or 'default value not resolvable'}"
        )
        return None, True
