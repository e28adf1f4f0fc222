#!/usr/bin/env python3

"""Default value clause rendering for parameter declarations."""

from typing import Any

from ...models.php.parameter_descriptor import NO_DEFAULT
from .value_generator import ArraySyntax, OutputMode, ValueGenerator


class DefaultValueRenderer:
    """Renders the `` = <value>`` clause of a parameter declaration.

    Parameter lists must stay on one line, so every value is generated in
    single-line mode regardless of how the caller configured it.
    """

    def __init__(self, array_syntax: ArraySyntax = ArraySyntax.LONG) -> None:
        self.array_syntax = array_syntax

    def to_value_generator(self, default_value: Any) -> ValueGenerator:
        """Wrap a raw default in a single-line value generator.

        Args:
            default_value: Raw Python value or an existing ValueGenerator

        Returns:
            ValueGenerator in single-line mode (never the caller's instance)
        """
        if isinstance(default_value, ValueGenerator):
            return default_value.with_output_mode(OutputMode.SINGLE_LINE)
        return ValueGenerator(
            default_value,
            output_mode=OutputMode.SINGLE_LINE,
            array_syntax=self.array_syntax,
        )

    def render(self, default_value: Any = NO_DEFAULT) -> str:
        """Render a default value clause.

        Args:
            default_value: Stored default, or NO_DEFAULT for none

        Returns:
            " = <expr>", or "" when there is no default
        """
        if default_value is NO_DEFAULT:
            return ""

        return f" = {self.to_value_generator(default_value).generate()}"
