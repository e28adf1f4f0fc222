"""Errors raised while generating PHP parameter declarations."""


class ParameterGenerationError(ValueError):
    """Base class for generation failures."""


class UnsupportedValueError(ParameterGenerationError):
    """A Python value has no PHP literal representation."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Type '{type(value).__name__}' is unknown or cannot be used as a default value"
        )


class InvalidInputError(ParameterGenerationError):
    """Raw parameter facts could not be read."""
