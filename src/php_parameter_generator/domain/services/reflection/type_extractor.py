"""Type extraction from reflected parameter facts."""

from ...models.php.reflected_parameter import ReflectedParameterFacts


def extract_parameter_type(reflected: ReflectedParameterFacts) -> str | None:
    """Retrieve the type of a reflected parameter (None if none is found).

    The array check wins over the callable check, which wins over a class
    name: a parameter reported as both array-like and class-typed is "array".

    Args:
        reflected: Raw facts from the reflection layer

    Returns:
        "array", "callable", the resolved class name, or None
    """
    if reflected.is_array_type:
        return "array"

    if reflected.is_callable_type:
        return "callable"

    if reflected.resolved_class_name:
        return reflected.resolved_class_name

    return None
