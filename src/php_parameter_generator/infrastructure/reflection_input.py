#!/usr/bin/env python3

"""Reads reflected parameter facts from JSON documents.

Accepted document shapes::

    [{"name": "foo", ...}, ...]
    {"parameters": [{"name": "foo", ...}, ...]}

Each parameter object may carry ``position``, ``optional``, ``variadic``,
``by_reference``, ``array``, ``callable``, ``class``, ``default``,
``default_unresolvable`` and ``visibility``. A default of the form
``{"constant": "PHP_EOL"}`` is a constant reference.
"""

import json
from pathlib import Path
from typing import Any, TextIO

from ..domain.exceptions import InvalidInputError
from ..domain.models.php import NO_DEFAULT, VISIBILITY_KEYWORDS, ReflectedParameter
from ..domain.services.generation import PhpConstant
from .logging import get_logger

logger = get_logger(__name__)

_BOOLEAN_FIELDS = {
    "optional": "is_optional",
    "variadic": "is_variadic",
    "by_reference": "is_passed_by_reference",
    "array": "is_array_type",
    "callable": "is_callable_type",
}


def _convert_default(value: Any) -> Any:
    """Turn constant markers into PhpConstant, recursing through containers."""
    if isinstance(value, dict):
        if set(value) == {"constant"}:
            return PhpConstant(str(value["constant"]))
        return {key: _convert_default(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_convert_default(item) for item in value]
    return value


def parse_reflected_parameter(data: Any, index: int = 0) -> ReflectedParameter:
    """
    Build reflected facts from one JSON parameter object.

    Args:
        data: Decoded JSON object
        index: Position used when the object has none

    Returns:
        ReflectedParameter

    Raises:
        InvalidInputError: If the object is not a parameter description
    """
    if not isinstance(data, dict):
        raise InvalidInputError(f"Parameter #{index} must be an object, got {type(data).__name__}")

    name = data.get("name")
    if not isinstance(name, str):
        raise InvalidInputError(f"Parameter #{index} has no string 'name'")

    position = data.get("position", index)
    if not isinstance(position, int) or isinstance(position, bool):
        raise InvalidInputError(f"Parameter ${name}: 'position' must be an integer")

    flags = {}
    for key, attribute in _BOOLEAN_FIELDS.items():
        value = data.get(key, False)
        if not isinstance(value, bool):
            raise InvalidInputError(f"Parameter ${name}: '{key}' must be a boolean")
        flags[attribute] = value

    class_name = data.get("class")
    if class_name is not None and not isinstance(class_name, str):
        raise InvalidInputError(f"Parameter ${name}: 'class' must be a string")

    visibility = data.get("visibility")
    if visibility is not None and (
        not isinstance(visibility, str) or visibility not in VISIBILITY_KEYWORDS
    ):
        raise InvalidInputError(f"Parameter ${name}: unknown visibility {visibility!r}")

    default_unresolvable = data.get("default_unresolvable", False)
    if not isinstance(default_unresolvable, bool):
        raise InvalidInputError(f"Parameter ${name}: 'default_unresolvable' must be a boolean")

    default_value = _convert_default(data["default"]) if "default" in data else NO_DEFAULT

    return ReflectedParameter(
        name=name,
        position=position,
        resolved_class_name=class_name,
        default_value=default_value,
        default_resolvable=not default_unresolvable,
        visibility=visibility,
        **flags,
    )


def load_reflected_parameters(document: Any) -> list[ReflectedParameter]:
    """
    Build reflected facts from a decoded JSON document.

    Raises:
        InvalidInputError: If the document has an unexpected shape
    """
    if isinstance(document, dict):
        document = document.get("parameters")

    if not isinstance(document, list):
        raise InvalidInputError("Expected a list of parameters or an object with 'parameters'")

    parameters = [parse_reflected_parameter(item, index) for index, item in enumerate(document)]
    logger.debug(f"Loaded {len(parameters)} reflected parameter(s)")
    return parameters


def read_reflected_parameters(source: Path | TextIO) -> list[ReflectedParameter]:
    """
    Read reflected facts from a JSON file or an open text stream.

    Raises:
        InvalidInputError: If the input is not valid JSON or has the wrong shape
    """
    try:
        if isinstance(source, Path):
            text = source.read_text(encoding="utf-8")
        else:
            text = source.read()
        document = json.loads(text)
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Invalid input encoding, expected UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON input: {e}") from e

    return load_reflected_parameters(document)
