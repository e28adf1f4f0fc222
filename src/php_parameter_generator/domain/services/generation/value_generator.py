#!/usr/bin/env python3

"""PHP literal generation from Python values.

Renders default values (null, booleans, numbers, strings, constants and
nested arrays) as PHP source text. Arrays can be laid out on one line, for
use inside parameter lists, or one item per line.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...exceptions import UnsupportedValueError


class OutputMode(Enum):
    """Layout of generated array literals."""

    SINGLE_LINE = "single_line"
    MULTIPLE_LINE = "multiple_line"


class ArraySyntax(Enum):
    """PHP array literal syntax."""

    LONG = "long"  # array(1, 2)
    SHORT = "short"  # [1, 2]


@dataclass(frozen=True)
class PhpConstant:
    """A constant reference rendered verbatim (PHP_EOL, self::FOO, \\Foo::BAR)."""

    name: str


_ARRAY_DELIMITERS = {
    ArraySyntax.LONG: ("array(", ")"),
    ArraySyntax.SHORT: ("[", "]"),
}

LINE_FEED = "\n"


_DOUBLE_QUOTED_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\f": "\\f",
    "\x1b": "\\e",
}


def has_control_characters(value: str) -> bool:
    """Check whether a string holds characters that break a one-line literal."""
    return any(ord(char) < 0x20 or ord(char) == 0x7F for char in value)


def escape_string(value: str) -> str:
    """Render a string as a single-quoted PHP literal.

    Args:
        value: Raw string

    Returns:
        Quoted literal with backslashes and single quotes escaped
    """
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def escape_double_quoted_string(value: str) -> str:
    """Render a string as a double-quoted PHP literal.

    Control characters become escape sequences, so the literal never spans
    more than one line. ``$`` is escaped to prevent interpolation.
    """
    parts = []
    for char in value:
        if char in _DOUBLE_QUOTED_ESCAPES:
            parts.append(_DOUBLE_QUOTED_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(f"\\x{ord(char):02X}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


class ValueGenerator:
    """Generates the PHP expression for a single value."""

    def __init__(
        self,
        value: Any,
        output_mode: OutputMode = OutputMode.MULTIPLE_LINE,
        array_syntax: ArraySyntax = ArraySyntax.LONG,
        indentation: str = "    ",
        array_depth: int = 0,
    ) -> None:
        self.value = value
        self.output_mode = output_mode
        self.array_syntax = array_syntax
        self.indentation = indentation
        self.array_depth = array_depth

    def with_output_mode(self, output_mode: OutputMode) -> "ValueGenerator":
        """Return a copy rendering in the given output mode."""
        return self._copy(output_mode=output_mode)

    def generate(self) -> str:
        """Generate PHP source for the value.

        Returns:
            PHP expression text

        Raises:
            UnsupportedValueError: If the value has no PHP literal form
        """
        value = self.value

        if isinstance(value, ValueGenerator):
            # Nested generators follow the enclosing layout
            return value._copy(
                output_mode=self.output_mode,
                array_depth=self.array_depth,
            ).generate()
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return self._generate_float(value)
        if isinstance(value, str):
            return self._generate_string(value)
        if isinstance(value, PhpConstant):
            return value.name
        if isinstance(value, dict):
            return self._generate_array(list(value.items()))
        if isinstance(value, (list, tuple)):
            return self._generate_array(list(enumerate(value)))

        raise UnsupportedValueError(value)

    def __str__(self) -> str:
        return self.generate()

    def __repr__(self) -> str:
        return f"ValueGenerator({self.value!r}, output_mode={self.output_mode.name})"

    def _copy(self, **overrides: Any) -> "ValueGenerator":
        settings = {
            "value": self.value,
            "output_mode": self.output_mode,
            "array_syntax": self.array_syntax,
            "indentation": self.indentation,
            "array_depth": self.array_depth,
        }
        settings.update(overrides)
        return ValueGenerator(**settings)

    def _generate_string(self, value: str) -> str:
        # Single-line output must not contain raw line breaks
        if self.output_mode is OutputMode.SINGLE_LINE and has_control_characters(value):
            return escape_double_quoted_string(value)
        return escape_string(value)

    @staticmethod
    def _generate_float(value: float) -> str:
        if math.isnan(value):
            return "NAN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        return repr(value)

    def _generate_array(self, items: list[tuple[Any, Any]]) -> str:
        start, end = _ARRAY_DELIMITERS[self.array_syntax]
        if not items:
            return start + end

        multiline = self.output_mode is OutputMode.MULTIPLE_LINE
        parts = []
        next_index = 0

        for key, item in items:
            rendered = self._copy(value=item, array_depth=self.array_depth + 1).generate()

            if isinstance(key, bool) or not isinstance(key, (int, str)):
                raise UnsupportedValueError(key)

            # Keys matching PHP's implicit numbering are elided
            if isinstance(key, int) and key == next_index:
                parts.append(rendered)
                next_index += 1
                continue
            if isinstance(key, int):
                next_index = max(key + 1, next_index)
                parts.append(f"{key} => {rendered}")
            else:
                parts.append(f"{self._generate_string(key)} => {rendered}")

        if not multiline:
            return start + ", ".join(parts) + end

        inner_indent = self.indentation * (self.array_depth + 1)
        outer_indent = self.indentation * self.array_depth
        separator = "," + LINE_FEED + inner_indent
        return (
            start
            + LINE_FEED
            + inner_indent
            + separator.join(parts)
            + ","
            + LINE_FEED
            + outer_indent
            + end
        )
