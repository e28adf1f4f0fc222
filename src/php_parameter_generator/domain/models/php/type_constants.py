#!/usr/bin/env python3

"""PHP type-hint constants and keyword sets.

Defines the type categories the declaration generator needs to decide how a
parameter's type is rendered. The simple-type set here is only the default;
the active set always comes from configuration.
"""

# Namespace separator used for fully qualified class names
NAMESPACE_SEPARATOR = "\\"

# Types that never receive a hint in generated signatures
# Scalar hints only exist from PHP 7 on, so the generator emits nothing for these
DEFAULT_SIMPLE_TYPES = frozenset(
    {
        "int",
        "bool",
        "string",
        "float",
        "resource",
        "mixed",
        "object",
    }
)

# Built-in compound types rendered as a bare keyword (compared lower-cased)
INTERNAL_TYPES = frozenset(
    {
        "array",
        "callable",
    }
)

# Constructor property promotion keywords
VISIBILITY_KEYWORDS = frozenset(
    {
        "public",
        "protected",
        "private",
    }
)

# Variadic parameters (...$args) were introduced in PHP 5.6.0
VARIADIC_MIN_PHP_VERSION = (5, 6, 0)

# Declaration markers
REFERENCE_MARKER = "&"
VARIADIC_MARKER = "..."
VARIABLE_SIGIL = "$"
