"""Infrastructure configuration module."""

from .generator_config import DEFAULT_PHP_VERSION, Config, parse_php_version

__all__ = ["Config", "DEFAULT_PHP_VERSION", "parse_php_version"]
