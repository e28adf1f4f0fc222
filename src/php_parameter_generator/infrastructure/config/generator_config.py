"""Configuration management for the PHP parameter generator."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ...domain.models.php.type_constants import DEFAULT_SIMPLE_TYPES, VARIADIC_MIN_PHP_VERSION

DEFAULT_PHP_VERSION = "5.6.0"


def parse_php_version(version: str) -> tuple[int, int, int]:
    """
    Parse a PHP version string into a comparable tuple.

    Missing minor or patch parts count as zero; suffixes such as "-dev"
    or "RC1" on the patch part are ignored.

    Args:
        version: Version string, e.g. "5.6.0" or "7.4"

    Returns:
        (major, minor, patch) tuple

    Raises:
        ValueError: If the version string is malformed
    """
    parts = version.strip().split(".")
    if not parts[0] or len(parts) > 3:
        raise ValueError(f"Invalid PHP version: {version!r}")

    numbers = []
    for part in parts:
        digits = ""
        for char in part:
            if not char.isdigit():
                break
            digits += char
        if not digits:
            raise ValueError(f"Invalid PHP version: {version!r}")
        numbers.append(int(digits))

    while len(numbers) < 3:
        numbers.append(0)
    return numbers[0], numbers[1], numbers[2]


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def _parse_type_list(value: str) -> frozenset[str]:
    return frozenset(item.strip() for item in value.split(",") if item.strip())


@dataclass
class Config:
    """Configuration for the PHP parameter generator."""

    php_version: str = DEFAULT_PHP_VERSION
    simple_types: frozenset[str] = field(default_factory=lambda: DEFAULT_SIMPLE_TYPES)
    short_arrays: bool = False
    verbose: bool = False
    log_dir: Path | None = None

    @property
    def supports_variadic(self) -> bool:
        """Whether the target PHP version has variadic (...$args) parameters."""
        return parse_php_version(self.php_version) >= VARIADIC_MIN_PHP_VERSION

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        config = cls()

        php_version = os.getenv("PHPGEN_PHP_VERSION")
        if php_version:
            config.php_version = php_version.strip()

        simple_types = os.getenv("PHPGEN_SIMPLE_TYPES")
        if simple_types is not None:
            config.simple_types = _parse_type_list(simple_types)

        short_arrays = os.getenv("PHPGEN_SHORT_ARRAYS")
        if short_arrays is not None:
            config.short_arrays = _parse_bool(short_arrays)

        config.verbose = _parse_bool(os.getenv("VERBOSE", "false"))

        log_dir = os.getenv("LOG_DIR")
        if log_dir:
            config.log_dir = Path(log_dir)

        return config

    @classmethod
    def from_args(
        cls,
        php_version: Optional[str] = None,
        simple_types: Optional[str] = None,
        short_arrays: Optional[bool] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            php_version: Target PHP version (overrides env)
            simple_types: Comma-separated simple type names (overrides env)
            short_arrays: Use [] array syntax (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)
            env_path: Optional path to .env file

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if php_version is not None:
            config.php_version = php_version
        if simple_types is not None:
            config.simple_types = _parse_type_list(simple_types)
        if short_arrays is not None:
            config.short_arrays = short_arrays
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        parse_php_version(self.php_version)

        for type_name in self.simple_types:
            if not type_name or type_name != type_name.strip():
                raise ValueError(f"Invalid simple type name: {type_name!r}")

    def ensure_log_dir(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
