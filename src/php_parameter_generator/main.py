"""Main entry point for the PHP parameter generator."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application.generators import ParameterListGenerator
from .domain.exceptions import ParameterGenerationError
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger
from .infrastructure.reflection_input import read_reflected_parameters


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="php-param-gen",
        description="Generate PHP parameter lists from reflected parameter facts (JSON)",
        epilog="""
Examples:
  # Generate from a file
  php-param-gen parameters.json

  # Read from stdin
  echo '[{"name": "items", "array": true, "by_reference": true}]' | php-param-gen

  # Target PHP 5.5 (no variadic parameters)
  php-param-gen parameters.json --php-version 5.5.0

  # Emit scalar type hints (PHP 7+); only resource and mixed stay unhinted
  php-param-gen parameters.json --simple-types resource,mixed
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input_file",
        type=Path,
        nargs="?",
        help="JSON file with reflected parameters (default: stdin)",
    )
    parser.add_argument(
        "--php-version",
        metavar="VERSION",
        help="Target PHP version (default: 5.6.0 or PHPGEN_PHP_VERSION)",
    )
    parser.add_argument(
        "--simple-types",
        metavar="TYPES",
        help="Comma-separated type names emitted without a hint",
    )
    parser.add_argument(
        "--short-arrays",
        action="store_true",
        default=None,
        help="Use [] instead of array() for array defaults",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write debug logs to this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point: print the parameter list for the given input."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            php_version=args.php_version,
            simple_types=args.simple_types,
            short_arrays=args.short_arrays,
            verbose=args.verbose,
            log_dir=args.log_dir,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"Input: {args.input_file or '<stdin>'}")

    try:
        if args.input_file is not None:
            reflected = read_reflected_parameters(args.input_file)
        else:
            reflected = read_reflected_parameters(sys.stdin)

        generator = ParameterListGenerator.from_config(config)
        parameter_list = generator.generate(reflected)
    except FileNotFoundError:
        logger.error(f"Input file not found: {args.input_file}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read input file {args.input_file}: {e}")
        sys.exit(1)
    except ParameterGenerationError as e:
        logger.error(f"Generation failed: {e}")
        sys.exit(1)

    print(parameter_list)
    logger.debug(f"Generated {len(reflected)} parameter declaration(s)")
    sys.exit(0)


if __name__ == "__main__":
    main()
