#!/usr/bin/env python3

"""Logging utility functions and decorators."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator logging how long a generation step took, in milliseconds.

    Failures are logged with their elapsed time and re-raised.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function that logs timing
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__
        start = perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = (perf_counter() - start) * 1000
            logger.error(f"{func_name} failed after {elapsed_ms:.3f}ms: {e}")
            raise

        elapsed_ms = (perf_counter() - start) * 1000
        logger.debug(f"{func_name} completed in {elapsed_ms:.3f}ms")
        return result

    return cast("F", wrapper)
