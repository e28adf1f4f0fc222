"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from php_parameter_generator.domain.models.php import ReflectedParameter
from php_parameter_generator.domain.services.generation import (
    DeclarationAssembler,
    DefaultValueRenderer,
    TypeClassifier,
)
from php_parameter_generator.infrastructure.config import Config
from php_parameter_generator.infrastructure.logging import LoggerSetup


@pytest.fixture
def config() -> Config:
    """Default configuration, independent of the environment."""
    return Config()


@pytest.fixture
def type_classifier() -> TypeClassifier:
    """Classifier with the default simple-type set."""
    return TypeClassifier()


@pytest.fixture
def assembler(type_classifier: TypeClassifier) -> DeclarationAssembler:
    """Declaration assembler with default collaborators."""
    return DeclarationAssembler(type_classifier, DefaultValueRenderer())


@pytest.fixture
def make_reflected() -> Callable[..., ReflectedParameter]:
    """
    Factory for reflected parameter facts.

    Usage: make_reflected("foo", is_optional=True, default_value=5)
    """

    def _make(name: str = "param", **facts: Any) -> ReflectedParameter:
        return ReflectedParameter(name=name, **facts)

    return _make


@pytest.fixture
def clean_logging() -> Generator[None, None, None]:
    """Reset the global logging setup around a test."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
