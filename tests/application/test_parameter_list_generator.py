"""Tests for the parameter list orchestrator."""

import pytest

from php_parameter_generator.application.generators import (
    ParameterListGenerator,
    generate_parameter_list,
)
from php_parameter_generator.domain.models.php import ParameterDescriptor
from php_parameter_generator.infrastructure.config import Config


@pytest.mark.unit
class TestGenerateParameterList:
    """Test joining of declaration fragments."""

    def test_empty(self, assembler):
        assert generate_parameter_list([], assembler) == ""

    def test_joined_in_position_order(self, assembler):
        descriptors = [
            ParameterDescriptor(name="c", position=2, variadic=True),
            ParameterDescriptor(name="a", position=0, type="array"),
            ParameterDescriptor(name="b", position=1, default_value=5),
        ]
        assert generate_parameter_list(descriptors, assembler) == "array $a, $b = 5, ...$c"


@pytest.mark.unit
class TestParameterListGenerator:
    """Test suite for ParameterListGenerator class."""

    def test_generate_from_reflection(self, make_reflected):
        generator = ParameterListGenerator()
        reflected = [
            make_reflected("bar", position=0, is_array_type=True, is_passed_by_reference=True),
            make_reflected(
                "baz",
                position=1,
                resolved_class_name="App\\Thing",
                is_optional=True,
                default_value=None,
            ),
            make_reflected("args", position=2, is_optional=True, is_variadic=True),
        ]

        assert generator.generate(reflected) == "array &$bar, \\App\\Thing $baz = NULL, ...$args"

    def test_generate_declaration(self, make_reflected):
        generator = ParameterListGenerator()
        reflected = make_reflected("x", resolved_class_name="int", is_optional=True, default_value=1)

        assert generator.generate_declaration(reflected) == "$x = 1"

    def test_from_config_short_arrays(self, make_reflected):
        generator = ParameterListGenerator.from_config(Config(short_arrays=True))
        reflected = make_reflected("opts", is_array_type=True, is_optional=True, default_value=[1])

        assert generator.generate_declaration(reflected) == "array $opts = [1]"

    def test_from_config_without_variadic_support(self, make_reflected):
        generator = ParameterListGenerator.from_config(Config(php_version="5.5.0"))
        reflected = make_reflected("args", is_variadic=True)

        assert generator.generate_declaration(reflected) == "$args"

    def test_from_config_simple_types(self, make_reflected):
        generator = ParameterListGenerator.from_config(Config(simple_types=frozenset({"mixed"})))
        reflected = make_reflected("count", resolved_class_name="int")

        assert generator.generate_declaration(reflected) == "\\int $count"
