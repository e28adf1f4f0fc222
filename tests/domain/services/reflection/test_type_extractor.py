"""Tests for type extraction precedence."""

import pytest

from php_parameter_generator.domain.services.reflection import extract_parameter_type


@pytest.mark.unit
class TestExtractParameterType:
    """Array beats callable beats class name."""

    def test_no_type(self, make_reflected):
        assert extract_parameter_type(make_reflected()) is None

    def test_array(self, make_reflected):
        assert extract_parameter_type(make_reflected(is_array_type=True)) == "array"

    def test_callable(self, make_reflected):
        assert extract_parameter_type(make_reflected(is_callable_type=True)) == "callable"

    def test_class_name(self, make_reflected):
        reflected = make_reflected(resolved_class_name="App\\Thing")
        assert extract_parameter_type(reflected) == "App\\Thing"

    def test_array_wins_over_class_name(self, make_reflected):
        reflected = make_reflected(is_array_type=True, resolved_class_name="ArrayObject")
        assert extract_parameter_type(reflected) == "array"

    def test_array_wins_over_callable(self, make_reflected):
        reflected = make_reflected(is_array_type=True, is_callable_type=True)
        assert extract_parameter_type(reflected) == "array"

    def test_callable_wins_over_class_name(self, make_reflected):
        reflected = make_reflected(is_callable_type=True, resolved_class_name="Closure")
        assert extract_parameter_type(reflected) == "callable"

    def test_empty_class_name_is_no_type(self, make_reflected):
        assert extract_parameter_type(make_reflected(resolved_class_name="")) is None
