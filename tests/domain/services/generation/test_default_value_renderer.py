"""Tests for default value clause rendering."""

import pytest

from php_parameter_generator.domain.models.php import NO_DEFAULT
from php_parameter_generator.domain.services.generation import (
    ArraySyntax,
    DefaultValueRenderer,
    OutputMode,
    PhpConstant,
    ValueGenerator,
)


@pytest.fixture
def renderer() -> DefaultValueRenderer:
    return DefaultValueRenderer()


@pytest.mark.unit
class TestDefaultValueRenderer:
    """Test suite for DefaultValueRenderer class."""

    def test_absent_default_renders_nothing(self, renderer):
        assert renderer.render(NO_DEFAULT) == ""
        assert renderer.render() == ""

    def test_null_default(self, renderer):
        assert renderer.render(None) == " = NULL"

    def test_numeric_default(self, renderer):
        assert renderer.render(5) == " = 5"

    def test_string_default(self, renderer):
        assert renderer.render("abc") == " = 'abc'"

    def test_boolean_default(self, renderer):
        assert renderer.render(False) == " = false"

    def test_constant_default(self, renderer):
        assert renderer.render(PhpConstant("PHP_EOL")) == " = PHP_EOL"

    def test_raw_array_forced_single_line(self, renderer):
        assert renderer.render({"a": [1, 2]}) == " = array('a' => array(1, 2))"

    def test_value_generator_forced_single_line(self, renderer):
        generator = ValueGenerator([1, 2])

        assert renderer.render(generator) == " = array(1, 2)"
        assert generator.output_mode is OutputMode.MULTIPLE_LINE, "Caller's node must not change"

    def test_short_array_syntax(self):
        renderer = DefaultValueRenderer(ArraySyntax.SHORT)
        assert renderer.render([1, 2]) == " = [1, 2]"

    def test_to_value_generator_wraps_raw_values(self, renderer):
        generator = renderer.to_value_generator(5)

        assert isinstance(generator, ValueGenerator)
        assert generator.output_mode is OutputMode.SINGLE_LINE
        assert generator.value == 5

    def test_string_with_line_break_stays_on_one_line(self, renderer):
        assert renderer.render("a\nb") == ' = "a\\nb"'

    def test_string_with_tab_and_dollar(self, renderer):
        assert renderer.render('a\t$x"') == ' = "a\\t\\$x\\""'

    def test_array_key_with_line_break(self, renderer):
        assert renderer.render({"a\r\nb": "c"}) == " = array(\"a\\r\\nb\" => 'c')"
