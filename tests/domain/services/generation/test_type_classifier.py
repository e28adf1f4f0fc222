#!/usr/bin/env python3

"""Unit tests for TypeClassifier.

Covers the three hint categories, casing rules and namespace separator
normalization of qualified class names.
"""

import pytest

from php_parameter_generator.domain.models.php import DEFAULT_SIMPLE_TYPES, TypeCategory
from php_parameter_generator.domain.services.generation import TypeClassifier


@pytest.mark.unit
class TestTypeClassifier:
    """Test suite for TypeClassifier class."""

    def test_default_simple_types(self, type_classifier):
        assert type_classifier.simple_types == DEFAULT_SIMPLE_TYPES
        for type_name in ("int", "bool", "string", "float", "resource", "mixed", "object"):
            assert type_name in type_classifier.simple_types, f"Missing simple type: {type_name}"

    @pytest.mark.parametrize("type_name", [None, "", "int", "string", "mixed"])
    def test_simple_types_have_no_prefix(self, type_classifier, type_name):
        assert type_classifier.classify(type_name) is TypeCategory.SIMPLE
        assert type_classifier.generate_prefix(type_name) == ""

    def test_simple_type_match_is_case_sensitive(self, type_classifier):
        assert type_classifier.classify("Int") is TypeCategory.QUALIFIED
        assert type_classifier.generate_prefix("Int") == "\\Int "

    @pytest.mark.parametrize(
        "type_name, expected",
        [
            ("array", "array "),
            ("callable", "callable "),
            ("Array", "Array "),
            ("CALLABLE", "CALLABLE "),
        ],
    )
    def test_internal_types_keep_original_casing(self, type_classifier, type_name, expected):
        assert type_classifier.classify(type_name) is TypeCategory.INTERNAL
        assert type_classifier.generate_prefix(type_name) == expected

    def test_is_internal_type(self):
        assert TypeClassifier.is_internal_type("array") is True
        assert TypeClassifier.is_internal_type("Callable") is True
        assert TypeClassifier.is_internal_type("ArrayObject") is False
        assert TypeClassifier.is_internal_type(None) is False

    @pytest.mark.parametrize(
        "type_name",
        [
            "App\\Thing",
            "\\App\\Thing",
            "\\\\App\\Thing",
            "App\\Thing\\",
            "\\App\\Thing\\\\",
        ],
    )
    def test_qualified_names_get_exactly_one_leading_separator(self, type_classifier, type_name):
        assert type_classifier.classify(type_name) is TypeCategory.QUALIFIED
        assert type_classifier.generate_prefix(type_name) == "\\App\\Thing "

    def test_unqualified_class_name(self, type_classifier):
        assert type_classifier.generate_prefix("stdClass") == "\\stdClass "

    def test_custom_simple_type_set(self):
        classifier = TypeClassifier({"Foo"})

        assert classifier.generate_prefix("Foo") == ""
        assert classifier.generate_prefix("int") == "\\int ", "int is only simple when configured"
        assert classifier.generate_prefix("array") == "array "

    def test_empty_simple_type_set(self):
        classifier = TypeClassifier(())

        assert classifier.generate_prefix(None) == ""
        assert classifier.generate_prefix("") == ""
        assert classifier.generate_prefix("string") == "\\string "

    def test_simple_set_wins_over_internal(self):
        classifier = TypeClassifier({"array"})
        assert classifier.generate_prefix("array") == ""
