#!/usr/bin/env python3

"""Generation services for PHP parameter declarations."""

from .declaration_assembler import DeclarationAssembler, DeclarationGenerator
from .default_value_renderer import DefaultValueRenderer
from .type_classifier import TypeClassifier
from .value_generator import ArraySyntax, OutputMode, PhpConstant, ValueGenerator

__all__ = [
    "ArraySyntax",
    "DeclarationAssembler",
    "DeclarationGenerator",
    "DefaultValueRenderer",
    "OutputMode",
    "PhpConstant",
    "TypeClassifier",
    "ValueGenerator",
]
