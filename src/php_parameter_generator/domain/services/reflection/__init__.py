#!/usr/bin/env python3

"""Services turning reflected parameter facts into descriptors."""

from .descriptor_factory import DescriptorFactory
from .type_extractor import extract_parameter_type

__all__ = [
    "DescriptorFactory",
    "extract_parameter_type",
]
