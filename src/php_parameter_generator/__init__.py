"""PHP Parameter Generator - PHP parameter declarations from reflected parameter facts."""

from .application.generators import ParameterListGenerator
from .domain.models.php import ParameterDescriptor, ReflectedParameter
from .domain.services.generation import DeclarationAssembler
from .domain.services.reflection import DescriptorFactory
from .infrastructure.config import Config
from .main import main

__all__ = [
    "Config",
    "DeclarationAssembler",
    "DescriptorFactory",
    "ParameterDescriptor",
    "ParameterListGenerator",
    "ReflectedParameter",
    "main",
]
