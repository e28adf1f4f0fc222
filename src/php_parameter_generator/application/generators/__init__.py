from .parameter_list_generator import ParameterListGenerator, generate_parameter_list

__all__ = ["ParameterListGenerator", "generate_parameter_list"]
