"""pytest integration: parameterize tests with generated strings."""

from .params import alphanumeric, generate_param, generate_params

__all__ = ["alphanumeric", "generate_param", "generate_params"]
