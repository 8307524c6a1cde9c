"""HTTP operation descriptor exports."""

from .descriptor_builders import HTTP, Parameter
from .descriptor_models import HttpMethod, OperationDescriptor, ParameterDescriptor, ParameterKind

__all__ = [
    "HTTP",
    "Parameter",
    "HttpMethod",
    "ParameterKind",
    "ParameterDescriptor",
    "OperationDescriptor",
]
