"""Describe HTTP request/response shapes once; validate values and generate OpenAPI from them."""

import logging

from .http_operations import HTTP, OperationDescriptor, Parameter, ParameterDescriptor
from .openapi_projection import OASBuilder
from .schema_model import Schema, SchemaNode
from .validation import MISSING, ValidationError, ValidationResult, validate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Schema",
    "SchemaNode",
    "Parameter",
    "ParameterDescriptor",
    "HTTP",
    "OperationDescriptor",
    "MISSING",
    "ValidationError",
    "ValidationResult",
    "validate",
    "OASBuilder",
]
