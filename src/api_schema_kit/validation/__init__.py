"""Validation domain exports."""

from .operation_checks import validate_request, validate_response
from .schema_validator import validate
from .validation_outcomes import MISSING, ValidationError, ValidationResult

__all__ = [
    "MISSING",
    "ValidationError",
    "ValidationResult",
    "validate",
    "validate_request",
    "validate_response",
]
