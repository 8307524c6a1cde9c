"""OpenAPI projection exports."""

from .document_builder import OPENAPI_VERSION, OASBuilder
from .document_checks import (
    SUPPORTED_FORMATS,
    OpenAPIDocumentError,
    check_openapi_document,
    dump_openapi_document,
)
from .schema_rendering import render_schema

__all__ = [
    "OPENAPI_VERSION",
    "OASBuilder",
    "SUPPORTED_FORMATS",
    "OpenAPIDocumentError",
    "check_openapi_document",
    "dump_openapi_document",
    "render_schema",
]
