"""Conformance checking and serialization of generated OpenAPI documents."""

from __future__ import annotations

import json
from collections.abc import Hashable, Mapping
from typing import Any, cast

import yaml
from openapi_spec_validator import validate
from openapi_spec_validator.validation.exceptions import OpenAPIValidationError

SUPPORTED_FORMATS = ("yaml", "json")


class OpenAPIDocumentError(Exception):
    """Raised when a generated document does not conform to OpenAPI 3.0."""


def check_openapi_document(document: Mapping[str, Any]) -> None:
    """Validate `document` against the OpenAPI 3.0 meta-schema.

    Raises:
      OpenAPIDocumentError: With the validator's message when the document is invalid.
    """
    try:
        validate(cast(Mapping[Hashable, Any], document))
    except OpenAPIValidationError as exc:
        raise OpenAPIDocumentError(f"Generated OpenAPI document is invalid: {exc}") from exc


def dump_openapi_document(document: Mapping[str, Any], fmt: str = "yaml") -> str:
    """Serialize `document` as YAML or JSON text, keeping key order."""
    if fmt == "yaml":
        return yaml.safe_dump(dict(document), sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unsupported output format: {fmt}")
