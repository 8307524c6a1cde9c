"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ApiSourceConfig:
    """Where the API definition lives and which attributes hold it."""

    module: str | None
    path: Path | None
    operations_attribute: str
    responses_attribute: str | None


@dataclass(frozen=True)
class InfoSettings:
    """OpenAPI info object fields."""

    title: str
    version: str
    description: str | None

    def to_openapi(self) -> Mapping[str, Any]:
        """Return the OpenAPI info object, omitting unset optional fields."""
        info: dict[str, Any] = {"title": self.title, "version": self.version}
        if self.description:
            info["description"] = self.description
        return info


@dataclass(frozen=True)
class OutputSettings:
    """Serialization settings for generated documents."""

    format: str


@dataclass(frozen=True)
class ValidationSettings:
    """Runtime validator behavior."""

    detailed_errors: bool


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    api: ApiSourceConfig
    info: InfoSettings
    output: OutputSettings
    validation: ValidationSettings
