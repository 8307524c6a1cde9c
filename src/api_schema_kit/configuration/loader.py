"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    ApiSourceConfig,
    Configuration,
    InfoSettings,
    OutputSettings,
    ValidationSettings,
)

_OUTPUT_FORMATS = ("yaml", "json")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        api=_parse_api_section(parsed.get("api"), path.parent),
        info=_parse_info_section(parsed.get("info")),
        output=_parse_output_section(parsed.get("output")),
        validation=_parse_validation_section(parsed.get("validation")),
    )


def _parse_api_section(value: Any, base_path: Path) -> ApiSourceConfig:
    section = _require_mapping(value, "api")
    module = _optional_string(section.get("module"), "api.module")
    raw_path = _optional_string(section.get("path"), "api.path")
    if module and raw_path:
        raise ConfigurationError("api must not set both module and path.")
    if not module and not raw_path:
        raise ConfigurationError("api requires either module or path.")

    source_path = None
    if raw_path:
        source_path = _resolve_path(base_path, raw_path)
        if not source_path.exists():
            raise ConfigurationError(f"API definition file not found: {source_path}")

    operations_attribute = _require_non_empty_string(
        section.get("operations", "OPERATIONS"), "api.operations"
    )
    responses_attribute = _optional_string(section.get("responses"), "api.responses")
    return ApiSourceConfig(
        module=module,
        path=source_path,
        operations_attribute=operations_attribute,
        responses_attribute=responses_attribute,
    )


def _parse_info_section(value: Any) -> InfoSettings:
    section = _require_mapping(value, "info")
    title = _require_non_empty_string(section.get("title"), "info.title")
    version = _require_non_empty_string(_stringify_version(section.get("version")), "info.version")
    description = _optional_string(section.get("description"), "info.description")
    return InfoSettings(title=title, version=version, description=description)


def _parse_output_section(value: Any) -> OutputSettings:
    section = _optional_mapping(value, "output")
    fmt = _require_non_empty_string(section.get("format", "yaml"), "output.format").lower()
    if fmt not in _OUTPUT_FORMATS:
        raise ConfigurationError(
            f"output.format must be one of: {', '.join(_OUTPUT_FORMATS)}."
        )
    return OutputSettings(format=fmt)


def _parse_validation_section(value: Any) -> ValidationSettings:
    section = _optional_mapping(value, "validation")
    detailed_errors = section.get("detailed_errors", False)
    if not isinstance(detailed_errors, bool):
        raise ConfigurationError("validation.detailed_errors must be a boolean.")
    return ValidationSettings(detailed_errors=detailed_errors)


def _stringify_version(value: Any) -> Any:
    # YAML reads an unquoted `1.0` as a float.
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
