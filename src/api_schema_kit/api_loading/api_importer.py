"""Import of user API definitions from modules or files."""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import ModuleType

from api_schema_kit.configuration.runtime_settings import ApiSourceConfig
from api_schema_kit.http_operations.descriptor_models import OperationDescriptor
from api_schema_kit.schema_model.schema_nodes import ResponseBody, SchemaNode

from .api_models import ApiDefinition

_LOGGER = logging.getLogger(__name__)


class ApiLoadError(Exception):
    """Raised when an API definition cannot be imported or has the wrong shape."""


def load_api_definition(source: ApiSourceConfig) -> ApiDefinition:
    """Import the configured module and collect its operations and named responses."""
    module = _import_source(source)

    operations = _read_operations(module, source.operations_attribute)
    responses: tuple[tuple[str, ResponseBody], ...] = ()
    if source.responses_attribute:
        responses = _read_responses(module, source.responses_attribute)

    _LOGGER.debug(
        "Loaded %d operations and %d named responses from %s",
        len(operations),
        len(responses),
        module.__name__,
    )
    return ApiDefinition(operations=operations, responses=responses)


def _import_source(source: ApiSourceConfig) -> ModuleType:
    if source.path is not None:
        return _import_file(source.path)
    if not source.module:
        raise ApiLoadError("API source requires either a module or a path.")
    try:
        return importlib.import_module(source.module)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ApiLoadError(f"Cannot import API module '{source.module}': {exc}") from exc


def _import_file(path: Path) -> ModuleType:
    module_name = f"_api_schema_kit_source_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ApiLoadError(f"Cannot load API definition file: {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        sys.modules.pop(module_name, None)
        raise ApiLoadError(f"Cannot load API definition file {path}: {exc}") from exc
    return module


def _read_attribute(module: ModuleType, attribute: str) -> object:
    if not hasattr(module, attribute):
        raise ApiLoadError(f"API module '{module.__name__}' has no attribute '{attribute}'.")
    return getattr(module, attribute)


def _read_operations(module: ModuleType, attribute: str) -> tuple[OperationDescriptor, ...]:
    value = _read_attribute(module, attribute)
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ApiLoadError(f"'{attribute}' must be a list of operations.")
    for item in value:
        if not isinstance(item, OperationDescriptor):
            raise ApiLoadError(
                f"'{attribute}' entries must be declared with HTTP.GET/POST/PUT/PATCH/DELETE."
            )
    return tuple(value)


def _read_responses(module: ModuleType, attribute: str) -> tuple[tuple[str, ResponseBody], ...]:
    value = _read_attribute(module, attribute)
    if not isinstance(value, Mapping):
        raise ApiLoadError(f"'{attribute}' must be a mapping of response names to schemas.")
    responses = []
    for name, response in value.items():
        if not isinstance(name, str):
            raise ApiLoadError(f"'{attribute}' keys must be strings.")
        if not _is_response_body(response):
            raise ApiLoadError(f"Response '{name}' must be a schema or a mapping of schemas.")
        # Keep the original objects: operations refer to them by identity.
        responses.append((name, response))
    return tuple(responses)


def _is_response_body(value: object) -> bool:
    if isinstance(value, SchemaNode):
        return True
    return isinstance(value, Mapping) and all(
        isinstance(node, SchemaNode) for node in value.values()
    )
