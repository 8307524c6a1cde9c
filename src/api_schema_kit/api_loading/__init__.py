"""API definition loading exports."""

from .api_importer import ApiLoadError, load_api_definition
from .api_models import ApiDefinition

__all__ = [
    "ApiDefinition",
    "ApiLoadError",
    "load_api_definition",
]
