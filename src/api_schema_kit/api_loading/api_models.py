"""API definition entities."""

from __future__ import annotations

from dataclasses import dataclass

from api_schema_kit.http_operations.descriptor_models import OperationDescriptor
from api_schema_kit.schema_model.schema_nodes import ResponseBody


@dataclass(frozen=True)
class ApiDefinition:
    """Operations and named responses declared by a user API module."""

    operations: tuple[OperationDescriptor, ...]
    responses: tuple[tuple[str, ResponseBody], ...]

    def find_operation(self, operation_id: str) -> OperationDescriptor | None:
        """Return the last operation declared with `operation_id`, if any."""
        found = None
        for operation in self.operations:
            if operation.operation_id == operation_id:
                found = operation
        return found
