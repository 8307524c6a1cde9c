"""Validation result entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal


class _Missing(Enum):
    """Marker type for a value that was not provided at all."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> Literal[False]:
        return False


MISSING: Final = _Missing.MISSING


@dataclass(frozen=True)
class ValidationError:
    """Why a value did not match its schema."""

    description: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one value against one schema."""

    success: bool
    error: ValidationError | None = None

    @property
    def is_ok(self) -> bool:
        """Return True when the value matched."""
        return self.success

    @property
    def description(self) -> str | None:
        """Return the failure description, or None on success."""
        return self.error.description if self.error else None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(success=True)

    @classmethod
    def failed(cls, description: str) -> ValidationResult:
        return cls(success=False, error=ValidationError(description))
