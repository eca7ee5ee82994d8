"""Validation types shared across all validators."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class ValidationSeverity(str, Enum):
    """Severity level of a validation violation."""

    ERROR = "error"
    WARNING = "warning"


class ValidationViolation(BaseModel):
    """A single rule violation detected during validation."""

    rule_id: str  # e.g., "S.1"
    category: str  # e.g., "Cards", "Voting"
    message: str  # Human-readable description
    severity: ValidationSeverity = ValidationSeverity.ERROR
    context: Optional[dict] = None  # Additional context for debugging

    def __str__(self) -> str:
        return f"[{self.rule_id}] {self.category}: {self.message}"
