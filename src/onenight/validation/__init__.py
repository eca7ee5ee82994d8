"""Runtime validation of game state invariants.

Files:
- types.py: Shared ValidationViolation, ValidationSeverity
- state_consistency.py: S.1-S.6 state invariant checks
"""

from .types import ValidationViolation, ValidationSeverity
from .state_consistency import validate_state

__all__ = [
    "ValidationViolation",
    "ValidationSeverity",
    "validate_state",
]
