"""
Exceptions raised by the signup domain.

There is exactly one failure kind: a field validation failure. The
exception carries every failing field so callers can report them together.
"""
from typing import List, Sequence

from .models.field_error import FieldError


class SignupValidationError(ValueError):
    """Raised when one or more signup fields fail validation."""

    def __init__(self, errors: Sequence[FieldError]):
        self.errors: List[FieldError] = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(f"Signup validation failed for: {fields}")
