from .rules import FieldRule, FieldSpec, SIGNUP_RULES, SPECIAL_CHARACTERS
from .validators import (
    collect_field_errors,
    validate_age,
    validate_confirm,
    validate_email,
    validate_fullname,
    validate_password,
    validate_phone,
    validate_terms,
    validate_username,
    validate_value,
)

__all__ = [
    "FieldRule",
    "FieldSpec",
    "SIGNUP_RULES",
    "SPECIAL_CHARACTERS",
    "collect_field_errors",
    "validate_age",
    "validate_confirm",
    "validate_email",
    "validate_fullname",
    "validate_password",
    "validate_phone",
    "validate_terms",
    "validate_username",
    "validate_value",
]
