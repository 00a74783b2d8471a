# Standard library imports
from typing import Any, Iterable, List, Mapping, Optional

# Local application imports
from ..constants import SignupFields
from ..models.field_error import FieldError
from .rules import (
    AGE,
    CONFIRM,
    EMAIL,
    FULLNAME,
    PASSWORD,
    PHONE,
    SIGNUP_RULES,
    TERMS,
    USERNAME,
)


def validate_fullname(value: str) -> str:
    return FULLNAME.first_error(value)


def validate_email(value: str) -> str:
    return EMAIL.first_error(value)


def validate_username(value: str) -> str:
    return USERNAME.first_error(value)


def validate_password(value: str) -> str:
    return PASSWORD.first_error(value)


def validate_confirm(password: str, confirm: str) -> str:
    """Check the confirmation against the current password (exact match)"""
    return CONFIRM.first_error(confirm, {SignupFields.PASSWORD: password})


def validate_phone(value: str) -> str:
    return PHONE.first_error(value)


def validate_age(value: Any) -> str:
    return AGE.first_error(value)


def validate_terms(checked: bool) -> str:
    return TERMS.first_error(checked)


def validate_value(field: str, value: Any, others: Optional[Mapping[str, Any]] = None) -> str:
    """
    Validate one normalized field value against its rules.

    Args:
        field: Field identifier from SignupFields
        value: Normalized value of that field
        others: Normalized values of the other fields, needed by cross-field rules

    Returns:
        Error message, or "" when valid

    Raises:
        KeyError: If the field has no rules
    """
    return SIGNUP_RULES[field].first_error(value, others)


def collect_field_errors(values: Mapping[str, Any], fields: Iterable[str] = SignupFields.ALL) -> List[FieldError]:
    """
    Validate every field and gather all failures.

    Each field reports at most one error (its first failing rule); errors
    are returned in the order of ``fields``.
    """
    errors: List[FieldError] = []
    for field in fields:
        message = validate_value(field, values.get(field), values)
        if message:
            errors.append(FieldError(field=field, message=message))
    return errors
