"""
Declarative rule table for the signup form.

Each field is described by a FieldSpec holding an ordered tuple of
FieldRule records (a check and the message reported when it fails). The
same table drives the per-field validators used by the form controller
and the gather-all validation done by the signup endpoint, so both sides
share character classes, bounds and messages.
"""
# Standard library imports
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

# Local application imports
from ..constants import WHITESPACE, SignupFields

# (value, other field values) -> passes
Check = Callable[[Any, Mapping[str, Any]], bool]

SPECIAL_CHARACTERS = "!@#$%^&*()_-+=[]{};:\"\\|,.<>/?"

# Plain ASCII decimal notation, optionally signed, with an optional exponent
NUMERIC_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

AGE_MIN = 13
AGE_MAX = 120


@dataclass(frozen=True)
class FieldRule:
    """One check and the message reported when it fails"""
    check: Check
    message: str

    def passes(self, value: Any, others: Mapping[str, Any]) -> bool:
        return self.check(value, others)


@dataclass(frozen=True)
class FieldSpec:
    """Ordered rules for one field; the first failing rule wins"""
    name: str
    rules: Tuple[FieldRule, ...]
    optional: bool = False

    @property
    def invalid_message(self) -> str:
        """Message reported when a value has the wrong shape altogether"""
        format_rules = [rule for rule in self.rules if rule.check is not required]
        return (format_rules or list(self.rules))[0].message

    def first_error(self, value: Any, others: Optional[Mapping[str, Any]] = None) -> str:
        """
        Run the rules in order and return the first failing message.

        Args:
            value: Normalized field value
            others: Normalized values of the other fields (cross-field rules)

        Returns:
            The failing rule's message, or "" when the value is valid
        """
        if self.optional and is_empty(value):
            return ""
        others = others or {}
        for rule in self.rules:
            if not rule.passes(value, others):
                return rule.message
        return ""


def is_empty(value: Any) -> bool:
    return value is None or value == ""


def required(value: Any, _: Mapping[str, Any]) -> bool:
    return not is_empty(value)


def full_match(pattern: str) -> Check:
    compiled = re.compile(pattern)

    def check(value: Any, _: Mapping[str, Any]) -> bool:
        return isinstance(value, str) and compiled.fullmatch(value) is not None

    return check


def contains(pattern: str) -> Check:
    compiled = re.compile(pattern)

    def check(value: Any, _: Mapping[str, Any]) -> bool:
        return isinstance(value, str) and compiled.search(value) is not None

    return check


def min_length(length: int) -> Check:
    def check(value: Any, _: Mapping[str, Any]) -> bool:
        return isinstance(value, str) and len(value) >= length

    return check


def equals_field(other: str) -> Check:
    def check(value: Any, others: Mapping[str, Any]) -> bool:
        return value == others.get(other, "")

    return check


def integer_between(low: int, high: int) -> Check:
    def check(value: Any, _: Mapping[str, Any]) -> bool:
        # bool is an int subclass but never a valid age
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            number = value
        elif isinstance(value, (float, str)):
            if isinstance(value, str) and NUMERIC_PATTERN.fullmatch(value) is None:
                return False
            number = float(value)
            if not math.isfinite(number) or not number.is_integer():
                return False
        else:
            return False
        return low <= number <= high

    return check


def is_true(value: Any, _: Mapping[str, Any]) -> bool:
    return value is True


FULLNAME = FieldSpec(
    name=SignupFields.FULLNAME,
    rules=(
        FieldRule(required, "Full name is required."),
        FieldRule(full_match(f"[A-Za-z{WHITESPACE}]{{3,80}}"), "Use only letters and spaces (3-80 chars)."),
    ),
)

EMAIL = FieldSpec(
    name=SignupFields.EMAIL,
    rules=(
        FieldRule(required, "Email is required."),
        FieldRule(full_match(f"[^{WHITESPACE}@]+@[^{WHITESPACE}@]+\\.[^{WHITESPACE}@]+"), "Enter a valid email."),
    ),
)

USERNAME = FieldSpec(
    name=SignupFields.USERNAME,
    rules=(
        FieldRule(required, "Username required."),
        FieldRule(full_match(r"[A-Za-z0-9._-]{3,20}"), "3-20 chars: letters, numbers, . _ -"),
    ),
)

PASSWORD = FieldSpec(
    name=SignupFields.PASSWORD,
    rules=(
        FieldRule(required, "Password required."),
        FieldRule(min_length(8), "Password must be at least 8 characters."),
        FieldRule(contains(r"[A-Z]"), "Include at least one uppercase letter."),
        FieldRule(contains(r"[0-9]"), "Include at least one number."),
        FieldRule(contains("[" + re.escape(SPECIAL_CHARACTERS) + "]"), "Include at least one special character."),
    ),
)

CONFIRM = FieldSpec(
    name=SignupFields.CONFIRM,
    rules=(
        FieldRule(required, "Please confirm your password."),
        FieldRule(equals_field(SignupFields.PASSWORD), "Passwords do not match."),
    ),
)

PHONE = FieldSpec(
    name=SignupFields.PHONE,
    rules=(
        FieldRule(full_match(r"[0-9]{10}"), "Phone must be 10 digits."),
    ),
    optional=True,
)

AGE = FieldSpec(
    name=SignupFields.AGE,
    rules=(
        FieldRule(integer_between(AGE_MIN, AGE_MAX), f"Enter a valid age ({AGE_MIN}-{AGE_MAX})."),
    ),
    optional=True,
)

TERMS = FieldSpec(
    name=SignupFields.TERMS,
    rules=(
        FieldRule(is_true, "You must accept terms."),
    ),
)


SIGNUP_RULES: Dict[str, FieldSpec] = {
    spec.name: spec
    for spec in (FULLNAME, EMAIL, USERNAME, PASSWORD, CONFIRM, PHONE, AGE, TERMS)
}
