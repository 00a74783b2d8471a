"""Constants for domain model field names"""

from .signup_fields import SignupFields
from .text import WHITESPACE

__all__ = [
    "SignupFields",
    "WHITESPACE",
]
