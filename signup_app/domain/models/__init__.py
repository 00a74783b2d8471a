from .signup_form import SignupForm
from .field_error import FieldError

__all__ = ["SignupForm", "FieldError"]
