"""
Client side of the signup form.

FormState holds what the rendered form shows; FormController validates
fields as they change and submits the form through the signup client.
"""
from .form_state import FormState, StatusMessage, SubmitControl
from .form_controller import FormController

__all__ = [
    "FormState",
    "StatusMessage",
    "SubmitControl",
    "FormController",
]
