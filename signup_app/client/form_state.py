"""
Explicit state of one rendered signup form.

The controller receives a FormState by reference and mutates it; nothing
about the form lives at module level.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

from ..domain.constants import SignupFields
from ..domain.models.signup_form import normalize_value

SUBMIT_LABEL = "Create account"
SUBMITTING_LABEL = "Submitting..."

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def empty_values() -> Dict[str, Any]:
    return {
        name: False if name in SignupFields.CHECKBOX else ""
        for name in SignupFields.ALL
    }


def empty_errors() -> Dict[str, str]:
    return {name: "" for name in SignupFields.ALL}


@dataclass
class SubmitControl:
    """The submit button: disabled while a submission is outstanding"""
    disabled: bool = False
    label: str = SUBMIT_LABEL


@dataclass
class StatusMessage:
    """Form-level message shown under the submit button"""
    text: str = ""
    kind: str = ""

    def show(self, text: str, kind: str) -> None:
        self.text = text
        self.kind = kind

    def clear(self) -> None:
        self.text = ""
        self.kind = ""


@dataclass
class FormState:
    """
    Current field values, displayed errors and submit state.

    Values hold exactly what the inputs contain (untrimmed text, a bool for
    the checkbox); ``value()`` returns the normalized view the validators use.
    Errors are written explicitly by the controller and never derived.
    """
    values: Dict[str, Any] = field(default_factory=empty_values)
    errors: Dict[str, str] = field(default_factory=empty_errors)
    submit: SubmitControl = field(default_factory=SubmitControl)
    status: StatusMessage = field(default_factory=StatusMessage)
    submitting: bool = False

    def value(self, name: str) -> Any:
        return normalize_value(name, self.values[name])

    def normalized_values(self) -> Dict[str, Any]:
        return {name: self.value(name) for name in SignupFields.ALL}

    def set_error(self, name: str, text: str) -> None:
        self.errors[name] = text or ""

    def clear_errors(self) -> None:
        for name in self.errors:
            self.errors[name] = ""

    def has_errors(self) -> bool:
        return any(self.errors.values())

    def reset(self) -> None:
        """Restore every input to its empty default and clear all errors"""
        self.values = empty_values()
        self.clear_errors()
