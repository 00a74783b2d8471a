# Standard library imports
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

# Local application imports
from ..di.container import get_container
from ..domain.constants import SignupFields
from ..domain.validation import collect_field_errors, validate_confirm, validate_value
from ..infrastructure.external.signup_client import SignupClient, SignupResult
from .form_state import (
    STATUS_ERROR,
    STATUS_SUCCESS,
    SUBMIT_LABEL,
    SUBMITTING_LABEL,
    FormState,
)

logger = logging.getLogger(__name__)

FIX_ERRORS_MESSAGE = "Please fix errors before submitting."
SUCCESS_MESSAGE = "Account created successfully (mock)."
SERVER_ERROR_MESSAGE = "Server error. Try later."


class FormController:
    """
    Client-side controller for the signup form.

    Owns the displayed errors and the submit state of a FormState, runs the
    field rules as values change, gates submission on a full validation
    pass and sends the payload through a SignupClient.
    """

    def __init__(self, state: FormState, client: SignupClient) -> None:
        self.state = state
        self.client = client

    @classmethod
    def create(cls, state: Optional[FormState] = None) -> "FormController":
        """Build a controller wired to the container's SignupClient"""
        return cls(state or FormState(), get_container().get(SignupClient))

    # ------------------------------------------------------------------
    # Real-time validation
    # ------------------------------------------------------------------

    def update_field(self, name: str, value: str) -> None:
        """Value-change event of a text-like input"""
        if name in SignupFields.CHECKBOX:
            raise ValueError(f"{name} is a checkbox; use toggle_terms()")
        self.state.values[name] = value
        self.validate_field(name)

    def toggle_terms(self, checked: bool) -> None:
        """Change event of the terms checkbox"""
        self.state.values[SignupFields.TERMS] = bool(checked)
        self.validate_field(SignupFields.TERMS)

    def validate_field(self, name: str) -> None:
        """
        Validate one field and update its displayed error.

        A password change re-checks a non-empty confirmation so a stale
        match never survives the edit.
        """
        values = self.state.normalized_values()
        self.state.set_error(name, validate_value(name, values[name], values))

        if name == SignupFields.PASSWORD and values[SignupFields.CONFIRM]:
            self.state.set_error(
                SignupFields.CONFIRM,
                validate_confirm(values[SignupFields.PASSWORD], values[SignupFields.CONFIRM]),
            )

    def is_form_valid(self) -> bool:
        """Clear every error, re-validate every field and report overall validity"""
        self.state.clear_errors()
        errors = collect_field_errors(self.state.normalized_values(), SignupFields.ALL)
        for error in errors:
            self.state.set_error(error.field, error.message)
        return not errors

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def set_loading(self, loading: bool) -> None:
        self.state.submitting = loading
        self.state.submit.disabled = loading
        self.state.submit.label = SUBMITTING_LABEL if loading else SUBMIT_LABEL

    @asynccontextmanager
    async def loading(self) -> AsyncIterator[None]:
        """Hold the loading state for the duration of the block; always released"""
        self.set_loading(True)
        try:
            yield
        finally:
            self.set_loading(False)

    def build_payload(self) -> Dict[str, Any]:
        return {name: self.state.value(name) for name in SignupFields.PAYLOAD}

    async def submit(self) -> Optional[SignupResult]:
        """
        Submit handler of the form.

        Returns:
            The SignupResult of the network call, or None when submission
            was blocked (invalid form or a submission already in flight)
        """
        if self.state.submitting:
            logger.debug("Submission already in flight; ignoring submit")
            return None

        self.state.status.clear()
        if not self.is_form_valid():
            self.state.status.show(FIX_ERRORS_MESSAGE, STATUS_ERROR)
            return None

        async with self.loading():
            try:
                result = await self.client.submit(self.build_payload())
            except Exception as exception:
                logger.error(f"Unexpected error while submitting signup form: {exception}", exc_info=True)
                result = SignupResult(ok=False, message=str(exception))
            if result.ok:
                self.state.status.show(SUCCESS_MESSAGE, STATUS_SUCCESS)
                self.reset()
            else:
                logger.warning(f"Signup submission failed (status {result.status_code})")
                self.state.status.show(SERVER_ERROR_MESSAGE, STATUS_ERROR)
        return result

    def reset(self) -> None:
        self.state.reset()
