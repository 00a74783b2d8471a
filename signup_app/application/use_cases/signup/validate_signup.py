# Standard library imports
import logging
from typing import List, Sequence

# Local application imports
from ....domain.constants import SignupFields
from ....domain.exceptions import SignupValidationError
from ....domain.models import FieldError
from ....domain.validation import SIGNUP_RULES, collect_field_errors
from ...dto.signup_dto import SignupAcceptedResponse, SignupRequest

logger = logging.getLogger(__name__)

ACCEPTED_MESSAGE = "User validated and (mock) created."


class ValidateSignupUseCase:
    """
    Use case for re-validating a signup payload on the server.

    This is a validation mock: no user record is created and the password
    is never hashed or stored. Every call is independent of the previous ones.
    """

    async def execute(self, request: SignupRequest) -> SignupAcceptedResponse:
        """
        Validate every field of the payload and gather all failures

        Args:
            request: Parsed signup payload

        Returns:
            SignupAcceptedResponse when every field passes

        Raises:
            SignupValidationError: With one entry per failing field, in
                declaration order
        """
        errors = self.collect_errors(request)
        if errors:
            logger.info(
                f"Rejected signup payload: {len(errors)} invalid field(s) "
                f"({', '.join(error.field for error in errors)})"
            )
            raise SignupValidationError(errors)

        logger.info(f"Signup payload validated for username={request.username!r}")
        return SignupAcceptedResponse(msg=ACCEPTED_MESSAGE)

    def collect_errors(
        self,
        request: SignupRequest,
        malformed_fields: Sequence[str] = (),
    ) -> List[FieldError]:
        """
        Gather one error per failing field, in declaration order

        Args:
            request: Parsed signup payload
            malformed_fields: Fields whose JSON value had the wrong type and
                were dropped before parsing; each is reported as invalid
        """
        errors = collect_field_errors(request.to_form().to_values(), SignupFields.SERVER)
        if malformed_fields:
            errors = _merge_malformed(errors, malformed_fields)
        return errors


def _merge_malformed(errors: List[FieldError], malformed_fields: Sequence[str]) -> List[FieldError]:
    messages = {error.field: error.message for error in errors}
    for field in malformed_fields:
        if field in SIGNUP_RULES:
            messages[field] = SIGNUP_RULES[field].invalid_message
    return [
        FieldError(field=field, message=messages[field])
        for field in SignupFields.SERVER
        if field in messages
    ]
