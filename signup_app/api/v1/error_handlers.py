# Standard library imports
import logging
from typing import Any, Dict, List, Sequence

# External package imports
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.requests import Request

# Local application imports
from ...application.dto.signup_dto import SignupRequest
from ...application.use_cases.signup.validate_signup import ValidateSignupUseCase
from ...di.container import get_container
from ...domain.models import FieldError
from ...domain.validation import SIGNUP_RULES
from .signup_controller import rejection_response

logger = logging.getLogger(__name__)

BODY_FIELD = "body"
BODY_MESSAGE = "Request body must be a JSON object."


def _malformed_fields(errors: Sequence[Dict[str, Any]]) -> List[str]:
    """Known signup fields that pydantic could not parse, first occurrence order"""
    fields: List[str] = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if len(loc) >= 2 and loc[0] == "body" and loc[1] in SIGNUP_RULES and loc[1] not in fields:
            fields.append(loc[1])
    return fields


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render unparseable signup payloads in the same shape as rule failures.

    Fields with a wrong JSON type are reported with their rule message and
    the remaining fields are still validated, so the response lists every
    failing field. A body that is not a JSON object yields a single
    ``body`` entry.
    """
    body = exc.body
    malformed = _malformed_fields(exc.errors())

    if not isinstance(body, dict) or not malformed:
        logger.warning(f"Rejected unparseable request body on {request.url.path}")
        return rejection_response([FieldError(field=BODY_FIELD, message=BODY_MESSAGE)])

    parsed = SignupRequest.model_validate(
        {key: value for key, value in body.items() if key not in malformed}
    )
    use_case = get_container().get(ValidateSignupUseCase)
    errors = use_case.collect_errors(parsed, malformed_fields=malformed)

    logger.warning(
        f"Rejected signup payload with malformed field(s) {', '.join(malformed)} "
        f"on {request.url.path}"
    )
    return rejection_response(errors)
