# Standard library imports
from typing import Sequence

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.signup_dto import (
    SignupAcceptedResponse,
    SignupRejectedResponse,
    SignupRequest,
)
from ...application.use_cases.signup.validate_signup import ValidateSignupUseCase
from ...di.container import get_container
from ...domain.exceptions import SignupValidationError
from ...domain.models import FieldError


router = APIRouter(tags=["signup"])


@router.post(
    "/signup",
    response_model=SignupAcceptedResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": SignupRejectedResponse}},
)
async def signup(request: SignupRequest):
    """
    Re-validate a signup payload

    Args:
        request: Signup payload (fullname, email, username, password, phone, age, terms)

    Returns:
        SignupAcceptedResponse, or a 400 SignupRejectedResponse listing every failing field
    """
    container = get_container()
    validate_use_case = container.get(ValidateSignupUseCase)

    try:
        return await validate_use_case.execute(request)
    except SignupValidationError as exception:
        return rejection_response(exception.errors)


def rejection_response(errors: Sequence[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=SignupRejectedResponse.from_errors(errors).model_dump(),
    )
