from .signup_dto import (
    FieldErrorResponse,
    SignupAcceptedResponse,
    SignupRejectedResponse,
    SignupRequest,
)

__all__ = [
    "FieldErrorResponse",
    "SignupAcceptedResponse",
    "SignupRejectedResponse",
    "SignupRequest",
]
