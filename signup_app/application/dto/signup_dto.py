from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, StrictBool

from ...domain.models import FieldError, SignupForm


class SignupRequest(BaseModel):
    """DTO for the signup payload (the confirmation field is never sent)"""
    fullname: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    age: Optional[Union[int, str]] = None
    terms: Optional[StrictBool] = None

    def to_form(self) -> SignupForm:
        return SignupForm.from_values(self.model_dump())


class FieldErrorResponse(BaseModel):
    """DTO for a single failing field"""
    field: str
    message: str


class SignupAcceptedResponse(BaseModel):
    """DTO for a payload that passed every rule"""
    ok: bool = True
    msg: str


class SignupRejectedResponse(BaseModel):
    """DTO listing every failing field in declaration order"""
    ok: bool = False
    errors: List[FieldErrorResponse]

    @classmethod
    def from_errors(cls, errors: Sequence[FieldError]) -> "SignupRejectedResponse":
        return cls(errors=[FieldErrorResponse(**error.to_dict()) for error in errors])
