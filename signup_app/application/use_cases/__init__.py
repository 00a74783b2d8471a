from .signup import ValidateSignupUseCase

__all__ = [
    "ValidateSignupUseCase",
]
