from .signup_client import SignupClient, SignupResult

__all__ = [
    "SignupClient",
    "SignupResult",
]
