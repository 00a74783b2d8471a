from .signup_provider import SignupProvider
from .client_provider import ClientProvider


__all__ = [
    "SignupProvider",
    "ClientProvider",
]
