from typing import TYPE_CHECKING
from ...infrastructure.external.signup_client import SignupClient

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ClientProvider:
    """HTTP client provider - registers the client used by the form controller"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Base URL and timeout are read from settings at construction time
        container.register_factory(SignupClient, lambda: SignupClient())
