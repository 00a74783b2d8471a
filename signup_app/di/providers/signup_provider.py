from typing import TYPE_CHECKING
from ...application.use_cases.signup.validate_signup import ValidateSignupUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SignupProvider:
    """Signup use case provider - registers the server-side validation use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register signup use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            ValidateSignupUseCase,
            lambda: ValidateSignupUseCase()
        )
