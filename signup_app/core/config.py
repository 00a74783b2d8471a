# Standard library imports
import os
from typing import Final, List, Optional


DEFAULT_PORT = 4000


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT") or DEFAULT_PORT)
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # CORS Configuration (comma separated, "*" allows every origin)
        self.cors_allow_origins: Final[List[str]] = _split_csv(
            os.getenv("CORS_ALLOW_ORIGINS", "*")
        )

        # Signup Client Configuration
        self.signup_api_base_url: Final[str] = os.getenv(
            "SIGNUP_API_BASE_URL",
            f"http://localhost:{DEFAULT_PORT}"
        ).rstrip("/")
        self.signup_client_timeout: Final[float] = float(
            os.getenv("SIGNUP_CLIENT_TIMEOUT", "30.0")
        )


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
