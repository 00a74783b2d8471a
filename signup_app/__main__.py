"""Process entry point: ``python -m signup_app`` starts the signup server."""
# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings
from .main import app


def main() -> None:
    # Settings are read after main has loaded .env
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
