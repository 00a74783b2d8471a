# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import health_router, request_validation_error_handler, signup_router
from .core.config import get_settings
from .core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    The service is stateless, so startup and shutdown only log.
    """
    settings = get_settings()
    logger.info(f"Server running on :{settings.port}")

    yield

    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route and error handler registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    # Create FastAPI app
    application = FastAPI(
        title="Signup Validation API",
        version="1.0.0",
        description="Server-side re-validation of the signup form (validation mock)",
        lifespan=lifespan
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register error handlers
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)

    # Register API routers
    application.include_router(health_router)
    application.include_router(signup_router, prefix="/api")

    return application


# Create application instance
app = create_application()
