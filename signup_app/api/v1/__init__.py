from .signup_controller import router as signup_router
from .health_controller import router as health_router
from .error_handlers import request_validation_error_handler


__all__ = ["signup_router", "health_router", "request_validation_error_handler"]
