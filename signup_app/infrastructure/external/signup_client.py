# Standard library imports
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.models import FieldError

logger = logging.getLogger(__name__)

SIGNUP_PATH = "/api/signup"


@dataclass
class SignupResult:
    """
    Outcome of one signup submission.

    ``ok`` is True only for a 2xx response whose body acknowledges the
    payload; every other outcome (transport error, timeout, unreadable body,
    rejected payload) is a failed result, never an exception.
    """
    ok: bool
    message: str = ""
    errors: List[FieldError] = field(default_factory=list)
    status_code: Optional[int] = None


class SignupClient:
    """
    HTTP client for submitting the signup payload to the signup endpoint.

    A new AsyncClient is opened per submission; no retry is attempted.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize signup client.

        Args:
            base_url: Base URL of the signup service. If None, reads from settings.
            timeout: Request timeout in seconds. If None, reads from settings.
            transport: Optional httpx transport (e.g. a mock or ASGI transport)
        """
        settings = get_settings()
        self.base_url = (base_url or settings.signup_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.signup_client_timeout
        self.transport = transport

    async def submit(self, payload: Dict[str, Any]) -> SignupResult:
        """
        POST the payload and convert the response into a SignupResult.

        Args:
            payload: JSON-serializable signup payload

        Returns:
            SignupResult describing the outcome
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                logger.info(f"Submitting signup payload to {self.base_url}{SIGNUP_PATH}")
                response = await client.post(SIGNUP_PATH, json=payload)
        except httpx.TimeoutException:
            logger.error(f"Timeout while submitting signup payload to {self.base_url}")
            return SignupResult(ok=False, message="Request timed out")
        except (httpx.HTTPError, httpx.InvalidURL) as exception:
            logger.error(f"Transport error while submitting signup payload: {exception}")
            return SignupResult(ok=False, message=str(exception))

        return _to_result(response)


def _to_result(response: httpx.Response) -> SignupResult:
    try:
        body = response.json()
    except ValueError:
        logger.error(f"Signup endpoint returned a non-JSON body (status {response.status_code})")
        return SignupResult(ok=False, message="Invalid response body", status_code=response.status_code)

    if not isinstance(body, dict):
        logger.error(f"Signup endpoint returned an unexpected body (status {response.status_code})")
        return SignupResult(ok=False, message="Invalid response body", status_code=response.status_code)

    if response.is_success and body.get("ok") is True:
        return SignupResult(ok=True, message=str(body.get("msg", "")), status_code=response.status_code)

    errors = [
        FieldError(field=str(item.get("field", "")), message=str(item.get("message", "")))
        for item in body.get("errors") or []
        if isinstance(item, dict)
    ]
    logger.warning(
        f"Signup rejected with status {response.status_code}: "
        f"{', '.join(error.field for error in errors) or 'no field errors'}"
    )
    return SignupResult(
        ok=False,
        message=str(body.get("msg", "")),
        errors=errors,
        status_code=response.status_code,
    )
