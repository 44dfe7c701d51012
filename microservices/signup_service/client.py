"""
Signup Service Client

Client used by the signup form to post step values to the signup API.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from core.config import get_settings
from .models import SubmissionResult

logger = logging.getLogger(__name__)


class SignupClient:
    """Client for the signup API"""

    SIGNUP_PATH = "/api/v1/signup"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.signup_api_url).rstrip("/")
        self.timeout = timeout or settings.signup_api_timeout
        self._transport = transport

    async def submit_signup(self, values: Dict[str, Any], code: str) -> SubmissionResult:
        """
        Post accumulated form values for a page.

        Args:
            values: Form values gathered so far
            code: Page code

        Returns:
            Success when the API answers 2xx without ``success: false``;
            otherwise a failed result carrying the API's message.
        """
        payload = {**values, "code": code}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(f"{self.base_url}{self.SIGNUP_PATH}", json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Error submitting signup for {code}: {e}")
            return SubmissionResult(success=False, message="Could not reach the signup service")

        data = self._json_body(response)

        if response.is_success and data.get("success", True) is not False:
            return SubmissionResult(success=True, status_code=response.status_code, message=data.get("message"))

        logger.warning(f"Signup for {code} rejected with {response.status_code}: {response.text}")
        detail = data.get("detail")
        errors = detail if isinstance(detail, list) else []
        message = detail if isinstance(detail, str) else data.get("message")
        return SubmissionResult(
            success=False,
            status_code=response.status_code,
            message=message or "Signup submission failed",
            errors=errors,
        )

    @staticmethod
    def _json_body(response: httpx.Response) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
