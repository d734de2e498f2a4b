from __future__ import annotations
from typing import Optional
import requests


class ApiRequestError(Exception):
    """Base class for classified Notion API request failures.

    Exactly one subclass describes each failure. ``response`` keeps the
    received response (``None`` for transport failures, whose original
    exception is chained as ``__cause__``).
    """
    retry_after: Optional[float] = None

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


class ApiAuthError(ApiRequestError):
    """Credentials rejected (401) or missing."""


class ApiBadRequestError(ApiRequestError):
    """Malformed request (400). Not retryable."""


class ApiCommunicationError(ApiRequestError):
    """Transport-level failure: DNS, connection, timeout."""

    def __init__(self, detail: str):
        super().__init__(f"Notion API request failure: {detail}")
        self.detail = detail


class ApiRateLimitError(ApiRequestError):
    """Server-requested backoff (429)."""

    def __init__(self, retry_after: float, response: Optional[requests.Response] = None):
        super().__init__(f"Notion API request failure. Please retry in {retry_after:g}s", response)
        self.retry_after = retry_after


class ApiUnexpectedStatusError(ApiRequestError):
    """Any other non-2xx status."""

    def __init__(self, status_code: int, response: Optional[requests.Response] = None):
        super().__init__(f"Notion API request failed with status code {status_code}", response)
        self._status_code = status_code

    @property
    def status_code(self) -> int:
        return self._status_code


class PayloadSerializationError(ValueError):
    """Request body could not be encoded as JSON; raised before anything is sent."""
