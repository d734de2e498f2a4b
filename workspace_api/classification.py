"""Map failed transport outcomes onto the ApiRequestError taxonomy.

Only failures reach this module: 2xx responses are returned to the caller
untouched. Classification itself never raises.

The service handles variable rate limits with HTTP 429 responses and a
``Retry-After`` header holding the wait as a decimal number of seconds.
See https://developers.notion.com/reference/request-limits
"""
from __future__ import annotations
import logging
import math
import threading
from typing import Mapping
import requests
from .exceptions import (
    ApiAuthError,
    ApiBadRequestError,
    ApiCommunicationError,
    ApiRateLimitError,
    ApiRequestError,
    ApiUnexpectedStatusError,
)

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 1.0
# Longest wait time.sleep and blocking primitives accept on this platform
MAX_RETRY_AFTER = threading.TIMEOUT_MAX


def parse_retry_after(headers: Mapping[str, str]) -> float:
    """Return the server-requested wait in seconds, never negative."""
    raw = headers.get('Retry-After')
    if raw is None:
        logger.warning('Notion API response returned 429 status code without Retry-After header')
        return DEFAULT_RETRY_AFTER
    try:
        seconds = float(raw)
    except (TypeError, ValueError):
        seconds = math.nan
    if not math.isfinite(seconds):
        logger.warning('Notion API response returned 429 status code with invalid Retry-After header: %s', raw)
        return DEFAULT_RETRY_AFTER
    if seconds > MAX_RETRY_AFTER:
        logger.warning('Notion API response returned 429 status code with oversized Retry-After header: %s', raw)
        return MAX_RETRY_AFTER
    return seconds if seconds > 0 else 0.0


def classify_transport_error(exc: requests.RequestException) -> ApiCommunicationError:
    err = ApiCommunicationError(str(exc) or exc.__class__.__name__)
    err.__cause__ = exc
    return err


def classify_response(response: requests.Response) -> ApiRequestError:
    status = response.status_code
    if status == 400:
        return ApiBadRequestError(f"Bad request {status}: {response.text[:200]}", response)
    if status == 401:
        return ApiAuthError(f"Auth error {status}: {response.text[:200]}", response)
    if status == 429:
        retry_after = parse_retry_after(response.headers)
        logger.warning('Notion API request rate limited for %.3fs', retry_after)
        return ApiRateLimitError(retry_after, response)
    return ApiUnexpectedStatusError(status, response)
