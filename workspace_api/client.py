from __future__ import annotations
import logging
from typing import Optional
import requests
from . import config
from .classification import classify_response, classify_transport_error
from .parameters import CreateEntryParameters, QueryParameters, UpdateEntryParameters
from .request_builder import (
    ApiRequest,
    create_entry_request,
    query_properties_request,
    query_request,
    update_entry_request,
)

logger = logging.getLogger(__name__)


class WorkspaceClient:
    """Notion API client: builds, sends and classifies one request per call.

    Configuration is read-only after construction and the session is
    reused across calls, so one instance can be shared between threads.
    No operation retries on its own; wrap calls with
    ``retry.send_with_retries`` for that.
    """

    def __init__(self, api_key: str, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout: float = config.DEFAULT_TIMEOUT):
        self._api_key = api_key
        self._base_url = (base_url or config.DEFAULT_BASE_URL).rstrip('/')
        # Sessions passed in stay owned by the caller and are not closed here
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    @classmethod
    def from_env(cls) -> 'WorkspaceClient':
        api_key = config.env(config.API_KEY_ENV)
        base_url = config.env(config.BASE_URL_ENV, required=False) or None
        timeout_raw = config.env(config.TIMEOUT_ENV, required=False)
        timeout = float(timeout_raw) if timeout_raw else config.DEFAULT_TIMEOUT
        return cls(api_key, base_url=base_url, timeout=timeout)  # type: ignore[arg-type]

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> 'WorkspaceClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _send(self, request: ApiRequest) -> requests.Response:
        try:
            resp = self._session.request(request.method, request.url, headers=request.headers, data=request.body, timeout=self._timeout)
        except requests.RequestException as e:
            raise classify_transport_error(e) from e
        if not 200 <= resp.status_code < 300:
            raise classify_response(resp)
        return resp

    def create_entry(self, params: CreateEntryParameters) -> requests.Response:
        return self._send(create_entry_request(self._base_url, self._api_key, params))

    def query_properties(self, database_id: str) -> requests.Response:
        return self._send(query_properties_request(self._base_url, self._api_key, database_id))

    def query(self, params: QueryParameters) -> requests.Response:
        request = query_request(self._base_url, self._api_key, params)
        logger.info(
            'Query Notion database %s (page_size=%s, start_cursor=%s)',
            params.database_id,
            params.page_size or config.DEFAULT_PAGE_SIZE,
            params.start_cursor,
        )
        return self._send(request)

    def update_entry(self, params: UpdateEntryParameters) -> requests.Response:
        return self._send(update_entry_request(self._base_url, self._api_key, params))
