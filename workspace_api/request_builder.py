"""Pure construction of one HTTP request per logical operation."""
from __future__ import annotations
import json
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional
from .config import API_VERSION, DEFAULT_PAGE_SIZE
from .exceptions import PayloadSerializationError
from .parameters import CreateEntryParameters, QueryParameters, UpdateEntryParameters


@dataclass(frozen=True)
class ApiRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def with_header(self, name: str, value: str) -> 'ApiRequest':
        headers = dict(self.headers)
        headers[name] = value
        return replace(self, headers=headers)


def with_default_headers(request: ApiRequest) -> ApiRequest:
    return (
        request
        .with_header('Content-Type', 'application/json')
        .with_header('Notion-Version', API_VERSION)
    )


def with_authorization(request: ApiRequest, api_key: str) -> ApiRequest:
    return request.with_header('Authorization', f"Bearer {api_key}")


def serialize_body(body: Any) -> bytes:
    try:
        return json.dumps(body, allow_nan=False, ensure_ascii=False, separators=(',', ':')).encode('utf-8')
    except (TypeError, ValueError) as e:
        raise PayloadSerializationError(f"Request body is not JSON serializable: {e}") from e


def _build(method: str, url: str, api_key: str, body: Any = None) -> ApiRequest:
    payload = serialize_body(body) if body is not None else None
    request = ApiRequest(method, url, body=payload)
    return with_authorization(with_default_headers(request), api_key)


def create_entry_request(base_url: str, api_key: str, params: CreateEntryParameters) -> ApiRequest:
    body = {
        'parent': {'database_id': params.database_id},
        'properties': params.properties,
    }
    return _build('POST', f"{base_url}/pages", api_key, body)


def query_properties_request(base_url: str, api_key: str, database_id: str) -> ApiRequest:
    return _build('GET', f"{base_url}/databases/{database_id}", api_key)


def query_request(base_url: str, api_key: str, params: QueryParameters) -> ApiRequest:
    body: Dict[str, Any] = {'page_size': params.page_size or DEFAULT_PAGE_SIZE}
    if params.start_cursor is not None:
        body['start_cursor'] = params.start_cursor
    if params.filter is not None:
        body['filter'] = params.filter
    return _build('POST', f"{base_url}/databases/{params.database_id}/query", api_key, body)


def update_entry_request(base_url: str, api_key: str, params: UpdateEntryParameters) -> ApiRequest:
    return _build('PATCH', f"{base_url}/pages/{params.entry_id}", api_key, {'properties': params.properties})
