"""Client for the Notion workspace API (database entries and queries).

Usage example:
    from workspace_api import WorkspaceClient, QueryParameters, send_with_retries
    client = WorkspaceClient.from_env()
    resp = send_with_retries(lambda: client.query(QueryParameters('db-id', page_size=50)))
"""
from .exceptions import (  # noqa: F401
    ApiAuthError,
    ApiBadRequestError,
    ApiCommunicationError,
    ApiRateLimitError,
    ApiRequestError,
    ApiUnexpectedStatusError,
    PayloadSerializationError,
)
from .parameters import CreateEntryParameters, QueryParameters, UpdateEntryParameters  # noqa: F401
from .client import WorkspaceClient  # noqa: F401
from .retry import MAX_RETRIES, retrying, send_with_retries  # noqa: F401
