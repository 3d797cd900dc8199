"""GraphQL client for the indexer management API."""

import logging
from typing import Any, Dict, Optional

import httpx

from indexer_cli.config import validate_api_url
from indexer_cli.errors import IndexerManagementError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class IndexerManagementClient:
    """Sends GraphQL operations to a single indexer management endpoint."""

    def __init__(self, url: str, timeout: float = DEFAULT_TIMEOUT, transport: Optional[httpx.BaseTransport] = None):
        self.url = url
        self._http = httpx.Client(timeout=timeout, transport=transport)

    def __enter__(self) -> "IndexerManagementClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload = {"query": query, "variables": variables or {}}
        logger.debug(f"POST {self.url} variables={payload['variables']}")
        try:
            response = self._http.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise IndexerManagementError(f"Failed to reach indexer management API at {self.url}: {e}") from e

        # GraphQL servers may report errors with a non-2xx status, prefer their messages.
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("errors"):
            messages = [f"[GraphQL] {err.get('message', err)}" for err in body["errors"]]
            raise IndexerManagementError("\n".join(messages))

        if response.is_error:
            raise IndexerManagementError(f"Indexer management API returned HTTP {response.status_code}")

        if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
            raise IndexerManagementError("Indexer management API returned no data")

        return body["data"]

    def mutation(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.execute(query, variables)


def create_indexer_management_client(
    url: str,
    timeout: float = DEFAULT_TIMEOUT,
    transport: Optional[httpx.BaseTransport] = None,
) -> IndexerManagementClient:
    """Build a client bound to ``url``. Raises ConfigError for a malformed URL."""
    return IndexerManagementClient(validate_api_url(url), timeout=timeout, transport=transport)
