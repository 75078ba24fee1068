"""
Deta Base HTTP client.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json
from collections.abc import AsyncIterator, Mapping, Sequence
from typing import Any, Generic, TypeVar
from urllib.parse import quote

import httpx

from ..constants import (
    CONTENT_TYPE_JSON,
    DEFAULT_TIMEOUT,
    HEADER_API_KEY,
    HEADER_CONTENT_TYPE,
    PATH_ITEMS,
    PATH_QUERY,
)
from ..exceptions import DetabaseError
from ..logging_config import get_logger
from ..models import (
    DeleteResponse,
    ListQuery,
    Options,
    PutResponse,
    QueryResponse,
    UpdateQuery,
    UpdateResponse,
)

logger = get_logger(__name__)

DOT_SEGMENTS = (".", "..")

ItemT = TypeVar("ItemT", bound=Mapping[str, Any])


def encode_key(key: str) -> str:
    """
    Percent-encode a key for use as a single path segment.

    The keys ``.`` and ``..`` are dot segments in a URL path, so their
    dots are encoded too.

    Args:
        key: Item key, may contain reserved URL characters

    Returns:
        Encoded key (``a/b?c`` becomes ``a%2Fb%3Fc``, ``..`` becomes ``%2E%2E``)
    """
    if key in DOT_SEGMENTS:
        return key.replace(".", "%2E")
    return quote(key, safe="")


def resolve_options(
    options: Options | None,
    project_id: str | None,
    base_name: str | None,
    api_key: str | None,
) -> Options:
    """
    Accept connection options as an Options instance or as three keywords.

    Returns:
        Options instance

    Raises:
        TypeError: If neither or both forms are given, or a keyword is missing
    """
    keywords = {"project_id": project_id, "base_name": base_name, "api_key": api_key}
    given = [name for name, value in keywords.items() if value is not None]
    if options is not None:
        if given:
            raise TypeError(f"options given together with {', '.join(given)}")
        return options
    missing = [name for name in keywords if name not in given]
    if missing:
        raise TypeError(f"missing connection options: {', '.join(missing)}")
    return Options(project_id=project_id, base_name=base_name, api_key=api_key)  # type: ignore[arg-type]


class Detabase(Generic[ItemT]):
    """Typed async client for a single Deta Base.

    Every operation is one HTTP round trip. Non 2xx responses raise
    DetabaseError; transport and JSON decoding errors propagate unchanged.
    """

    def __init__(
        self,
        options: Options | None = None,
        *,
        project_id: str | None = None,
        base_name: str | None = None,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize Deta Base client.

        Pass either an Options instance or all three of project_id,
        base_name and api_key as keywords.

        Args:
            options: Connection options
            project_id: Deta project id
            base_name: Name of the base
            api_key: Project API key, only ever sent in request headers
            transport: Optional httpx transport (tests inject a MockTransport)
            timeout: Per-request timeout in seconds

        Raises:
            TypeError: If neither or both forms are given, or a keyword is missing
        """
        self._options = resolve_options(options, project_id, base_name, api_key)
        self._transport = transport
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._options.base_url

    @property
    def project_id(self) -> str:
        return self._options.project_id

    @property
    def base_name(self) -> str:
        return self._options.base_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    async def __aenter__(self) -> "Detabase[ItemT]":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None

    async def _request(
        self,
        path: str,
        method: str = "GET",
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Send one request to the base and decode the JSON response.

        Args:
            path: Path relative to the base URL
            method: HTTP method
            body: JSON body (omitted when None)

        Returns:
            Decoded JSON response body

        Raises:
            DetabaseError: If the response status is not 2xx
            json.JSONDecodeError: If the response body is not valid JSON
            httpx.TransportError: If no response was received
        """
        # Concatenated, not joined, so the path is never dot-normalized
        url = self.base_url + path.lstrip("/")
        headers = {
            HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
            HEADER_API_KEY: self._options.api_key,
        }
        content = json.dumps(body).encode("utf-8") if body is not None else None

        logger.debug(f"{method} {path}")
        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            response = await client.request(method, url, headers=headers, content=content)
        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.is_success:
            return response.json()

        # Decode failures propagate as-is, same as on the success path
        data = response.json()
        errors = data.get("errors") if isinstance(data, dict) else None
        raise DetabaseError(response, errors if isinstance(errors, list) else [])

    async def put(self, items: Sequence[ItemT]) -> PutResponse:
        """
        Store multiple items in a single request.

        Overwrites items whose ``key`` already exists. Items the service
        rejects are reported under ``failed``; no error is raised for them.

        Args:
            items: Items to store

        Returns:
            Processed and failed items
        """
        return await self._request(PATH_ITEMS, "PUT", {"items": list(items)})

    async def get(self, key: str) -> ItemT:
        """
        Get a stored item.

        Raises:
            DetabaseError: With status 404 if the key does not exist
        """
        return await self._request(f"{PATH_ITEMS}/{encode_key(key)}")

    async def delete(self, key: str) -> DeleteResponse:
        """
        Delete a stored item.

        Always returns ``{"key": key}``, whether or not the key existed.
        """
        return await self._request(f"{PATH_ITEMS}/{encode_key(key)}", "DELETE")

    async def insert(self, item: ItemT) -> ItemT:
        """Create a new item only if no item with the same ``key`` exists."""
        return await self._request(PATH_ITEMS, "POST", {"item": item})

    async def update(self, key: str, query: UpdateQuery) -> UpdateResponse:
        """
        Update an item only if an item with ``key`` exists.

        Args:
            key: Key of the item to update
            query: Any of ``set``, ``increment``, ``append`` and ``delete``

        Returns:
            Key plus the applied ``set`` and ``delete`` changes
        """
        return await self._request(f"{PATH_ITEMS}/{encode_key(key)}", "PATCH", query)

    async def query(self, query: ListQuery | None = None) -> QueryResponse:
        """
        List items that match a query.

        Up to 1 MB of data is retrieved before filtering, so a page may hold
        fewer matches than exist. Pass ``paging.last`` back as ``last`` to
        continue; see query_all.
        """
        return await self._request(PATH_QUERY, "POST", query if query is not None else {})

    async def query_all(self, query: ListQuery | None = None) -> AsyncIterator[ItemT]:
        """
        Iterate over every matching item, following paging cursors.

        Args:
            query: Filter and page size; ``last`` sets the starting cursor

        Yields:
            Items in the order the service returns them
        """
        page_query: ListQuery = dict(query) if query else {}  # type: ignore[assignment]
        while True:
            response = await self.query(page_query)
            for item in response.get("items", []):
                yield item
            last = response.get("paging", {}).get("last")
            if not last:
                return
            logger.debug(f"Continuing query after cursor '{last}'")
            page_query = {**page_query, "last": last}
