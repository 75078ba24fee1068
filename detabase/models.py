"""
Type models for Deta Base operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from dataclasses import dataclass, field
from typing import TypeAlias, TypedDict

from .constants import API_VERSION, SERVICE_HOST

# JSON type definitions per RFC 8259
JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value: string, number, boolean, or null."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A JSON array containing any JSON values."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A JSON object mapping string keys to JSON values."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any JSON value: primitive, array, or object."""

Item: TypeAlias = "JSONObject"
"""A stored record. Must carry a string ``key`` field."""


@dataclass(frozen=True)
class Options:
    """Connection options for a single Deta Base."""

    project_id: str
    base_name: str
    api_key: str = field(repr=False)

    @property
    def base_url(self) -> str:
        """Base URL, always ending in ``/`` so relative paths compose."""
        return f"https://{SERVICE_HOST}/{API_VERSION}/{self.project_id}/{self.base_name}/"


class UpdateQuery(TypedDict, total=False):
    """Partial mutation applied by ``update``. Precedence is remote-defined."""

    set: dict[str, JSONPrimitive]
    increment: dict[str, int | float]
    append: dict[str, list[JSONPrimitive]]
    delete: list[str]


class ListQuery(TypedDict, total=False):
    """Filter, page size and cursor for ``query``."""

    query: "JSONObject | JSONArray"
    limit: int
    last: str


class ItemList(TypedDict):
    items: list[Item]


class PutResponse(TypedDict):
    processed: ItemList
    failed: ItemList


class DeleteResponse(TypedDict):
    key: str


class UpdateResponse(TypedDict):
    key: str
    set: dict[str, JSONPrimitive]
    delete: list[str]


class Paging(TypedDict, total=False):
    size: int
    last: str


class QueryResponse(TypedDict):
    paging: Paging
    items: list[Item]


class KVEntry(TypedDict):
    """Record shape stored by the key-value layer."""

    key: str
    value: JSONValue
