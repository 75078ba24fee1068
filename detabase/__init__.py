"""Typed async client for Deta Base."""

from .core.client import Detabase
from .core.kv import DetabaseKV
from .exceptions import ConfigError, DetabaseClientError, DetabaseError
from .models import (
    DeleteResponse,
    Item,
    JSONArray,
    JSONObject,
    JSONPrimitive,
    JSONValue,
    KVEntry,
    ListQuery,
    Options,
    PutResponse,
    QueryResponse,
    UpdateQuery,
    UpdateResponse,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DeleteResponse",
    "Detabase",
    "DetabaseClientError",
    "DetabaseError",
    "DetabaseKV",
    "Item",
    "JSONArray",
    "JSONObject",
    "JSONPrimitive",
    "JSONValue",
    "KVEntry",
    "ListQuery",
    "Options",
    "PutResponse",
    "QueryResponse",
    "UpdateQuery",
    "UpdateResponse",
    "__version__",
]
