"""In-memory stand-in for the Deta Base HTTP API.

Serve it to the client through ``httpx.MockTransport(fake.handle)``. Only
equality filters are supported by ``query``; that is enough to exercise
paging and OR/AND filter shapes without reimplementing the service.
"""

import json
from typing import Any
from urllib.parse import unquote

import httpx


class FakeBase:
    """A single base with Deta Base request/response shapes."""

    def __init__(self, project_id: str, base_name: str, api_key: str) -> None:
        self.prefix = f"/v1/{project_id}/{base_name}/"
        self.api_key = api_key
        self.items: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.headers.get("X-API-Key") != self.api_key:
            return httpx.Response(401, json={"errors": ["Unauthorized"]})

        raw_path = request.url.raw_path.decode("ascii").split("?", 1)[0]
        if not raw_path.startswith(self.prefix):
            return httpx.Response(404, json={"errors": ["Base not found"]})
        route = raw_path[len(self.prefix) :]
        body = json.loads(request.content) if request.content else None

        if route == "items" and request.method == "PUT":
            return self._put(body["items"])
        if route == "items" and request.method == "POST":
            return self._insert(body["item"])
        if route.startswith("items/"):
            key = unquote(route[len("items/") :])
            if request.method == "GET":
                return self._get(key)
            if request.method == "DELETE":
                self.items.pop(key, None)
                return httpx.Response(200, json={"key": key})
            if request.method == "PATCH":
                return self._update(key, body)
        if route == "query" and request.method == "POST":
            return self._query(body)
        return httpx.Response(405, json={"errors": ["Method not allowed"]})

    def _put(self, items: list[Any]) -> httpx.Response:
        processed, failed = [], []
        for item in items:
            if isinstance(item, dict) and isinstance(item.get("key"), str):
                self.items[item["key"]] = item
                processed.append(item)
            else:
                failed.append(item)
        return httpx.Response(
            207, json={"processed": {"items": processed}, "failed": {"items": failed}}
        )

    def _insert(self, item: dict[str, Any]) -> httpx.Response:
        if item["key"] in self.items:
            return httpx.Response(409, json={"errors": ["Key already exists"]})
        self.items[item["key"]] = item
        return httpx.Response(201, json=item)

    def _get(self, key: str) -> httpx.Response:
        if key not in self.items:
            return httpx.Response(404, json={"key": key})
        return httpx.Response(200, json=self.items[key])

    def _update(self, key: str, query: dict[str, Any]) -> httpx.Response:
        if key not in self.items:
            return httpx.Response(404, json={"errors": ["Key not found"]})
        item = self.items[key]
        applied_set = dict(query.get("set", {}))
        item.update(applied_set)
        for field, amount in query.get("increment", {}).items():
            item[field] = item.get(field, 0) + amount
            applied_set[field] = item[field]
        for field, values in query.get("append", {}).items():
            item[field] = list(item.get(field, [])) + list(values)
            applied_set[field] = item[field]
        deleted = list(query.get("delete", []))
        for field in deleted:
            item.pop(field, None)
        return httpx.Response(200, json={"key": key, "set": applied_set, "delete": deleted})

    def _query(self, body: dict[str, Any]) -> httpx.Response:
        filters = body.get("query") or [{}]
        if isinstance(filters, dict):
            filters = [filters]
        keys = sorted(self.items)
        last = body.get("last")
        if last is not None:
            keys = [k for k in keys if k > last]
        matches = [
            self.items[k]
            for k in keys
            if any(all(self.items[k].get(f) == v for f, v in flt.items()) for flt in filters)
        ]
        limit = body.get("limit")
        paging: dict[str, Any] = {}
        if limit is not None and len(matches) > limit:
            matches = matches[:limit]
            paging["last"] = matches[-1]["key"]
        paging["size"] = len(matches)
        return httpx.Response(200, json={"paging": paging, "items": matches})
