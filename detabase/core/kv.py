"""
Key-value layer over a Deta Base.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Generic, TypeVar

import httpx

from ..constants import ATTR_KEY, ATTR_VALUE, DEFAULT_TIMEOUT, STATUS_NOT_FOUND
from ..exceptions import DetabaseError
from ..models import JSONValue, KVEntry, Options
from .client import Detabase

ValueT = TypeVar("ValueT", bound=JSONValue)


class DetabaseKV(Generic[ValueT]):
    """Stores one JSON value per key. Missing keys read as None."""

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
        """Takes the same connection arguments as Detabase."""
        self._db: Detabase[KVEntry] = Detabase(
            options,
            project_id=project_id,
            base_name=base_name,
            api_key=api_key,
            transport=transport,
            timeout=timeout,
        )

    @property
    def base_url(self) -> str:
        return self._db.base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    async def set(self, key: str, value: ValueT) -> None:
        """
        Set key to value.

        Per-item failures reported by the batch put are not surfaced here;
        use Detabase.put directly when they matter.
        """
        await self._db.put([{ATTR_KEY: key, ATTR_VALUE: value}])  # type: ignore[list-item]

    async def get(self, key: str) -> ValueT | None:
        """
        Get the value for key.

        Returns:
            The stored value, or None if the key does not exist

        Raises:
            DetabaseError: For any non 2xx status other than 404
        """
        try:
            entry = await self._db.get(key)
        except DetabaseError as e:
            if e.status_code == STATUS_NOT_FOUND:
                return None
            raise
        return entry.get(ATTR_VALUE)

    async def delete(self, key: str) -> None:
        """Delete key. Succeeds whether or not the key exists."""
        await self._db.delete(key)
