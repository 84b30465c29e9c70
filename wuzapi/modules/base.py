from __future__ import annotations

from typing import Any, Optional

from ..config import RequestOptions


def compact(**fields: Any) -> dict:
    """Build a request body, leaving out fields that were not given."""
    return {k: v for k, v in fields.items() if v is not None}


class Module:
    """Endpoint family bound to a client.

    Methods return whatever the client's pipeline returns: the unwrapped data
    for ``WuzapiClient``, an awaitable of it for ``AsyncWuzapiClient``.
    """

    def __init__(self, client):
        self._client = client

    @staticmethod
    def _options(token: Optional[str]) -> Optional[RequestOptions]:
        return RequestOptions(token=token) if token else None

    def _get(self, path: str, token: Optional[str] = None):
        return self._client.get(path, self._options(token))

    def _post(self, path: str, body: Any = None, token: Optional[str] = None):
        return self._client.post(path, body, self._options(token))

    def _put(self, path: str, body: Any = None, token: Optional[str] = None):
        return self._client.put(path, body, self._options(token))

    def _delete(self, path: str, token: Optional[str] = None):
        return self._client.delete(path, self._options(token))
