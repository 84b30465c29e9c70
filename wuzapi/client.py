from __future__ import annotations

from typing import Any, Optional

import httpx

from .auth import resolve_auth
from .config import RequestOptions, WuzapiConfig
from .exceptions import WuzapiError
from .logger import error_logger, request_logger, response_logger
from .modules import (
    AdminModule,
    ChatModule,
    GroupModule,
    NewsletterModule,
    SessionModule,
    UserModule,
    WebhookModule,
)

METHODS = ("GET", "POST", "PUT", "DELETE")


def _build_config(
    config: Optional[WuzapiConfig],
    api_url: Optional[str],
    token: Optional[str],
    debug: Optional[bool],
    timeout: Optional[float],
) -> WuzapiConfig:
    if config is not None:
        return config
    overrides = {"api_url": api_url, "token": token, "debug": debug, "timeout": timeout}
    return WuzapiConfig(**{k: v for k, v in overrides.items() if v is not None})


class _Pipeline:
    """Request preparation and envelope handling shared by the sync and async clients."""

    config: WuzapiConfig

    def _prepare(
        self,
        method: str,
        path: str,
        body: Any,
        options: Optional[RequestOptions],
    ) -> tuple:
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method '{method}'. Expected one of {METHODS}")
        try:
            auth = resolve_auth(self.config, options)
        except WuzapiError as e:
            self._fail(e, method, path)
            raise

        headers = {"Content-Type": "application/json", **auth.as_dict()}
        if self.config.debug:
            request_logger.debug(
                "%s %s%s auth=%s body=%s", method, self.config.api_url, path, auth.name, body
            )
        return method, headers

    def _network_error(self, exc: httpx.RequestError, method: str, path: str) -> WuzapiError:
        err = WuzapiError(0, "Network error: No response from server", details=str(exc))
        return self._fail(err, method, path)

    def _handle_response(self, response: httpx.Response) -> Any:
        method = response.request.method
        path = response.request.url.path
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if self.config.debug:
            response_logger.debug(
                "%s %s -> %s %s", method, path, response.status_code, payload if payload is not None else response.text
            )

        if not response.is_success:
            raise self._fail(self._server_error(response, payload), method, path)

        if not isinstance(payload, dict):
            err = WuzapiError(response.status_code, "Invalid response from server", response.text)
            raise self._fail(err, method, path)

        if not payload.get("success"):
            code = payload.get("code")
            err = WuzapiError(
                response.status_code if code is None else code,
                payload.get("error") or "API request failed",
                payload,
            )
            raise self._fail(err, method, path)

        return payload.get("data")

    @staticmethod
    def _server_error(response: httpx.Response, payload: Any) -> WuzapiError:
        status = response.status_code
        if not isinstance(payload, dict):
            return WuzapiError(status, f"Request failed with status code {status}", response.text)
        return WuzapiError(
            payload.get("code") or status,
            payload.get("message") or payload.get("error") or f"Request failed with status code {status}",
            payload,
        )

    def _fail(self, err: WuzapiError, method: str, path: str) -> WuzapiError:
        if self.config.debug:
            error_logger.debug("%s %s failed: [%s] %s", method, path, err.code, err.message)
        return err


class BaseClient(_Pipeline):
    """Sync request pipeline over ``httpx.Client``."""

    def __init__(self, config: WuzapiConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._client = httpx.Client(
            base_url=config.api_url, timeout=config.timeout, transport=transport
        )

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Send one request and return the envelope's ``data``.

        Raises:
            WuzapiError: code 401 without a token, 0 on network failure,
                otherwise the code reported by the server.
        """
        method, headers = self._prepare(method, path, body, options)
        try:
            r = self._client.request(method, path, json=body, headers=headers)
        except httpx.RequestError as e:
            raise self._network_error(e, method, path) from e
        return self._handle_response(r)

    def get(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        return self.request("GET", path, None, options)

    def post(self, path: str, body: Any = None, options: Optional[RequestOptions] = None) -> Any:
        return self.request("POST", path, body, options)

    def put(self, path: str, body: Any = None, options: Optional[RequestOptions] = None) -> Any:
        return self.request("PUT", path, body, options)

    def delete(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        return self.request("DELETE", path, None, options)

    def close(self):
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class AsyncBaseClient(_Pipeline):
    """Async request pipeline over ``httpx.AsyncClient``."""

    def __init__(self, config: WuzapiConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.api_url, timeout=config.timeout, transport=transport
        )

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        options: Optional[RequestOptions] = None,
    ) -> Any:
        """Send one request and return the envelope's ``data``."""
        method, headers = self._prepare(method, path, body, options)
        try:
            r = await self._client.request(method, path, json=body, headers=headers)
        except httpx.RequestError as e:
            raise self._network_error(e, method, path) from e
        return self._handle_response(r)

    async def get(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        return await self.request("GET", path, None, options)

    async def post(self, path: str, body: Any = None, options: Optional[RequestOptions] = None) -> Any:
        return await self.request("POST", path, body, options)

    async def put(self, path: str, body: Any = None, options: Optional[RequestOptions] = None) -> Any:
        return await self.request("PUT", path, body, options)

    async def delete(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        return await self.request("DELETE", path, None, options)

    async def close(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()


class WuzapiClient(BaseClient):
    """Sync client for the WuzAPI WhatsApp REST API.

    Usage:
        wa = WuzapiClient("http://localhost:8080", token="user-token")
        wa.session.connect(["Message", "ReadReceipt"])
        wa.chat.send_text("5491155554444", "Hello!")

        # Multi-tenant: one client, per-call identity (sent as the Token header)
        wa.chat.send_text("5491155554444", "Hi", token="other-user-token")

        with WuzapiClient() as wa:                       # WUZAPI_API_URL / WUZAPI_TOKEN
            wa.group.list()

    Arguments left as None fall back to ``WUZAPI_*`` environment variables and
    ``.env``, so ``token=None`` still picks up ``WUZAPI_TOKEN``. Pass ``token=""``
    to ignore it and require a per-call token on every request.
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        token: Optional[str] = None,
        *,
        debug: Optional[bool] = None,
        timeout: Optional[float] = None,
        config: Optional[WuzapiConfig] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        super().__init__(_build_config(config, api_url, token, debug, timeout), transport)
        self.admin = AdminModule(self)
        self.session = SessionModule(self)
        self.user = UserModule(self)
        self.chat = ChatModule(self)
        self.group = GroupModule(self)
        self.webhook = WebhookModule(self)
        self.newsletter = NewsletterModule(self)

        # Legacy aliases
        self.users = self.user
        self.message = self.chat

    def ping(self, token: Optional[str] = None) -> bool:
        """Return True if the server answered a status request."""
        try:
            self.session.get_status(token=token)
        except WuzapiError:
            return False
        return True

    def is_connected(self, token: Optional[str] = None) -> bool:
        """Check if the session is connected to WhatsApp."""
        try:
            status = self.session.get_status(token=token)
        except WuzapiError:
            return False
        return bool(status and status.get("Connected"))


class AsyncWuzapiClient(AsyncBaseClient):
    """Async client for the WuzAPI WhatsApp REST API.

    Usage:
        async with AsyncWuzapiClient("http://localhost:8080", token="user-token") as wa:
            await wa.chat.send_text("5491155554444", "Hello!")
            await wa.group.create("Team", ["5491155553935"])
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        token: Optional[str] = None,
        *,
        debug: Optional[bool] = None,
        timeout: Optional[float] = None,
        config: Optional[WuzapiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(_build_config(config, api_url, token, debug, timeout), transport)
        self.admin = AdminModule(self)
        self.session = SessionModule(self)
        self.user = UserModule(self)
        self.chat = ChatModule(self)
        self.group = GroupModule(self)
        self.webhook = WebhookModule(self)
        self.newsletter = NewsletterModule(self)

        self.users = self.user
        self.message = self.chat

    async def ping(self, token: Optional[str] = None) -> bool:
        """Return True if the server answered a status request."""
        try:
            await self.session.get_status(token=token)
        except WuzapiError:
            return False
        return True

    async def is_connected(self, token: Optional[str] = None) -> bool:
        """Check if the session is connected to WhatsApp."""
        try:
            status = await self.session.get_status(token=token)
        except WuzapiError:
            return False
        return bool(status and status.get("Connected"))
