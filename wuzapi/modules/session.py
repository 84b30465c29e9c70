from __future__ import annotations

from typing import List, Optional

from ..models import ConnectResponse, DetailsResponse, QRCodeResponse, S3Config, S3TestResponse, StatusResponse
from .base import Module, compact


class SessionModule(Module):
    """Connection lifecycle of the WhatsApp session behind a user token."""

    def connect(
        self, subscribe: List[str], immediate: bool = False, *, token: Optional[str] = None
    ) -> ConnectResponse:
        """Connect to WhatsApp servers.

        Args:
            subscribe: Webhook event names to subscribe to, e.g. ``["Message", "ReadReceipt"]``.
            immediate: Return without waiting for the connection to be established.
        """
        body = {"Subscribe": list(subscribe), "Immediate": immediate}
        return self._post("/session/connect", body, token)

    def disconnect(self, *, token: Optional[str] = None) -> DetailsResponse:
        """Disconnect from WhatsApp servers, keeping the session for later reconnects."""
        return self._post("/session/disconnect", token=token)

    def logout(self, *, token: Optional[str] = None) -> DetailsResponse:
        """Log out and finish the session. A new QR scan is needed afterwards."""
        return self._post("/session/logout", token=token)

    def get_status(self, *, token: Optional[str] = None) -> StatusResponse:
        return self._get("/session/status", token)

    def get_qr_code(self, *, token: Optional[str] = None) -> QRCodeResponse:
        """Get the QR code to scan. ``QRCode`` is a base64 PNG data URL."""
        return self._get("/session/qr", token)

    def configure_s3(
        self,
        *,
        endpoint: str,
        region: str,
        bucket: str,
        access_key: str,
        secret_key: str,
        enabled: bool = True,
        path_style: bool = False,
        public_url: Optional[str] = None,
        media_delivery: str = "base64",
        retention_days: int = 30,
        token: Optional[str] = None,
    ) -> S3Config:
        """Configure S3-compatible storage for received media.

        Args:
            media_delivery: ``"base64"``, ``"s3"`` or ``"both"``; controls which
                representation webhook payloads carry.
        """
        if media_delivery not in ("base64", "s3", "both"):
            raise ValueError("media_delivery must be 'base64', 's3' or 'both'")
        body = compact(
            enabled=enabled,
            endpoint=endpoint,
            region=region,
            bucket=bucket,
            accessKey=access_key,
            secretKey=secret_key,
            pathStyle=path_style,
            publicURL=public_url,
            mediaDelivery=media_delivery,
            retentionDays=retention_days,
        )
        return self._post("/session/s3/config", body, token)

    def get_s3_config(self, *, token: Optional[str] = None) -> S3Config:
        """Get the S3 configuration. The access key comes back masked."""
        return self._get("/session/s3/config", token)

    def test_s3(self, *, token: Optional[str] = None) -> S3TestResponse:
        return self._post("/session/s3/test", token=token)

    def delete_s3_config(self, *, token: Optional[str] = None) -> DetailsResponse:
        return self._delete("/session/s3/config", token)

    def pair_phone(self, phone: str, *, token: Optional[str] = None) -> DetailsResponse:
        """Pair by phone number instead of QR code; the server answers with a linking code."""
        return self._post("/session/pairphone", {"Phone": phone}, token)

    def request_history(self, *, token: Optional[str] = None) -> DetailsResponse:
        """Ask WhatsApp servers for a history sync (delivered as HistorySync events)."""
        return self._get("/session/history", token)

    def set_proxy(
        self, proxy_url: str, enable: bool = True, *, token: Optional[str] = None
    ) -> DetailsResponse:
        body = {"proxy_url": proxy_url, "enable": enable}
        return self._post("/session/proxy", body, token)
