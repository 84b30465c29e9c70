from __future__ import annotations

from typing import List, Optional

from ..models import DetailsResponse, GetWebhookResponse, SetWebhookResponse, UpdateWebhookResponse
from .base import Module, compact


class WebhookModule(Module):
    """Where the server posts events for this session."""

    def set_webhook(
        self, url: str, events: Optional[List[str]] = None, *, token: Optional[str] = None
    ) -> SetWebhookResponse:
        """Set the webhook URL and, optionally, the events it receives."""
        body = compact(webhook=url, events=list(events) if events is not None else None)
        return self._post("/webhook", body, token)

    def get_webhook(self, *, token: Optional[str] = None) -> GetWebhookResponse:
        return self._get("/webhook", token)

    def update_webhook(
        self,
        url: Optional[str] = None,
        events: Optional[List[str]] = None,
        active: Optional[bool] = None,
        *,
        token: Optional[str] = None,
    ) -> UpdateWebhookResponse:
        """Change any of URL, events or active flag; omitted values are left alone."""
        body = compact(webhook=url, events=list(events) if events is not None else None, Active=active)
        return self._put("/webhook", body, token)

    def delete_webhook(self, *, token: Optional[str] = None) -> DetailsResponse:
        return self._delete("/webhook", token)
