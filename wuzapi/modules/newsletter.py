from __future__ import annotations

from typing import Optional

from ..models import NewsletterListResponse
from .base import Module


class NewsletterModule(Module):
    def list(self, *, token: Optional[str] = None) -> NewsletterListResponse:
        """List subscribed newsletters (channels)."""
        return self._get("/newsletter/list", token)
