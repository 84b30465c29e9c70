from __future__ import annotations

from typing import List, Optional

from ..models import ContactsResponse, UserAvatarResponse, UserCheckResponse, UserInfoResponse
from .base import Module


class UserModule(Module):
    def get_info(self, phones: List[str], *, token: Optional[str] = None) -> UserInfoResponse:
        """Get user details for the given phone numbers."""
        return self._post("/user/info", {"Phone": list(phones)}, token)

    def check(self, phones: List[str], *, token: Optional[str] = None) -> UserCheckResponse:
        """Check which phone numbers are registered WhatsApp users."""
        return self._post("/user/check", {"Phone": list(phones)}, token)

    def get_avatar(self, phone: str, preview: bool = True, *, token: Optional[str] = None) -> UserAvatarResponse:
        return self._post("/user/avatar", {"Phone": phone, "Preview": preview}, token)

    def get_contacts(self, *, token: Optional[str] = None) -> ContactsResponse:
        """Get all contacts, keyed by JID."""
        return self._get("/user/contacts", token)
