from __future__ import annotations

from typing import List, Optional, Union

from ..models import CreateUserResponse, DetailsResponse, ProxyConfig, S3Config, User
from .base import Module, compact


class AdminModule(Module):
    """Manage the server's users. Needs the admin token, not a user token:

        wa = WuzapiClient(api_url, token=ADMIN_TOKEN)
        wa.admin.list_users()
    """

    def list_users(self, *, token: Optional[str] = None) -> List[User]:
        return self._get("/admin/users", token)

    def get_user(self, id: Union[int, str], *, token: Optional[str] = None) -> User:
        return self._get(f"/admin/users/{id}", token)

    def add_user(
        self,
        name: str,
        user_token: str,
        *,
        webhook: Optional[str] = None,
        events: Optional[str] = None,
        expiration: Optional[int] = None,
        proxy_config: Optional[ProxyConfig] = None,
        s3_config: Optional[S3Config] = None,
        token: Optional[str] = None,
    ) -> CreateUserResponse:
        """Create a user.

        Args:
            name: Display name.
            user_token: Token the new user will authenticate with.
            events: Comma separated event names, e.g. ``"Message,ReadReceipt"``.
        """
        body = compact(
            name=name,
            token=user_token,
            webhook=webhook,
            events=events,
            expiration=expiration,
            proxyConfig=proxy_config,
            s3Config=s3_config,
        )
        return self._post("/admin/users", body, token)

    def delete_user(self, id: Union[int, str], *, token: Optional[str] = None) -> DetailsResponse:
        return self._delete(f"/admin/users/{id}", token)
