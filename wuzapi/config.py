from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WuzapiConfig(BaseSettings):
    """Client configuration, fixed for the lifetime of a client.

    Explicit arguments win over ``WUZAPI_*`` environment variables:

        WuzapiConfig(api_url="http://localhost:8080", token="user-token")
        WuzapiConfig()  # reads WUZAPI_API_URL, WUZAPI_TOKEN, ...
    """

    model_config = SettingsConfigDict(
        env_prefix="WUZAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    api_url: str = "http://localhost:8080"
    token: Optional[str] = None
    debug: bool = False
    timeout: float = 30.0

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("api_url cannot be empty")
        return v.rstrip("/")


@dataclass(frozen=True)
class RequestOptions:
    """Per-call overrides. A token here takes precedence over the config token."""

    token: Optional[str] = None
