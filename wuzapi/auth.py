from __future__ import annotations

from typing import NamedTuple, Optional

from .config import RequestOptions, WuzapiConfig
from .exceptions import WuzapiError

# A per-call token is an explicit identity; the config token is the session default.
EXPLICIT_TOKEN_HEADER = "Token"
DEFAULT_TOKEN_HEADER = "Authorization"


class AuthHeader(NamedTuple):
    name: str
    value: str

    def as_dict(self) -> dict:
        return {self.name: self.value}


def resolve_auth(config: WuzapiConfig, options: Optional[RequestOptions] = None) -> AuthHeader:
    """Pick the token and the header it travels under.

    Raises:
        WuzapiError: code 401 when neither the options nor the config carry a token.
    """
    if options is not None and options.token:
        return AuthHeader(EXPLICIT_TOKEN_HEADER, options.token)
    if config.token:
        return AuthHeader(DEFAULT_TOKEN_HEADER, config.token)
    raise WuzapiError(
        401,
        "No authentication token provided. Either set a token in the client "
        "config or provide one in the request options.",
    )
