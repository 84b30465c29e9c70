from typing import Any


class WuzapiError(Exception):
    """Single error type raised by the wuzapi clients.

    Callers tell failures apart by ``code``:

    - ``0``: no response reached the client (network failure).
    - ``401`` raised locally: no token available, the request was never sent.
    - anything else: the server's own code, forwarded verbatim.
    """

    def __init__(self, code: int, message: str, details: Any = None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)

    @property
    def is_network_error(self) -> bool:
        return self.code == 0

    @property
    def is_auth_error(self) -> bool:
        return self.code == 401

    def __repr__(self) -> str:
        return f"WuzapiError(code={self.code!r}, message={self.message!r})"
