"""Authentication providers for the AWX REST API.

A provider decorates each outgoing :class:`httpx.Request` with credentials.
The transport calls :meth:`AuthProvider.apply` once per request, before
caller-specified headers are applied.
"""

import base64
from typing import Protocol

import httpx


class AuthProvider(Protocol):
    """Anything that can attach credentials to an outgoing request."""

    def apply(self, request: httpx.Request) -> None: ...


class BasicAuth:
    """HTTP Basic authentication with a username and password."""

    def __init__(self, username: str, password: str):
        if not username:
            msg = "username cannot be empty"
            raise ValueError(msg)
        self.username = username
        self._password = password

    def __repr__(self) -> str:
        return f"BasicAuth(username={self.username!r})"

    def apply(self, request: httpx.Request) -> None:
        """Set the ``Authorization: Basic`` header on the request."""
        credentials = f"{self.username}:{self._password}".encode()
        encoded = base64.b64encode(credentials).decode("ascii")
        request.headers["Authorization"] = f"Basic {encoded}"


class TokenAuth:
    """Bearer token authentication (OAuth2 personal access token)."""

    def __init__(self, token: str):
        token = token.strip()
        if not token:
            msg = "token cannot be empty"
            raise ValueError(msg)
        self._token = token

    def __repr__(self) -> str:
        return "TokenAuth(token=***)"

    def apply(self, request: httpx.Request) -> None:
        """Set the ``Authorization: Bearer`` header on the request."""
        request.headers["Authorization"] = f"Bearer {self._token}"
