"""AWX REST API transport package.

Provides the HTTP transport that turns request descriptors into
authenticated exchanges and validated responses, the authentication
providers it applies, and the exceptions it raises.

Exports:
    Transport: HTTP transport with authentication and error handling.
    APIRequest: Immutable description of one HTTP exchange.
    BasicAuth, TokenAuth: Authentication providers.
    errors: Module containing the exception hierarchy.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
"""

from . import errors
from .auth import AuthProvider, BasicAuth, TokenAuth
from .transport import DEFAULT_TIMEOUT, APIRequest, Transport

__all__ = [
    "DEFAULT_TIMEOUT",
    "APIRequest",
    "AuthProvider",
    "BasicAuth",
    "TokenAuth",
    "Transport",
    "errors",
]
