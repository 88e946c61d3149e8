"""Exceptions raised by the AWX REST API client.

Every failure surfaces as a subclass of :class:`AwxError`. Errors that wrap
a lower-level failure (httpx, json, pydantic) chain it as ``__cause__``.
"""


class AwxError(Exception):
    """Base class for all client errors."""


class RequestBuildError(AwxError):
    """Raised when the request URL cannot be constructed."""


class SerializationError(AwxError):
    """Raised when a request payload cannot be encoded as JSON."""


class NetworkError(AwxError):
    """Raised when the HTTP exchange itself fails (DNS, connect, TLS, timeout)."""


class BodyReadError(AwxError):
    """Raised when the response body cannot be fully read."""


class StatusError(AwxError):
    """Raised for any response status outside the 2xx range.

    Attributes:
        status_code: Numeric HTTP status code.
        body: Raw response body text, not parsed.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"response code {status_code}, resp: {body}")


class DecodeError(AwxError):
    """Raised when a successful response body does not match the expected type."""


class MissingParamsError(AwxError):
    """Raised before a request when mandatory payload fields are absent."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"mandatory input arguments are absent: {missing}")


class InvalidJobIdError(AwxError):
    """Raised when a launch response carries no usable job id."""


class WaitTimeoutError(AwxError):
    """Raised when polling ends without the predicate reaching a result."""


class JobFailedError(AwxError):
    """Raised when an awaited job finishes in a non-successful terminal status."""

    def __init__(self, job_id: int, status: str):
        self.job_id = job_id
        self.status = status
        super().__init__(f"job {job_id} finished with bad status: {status}")
