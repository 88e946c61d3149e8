"""AWX client facade.

Wires one shared :class:`~awx_client.rest.Transport` into every resource
service, so all calls issued through a client use the same base URL,
credentials and HTTP connection settings.
"""

import httpx
import structlog

from . import polling
from .rest import DEFAULT_TIMEOUT, AuthProvider, BasicAuth, TokenAuth, Transport
from .services import (
    GroupService,
    HostService,
    InventoryService,
    JobService,
    JobTemplateService,
    OrganizationService,
)

logger = structlog.get_logger(__name__)


class AwxClient:
    """Client for the AWX / automation controller REST API.

    Services are exposed as attributes: ``job_templates``, ``jobs``,
    ``inventories``, ``hosts``, ``groups`` and ``organizations``.
    Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: AWX server origin (e.g., "https://awx.example.com").
            auth: Credentials applied to every request.
            timeout: Default request timeout in seconds.
            verify_ssl: Verify TLS certificates.
            http_client: Optional shared httpx client to send requests with.
        """
        self.transport = Transport(
            base_url=base_url,
            auth=auth,
            http_client=http_client,
            timeout=timeout,
            verify_ssl=verify_ssl,
        )
        self.job_templates = JobTemplateService(self.transport)
        self.jobs = JobService(self.transport)
        self.inventories = InventoryService(self.transport)
        self.hosts = HostService(self.transport)
        self.groups = GroupService(self.transport)
        self.organizations = OrganizationService(self.transport)
        logger.debug("Created AWX client", base_url=self.transport.base_url, auth=repr(auth))

    @classmethod
    def with_basic_auth(
        cls,
        base_url: str,
        username: str,
        password: str,
        **kwargs,
    ) -> "AwxClient":
        """Create a client authenticating with HTTP Basic credentials."""
        return cls(base_url, BasicAuth(username, password), **kwargs)

    @classmethod
    def with_token(cls, base_url: str, token: str, **kwargs) -> "AwxClient":
        """Create a client authenticating with a bearer token."""
        return cls(base_url, TokenAuth(token), **kwargs)

    @property
    def base_url(self) -> str:
        """Base URL of the AWX server, without a trailing slash."""
        return self.transport.base_url

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and close the HTTP client."""
        self.close()

    def close(self):
        """Release the HTTP connections owned by the transport."""
        self.transport.close()

    def wait_for_job(
        self,
        job_id: int,
        timeout: float,
        interval: float = polling.DEFAULT_INTERVAL,
    ) -> None:
        """Block until a job finishes successfully.

        See :func:`awx_client.polling.wait_for_success_job_finish`.
        """
        polling.wait_for_success_job_finish(self, job_id, timeout, interval=interval)
