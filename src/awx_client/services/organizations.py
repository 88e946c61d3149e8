"""Organization endpoints."""

from ..types import Organization, Page
from .base import API_ROOT, Service

ENDPOINT = f"{API_ROOT}/organizations/"


class OrganizationService(Service):
    """Read access to organizations."""

    def list(self, params: dict[str, str] | None = None) -> Page[Organization]:
        """Fetch one page of organizations."""
        result = self.transport.get(ENDPOINT, Page[Organization], params)
        return result or Page[Organization]()
