"""Host endpoints."""

from typing import Any

from ..types import Host, Page
from .base import API_ROOT, Service, validate_params

ENDPOINT = f"{API_ROOT}/hosts/"

CREATE_REQUIRED = ("name", "inventory")


class HostService(Service):
    """Manage hosts and their group membership."""

    def list(self, params: dict[str, str] | None = None) -> Page[Host]:
        """Fetch one page of hosts."""
        return self.transport.get(ENDPOINT, Page[Host], params) or Page[Host]()

    def get(self, host_id: int) -> Host | None:
        """Fetch a single host by id."""
        return self.transport.get(f"{ENDPOINT}{host_id}", Host)

    def create(self, data: dict[str, Any]) -> Host | None:
        """Create a host.

        Args:
            data: Host fields: name and inventory (required), description,
                enabled, instance_id and variables (JSON or YAML text).

        Raises:
            MissingParamsError: If name or inventory is absent.
        """
        validate_params(data, CREATE_REQUIRED)
        return self.transport.post(ENDPOINT, data, Host)

    def update(self, host_id: int, data: dict[str, Any]) -> Host | None:
        """Partially update a host."""
        return self.transport.patch(f"{ENDPOINT}{host_id}", data, Host)

    def delete(self, host_id: int) -> None:
        """Delete a host."""
        self.transport.delete(f"{ENDPOINT}{host_id}")

    def associate_group(self, host_id: int, data: dict[str, Any]) -> Host | None:
        """Add a host to the group whose id is given as ``data["id"]``."""
        return self._change_group(host_id, {**data, "associate": True})

    def disassociate_group(self, host_id: int, data: dict[str, Any]) -> Host | None:
        """Remove a host from the group whose id is given as ``data["id"]``."""
        return self._change_group(host_id, {**data, "disassociate": True})

    def _change_group(self, host_id: int, payload: dict[str, Any]) -> Host | None:
        validate_params(payload, ("id",))
        return self.transport.post(f"{ENDPOINT}{host_id}/groups/", payload, Host)
