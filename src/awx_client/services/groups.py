"""Group endpoints.

Each group returned by the API carries its database id, name, description,
owning inventory and variables (JSON or YAML text), plus the usual
``related`` and ``summary_fields`` structures.
"""

from typing import Any

from ..types import Group, Page
from .base import API_ROOT, Service, validate_params

ENDPOINT = f"{API_ROOT}/groups/"

CREATE_REQUIRED = ("name", "inventory")


class GroupService(Service):
    """Manage inventory groups, their hosts and child groups."""

    def list(self, params: dict[str, str] | None = None) -> Page[Group]:
        """Fetch one page of groups."""
        return self.transport.get(ENDPOINT, Page[Group], params) or Page[Group]()

    def list_by_inventory(self, inventory_id: int) -> Page[Group]:
        """Fetch the groups defined in one inventory."""
        endpoint = f"{API_ROOT}/inventories/{inventory_id}/groups/"
        return self.transport.get(endpoint, Page[Group]) or Page[Group]()

    def get(self, group_id: int) -> Group | None:
        """Fetch a single group by id."""
        return self.transport.get(f"{ENDPOINT}{group_id}", Group)

    def create(self, data: dict[str, Any]) -> Group | None:
        """Create a group; name and inventory are required."""
        validate_params(data, CREATE_REQUIRED)
        return self.transport.post(ENDPOINT, data, Group)

    def update(self, group_id: int, data: dict[str, Any]) -> Group | None:
        """Partially update a group."""
        return self.transport.patch(f"{ENDPOINT}{group_id}", data, Group)

    def delete(self, group_id: int) -> None:
        """Delete a group."""
        self.transport.delete(f"{ENDPOINT}{group_id}")

    def add_host(self, group_id: int, inventory_id: int, name: str) -> None:
        """Create a host named ``name`` inside the group."""
        payload = {"inventory": inventory_id, "name": name}
        self.transport.post(f"{ENDPOINT}{group_id}/hosts/", payload)

    def add_child(self, group_id: int, child_group_id: int) -> Group | None:
        """Nest an existing group under this one."""
        payload = {"id": child_group_id}
        return self.transport.post(f"{ENDPOINT}{group_id}/children/", payload, Group)
