"""Resource services for the AWX REST API.

Each module maps the operations of one AWX resource type onto endpoint
paths and payload shapes, delegating the exchange to the shared
:class:`~awx_client.rest.Transport`.
"""

from .base import Service, validate_params
from .groups import GroupService
from .hosts import HostService
from .inventories import InventoryService
from .job_templates import JobTemplateService
from .jobs import JobService
from .organizations import OrganizationService

__all__ = [
    "GroupService",
    "HostService",
    "InventoryService",
    "JobService",
    "JobTemplateService",
    "OrganizationService",
    "Service",
    "validate_params",
]
