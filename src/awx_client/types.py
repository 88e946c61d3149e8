"""Response types for the AWX REST API.

Pydantic models representing the structure of data returned by the AWX
``/api/v2/`` endpoints with minimal processing. Unknown fields are ignored
and every optional field has a default, so partial responses validate.
Timestamps are kept as the ISO strings the API returns.
"""

import enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class JobStatus(str, enum.Enum):
    """Lifecycle status of a job."""

    NEW = "new"
    PENDING = "pending"
    WAITING = "waiting"
    RUNNING = "running"
    SUCCESSFUL = "successful"
    FAILED = "failed"
    ERROR = "error"
    CANCELED = "canceled"


# A job in one of these states will not change any further.
TERMINAL_JOB_STATUSES = frozenset(
    {
        JobStatus.SUCCESSFUL,
        JobStatus.FAILED,
        JobStatus.ERROR,
        JobStatus.CANCELED,
    }
)


class Page(BaseModel, Generic[T]):
    """One page of a list endpoint."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[T] = []


class JobTemplate(BaseModel):
    """Job template definition."""

    id: int = 0
    type: str = ""
    url: str = ""
    related: dict[str, Any] = {}
    summary_fields: dict[str, Any] = {}
    created: str | None = None
    modified: str | None = None
    name: str = ""
    description: str = ""

    # Launch configuration
    job_type: str = ""
    inventory: int | None = None
    project: int | None = None
    playbook: str = ""
    scm_branch: str = ""
    forks: int = 0
    limit: str = ""
    verbosity: int = 0
    extra_vars: str = ""
    job_tags: str = ""
    skip_tags: str = ""
    timeout: int = 0
    diff_mode: bool = False
    become_enabled: bool = False
    allow_simultaneous: bool = False
    survey_enabled: bool = False
    job_slice_count: int = 1

    # Prompt-on-launch switches
    ask_variables_on_launch: bool = False
    ask_limit_on_launch: bool = False
    ask_inventory_on_launch: bool = False
    ask_credential_on_launch: bool = False

    # Last run
    last_job_run: str | None = None
    last_job_failed: bool = False
    status: str = ""


class JobLaunch(BaseModel):
    """Response of a job template launch or a job relaunch.

    ``job`` holds the id of the started job; AWX repeats it as ``id``.
    """

    job: int = 0
    id: int = 0
    type: str = ""
    url: str = ""
    status: str = ""
    ignored_fields: dict[str, Any] = {}
    extra_vars: str = ""
    limit: str = ""
    job_template: int | None = None
    inventory: int | None = None


class Job(BaseModel):
    """Job run details."""

    id: int = 0
    type: str = ""
    url: str = ""
    related: dict[str, Any] = {}
    summary_fields: dict[str, Any] = {}
    created: str | None = None
    modified: str | None = None
    name: str = ""
    description: str = ""

    job_type: str = ""
    launch_type: str = ""
    job_template: int | None = None
    inventory: int | None = None
    project: int | None = None
    playbook: str = ""
    limit: str = ""
    extra_vars: str = ""

    # Execution state
    status: str = ""
    failed: bool = False
    started: str | None = None
    finished: str | None = None
    elapsed: float = 0.0
    job_explanation: str = ""
    result_traceback: str = ""
    execution_node: str = ""

    @property
    def is_finished(self) -> bool:
        """Whether the job reached a terminal status."""
        return self.status in {status.value for status in TERMINAL_JOB_STATUSES}


class CancelJobResponse(BaseModel):
    """Response of a job cancel request."""

    can_cancel: bool = False


class HostSummary(BaseModel):
    """Per-host result counters of one job."""

    id: int = 0
    job: int | None = None
    host: int | None = None
    host_name: str = ""
    changed: int = 0
    dark: int = 0
    failures: int = 0
    ok: int = 0
    processed: int = 0
    skipped: int = 0
    ignored: int = 0
    rescued: int = 0
    failed: bool = False


class JobEvent(BaseModel):
    """Single event emitted while a job runs."""

    id: int = 0
    job: int | None = None
    counter: int = 0
    event: str = ""
    event_display: str = ""
    event_data: dict[str, Any] = {}
    event_level: int = 0
    failed: bool = False
    changed: bool = False
    host: int | None = None
    host_name: str = ""
    play: str = ""
    task: str = ""
    role: str = ""
    stdout: str = ""
    start_line: int = 0
    end_line: int = 0
    created: str | None = None


class Inventory(BaseModel):
    """Inventory of hosts and groups."""

    id: int = 0
    type: str = ""
    url: str = ""
    related: dict[str, Any] = {}
    summary_fields: dict[str, Any] = {}
    created: str | None = None
    modified: str | None = None
    name: str = ""
    description: str = ""
    organization: int | None = None
    kind: str = ""
    host_filter: str | None = None
    variables: str = ""

    # Counters
    total_hosts: int = 0
    hosts_with_active_failures: int = 0
    total_groups: int = 0
    has_inventory_sources: bool = False
    total_inventory_sources: int = 0
    inventory_sources_with_failures: int = 0
    pending_deletion: bool = False


class InventoryUpdate(BaseModel):
    """Inventory source update started by a sync request."""

    id: int = 0
    type: str = ""
    url: str = ""
    inventory_update: int = 0
    inventory_source: int | None = None
    status: str = ""


class Host(BaseModel):
    """Managed host."""

    id: int = 0
    type: str = ""
    url: str = ""
    related: dict[str, Any] = {}
    summary_fields: dict[str, Any] = {}
    created: str | None = None
    modified: str | None = None
    name: str = ""
    description: str = ""
    inventory: int | None = None
    enabled: bool = True
    instance_id: str = ""
    variables: str = ""
    has_active_failures: bool = False
    has_inventory_sources: bool = False
    last_job: int | None = None
    last_job_host_summary: int | None = None


class Group(BaseModel):
    """Inventory group."""

    id: int = 0
    type: str = ""
    url: str = ""
    related: dict[str, Any] = {}
    summary_fields: dict[str, Any] = {}
    created: str | None = None
    modified: str | None = None
    name: str = ""
    description: str = ""
    inventory: int | None = None
    variables: str = ""


class Organization(BaseModel):
    """Organization owning inventories, projects and templates."""

    id: int = 0
    type: str = ""
    url: str = ""
    related: dict[str, Any] = {}
    summary_fields: dict[str, Any] = {}
    created: str | None = None
    modified: str | None = None
    name: str = ""
    description: str = ""
    max_hosts: int = 0
    custom_virtualenv: str | None = None
    default_environment: int | None = None
