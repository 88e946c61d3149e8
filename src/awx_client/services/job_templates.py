"""Job template endpoints."""

from typing import Any

import structlog

from ..rest.errors import InvalidJobIdError
from ..types import JobLaunch, JobTemplate, Page
from .base import API_ROOT, Service, validate_params

logger = structlog.get_logger(__name__)

ENDPOINT = f"{API_ROOT}/job_templates/"

CREATE_REQUIRED = ("name", "job_type", "inventory", "project")


class JobTemplateService(Service):
    """List, create, update, delete and launch job templates."""

    def list(self, params: dict[str, str] | None = None) -> Page[JobTemplate]:
        """Fetch one page of job templates, filtered by query params."""
        result = self.transport.get(ENDPOINT, Page[JobTemplate], params)
        return result or Page[JobTemplate]()

    def create(self, data: dict[str, Any]) -> JobTemplate | None:
        """Create a job template.

        Args:
            data: Template fields; name, job_type, inventory and project
                are required.

        Raises:
            MissingParamsError: If a required field is absent.
        """
        validate_params(data, CREATE_REQUIRED)
        return self.transport.post(ENDPOINT, data, JobTemplate)

    def update(self, template_id: int, data: dict[str, Any]) -> JobTemplate | None:
        """Partially update a job template."""
        return self.transport.patch(f"{ENDPOINT}{template_id}", data, JobTemplate)

    def delete(self, template_id: int) -> None:
        """Delete a job template."""
        self.transport.delete(f"{ENDPOINT}{template_id}")

    def launch(self, template_id: int, data: dict[str, Any] | None = None) -> JobLaunch:
        """Launch a job from a template.

        ``data`` may carry launch-time overrides such as ``extra_vars``,
        ``inventory``, ``limit`` (host, ``host1,host2``, ``group``,
        ``group1:group2`` or ``group1:!group4``), ``job_tags``,
        ``skip_tags``, ``job_type``, ``verbosity``, ``diff_mode`` and
        ``credentials``, as far as the template prompts for them.

        Returns:
            Launch result holding the new job id.

        Raises:
            InvalidJobIdError: If the response does not carry a job id,
                whatever the HTTP status was.
        """
        result = self.transport.post(
            f"{ENDPOINT}{template_id}/launch/",
            data or {},
            JobLaunch,
        )
        if result is None or result.job == 0:
            msg = "invalid job id 0"
            raise InvalidJobIdError(msg)

        logger.info("Launched job template", template_id=template_id, job_id=result.job)
        return result
