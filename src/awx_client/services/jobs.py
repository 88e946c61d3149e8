"""Job endpoints."""

from typing import Any

import structlog

from ..rest.errors import DecodeError
from ..rest.transport import Timeout
from ..types import CancelJobResponse, HostSummary, Job, JobEvent, JobLaunch, Page
from .base import API_ROOT, Service

logger = structlog.get_logger(__name__)

ENDPOINT = f"{API_ROOT}/jobs/"


class JobService(Service):
    """Inspect, cancel and relaunch jobs."""

    def get(
        self,
        job_id: int,
        params: dict[str, str] | None = None,
        *,
        timeout: Timeout = None,
    ) -> Job:
        """Fetch the details of a job.

        Args:
            job_id: Job to fetch.
            params: Optional query parameters.
            timeout: Per-request timeout overriding the transport default.

        Raises:
            DecodeError: If the server answered with an empty body.
        """
        result = self.transport.get(f"{ENDPOINT}{job_id}/", Job, params, timeout=timeout)
        if result is None:
            msg = f"empty response for job {job_id}"
            raise DecodeError(msg)
        return result

    def cancel(
        self,
        job_id: int,
        data: dict[str, Any] | None = None,
    ) -> CancelJobResponse | None:
        """Request cancellation of a running job.

        AWX answers 202 with an empty body, in which case None is returned.
        """
        result = self.transport.post(
            f"{ENDPOINT}{job_id}/cancel/",
            data or {},
            CancelJobResponse,
        )
        logger.info("Requested job cancel", job_id=job_id)
        return result

    def relaunch(self, job_id: int, data: dict[str, Any] | None = None) -> JobLaunch | None:
        """Start a new run of a job with the same parameters."""
        return self.transport.post(f"{ENDPOINT}{job_id}/relaunch/", data or {}, JobLaunch)

    def get_host_summaries(
        self,
        job_id: int,
        params: dict[str, str] | None = None,
    ) -> Page[HostSummary]:
        """Fetch per-host result counters of a job."""
        endpoint = f"{ENDPOINT}{job_id}/job_host_summaries/"
        return self.transport.get(endpoint, Page[HostSummary], params) or Page[HostSummary]()

    def get_job_events(
        self,
        job_id: int,
        params: dict[str, str] | None = None,
    ) -> Page[JobEvent]:
        """Fetch one page of the events emitted by a job."""
        endpoint = f"{ENDPOINT}{job_id}/job_events/"
        return self.transport.get(endpoint, Page[JobEvent], params) or Page[JobEvent]()
