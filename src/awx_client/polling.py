"""Timeout-bounded predicate polling.

Provides :func:`wait_for`, which repeatedly runs a predicate on a fixed
interval until it reports completion, raises, or the timeout elapses, and
:func:`wait_for_success_job_finish`, which uses it to await a job reaching
a terminal status.
"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

import structlog

from .rest.errors import JobFailedError, WaitTimeoutError
from .types import JobStatus

if TYPE_CHECKING:
    from .client import AwxClient

logger = structlog.get_logger(__name__)

DEFAULT_INTERVAL = 1.0

# Any negative timeout disables the deadline.
WAIT_FOREVER = -1

Predicate: TypeAlias = Callable[[], bool]


@dataclass
class _PredicateResult:
    done: bool = False
    error: Exception | None = None


def _tick_limit(deadline: float | None, interval: float) -> float | None:
    """Seconds one tick may spend in the predicate; None means no limit."""
    if deadline is None:
        return None
    return max(deadline - time.monotonic(), interval)


def _run_predicate(predicate: Predicate, wait_seconds: float | None) -> bool:
    """Run predicate on a daemon thread and wait at most wait_seconds for it.

    A predicate still running when the wait ends is abandoned; its result
    is discarded whenever it finishes.

    Raises:
        WaitTimeoutError: If the predicate did not finish in time.
        Exception: Whatever the predicate raised.
    """
    result = _PredicateResult()
    finished = threading.Event()

    def target():
        try:
            result.done = bool(predicate())
        except Exception as exc:  # noqa: BLE001
            result.error = exc
        finally:
            finished.set()

    worker = threading.Thread(target=target, name="awx-wait-predicate", daemon=True)
    worker.start()

    if not finished.wait(wait_seconds):
        msg = "a timeout occurred while waiting for the predicate"
        raise WaitTimeoutError(msg)
    if result.error is not None:
        raise result.error
    return result.done


def wait_for(
    timeout: float,
    predicate: Predicate,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Poll predicate once per interval until it returns True.

    The deadline is checked at the top of every tick, before sleeping. Each
    predicate call runs on its own thread and may take the time left before
    the deadline, but never less than one interval. A hung predicate thus
    holds the caller at most one interval past the deadline, and the last
    tick before it still gets a full interval to report success.

    Args:
        timeout: Seconds before giving up. Negative polls until the
            predicate succeeds or raises, with no limit per call.
        predicate: Zero-argument callable returning True once the awaited
            condition holds. It signals a failure state by raising.
        interval: Seconds to sleep before each predicate call.

    Raises:
        WaitTimeoutError: If the timeout elapsed first.
        Exception: The exception raised by the predicate, unchanged.
    """
    start = time.monotonic()
    deadline = start + timeout if timeout >= 0 else None
    tick = 0

    while True:
        if deadline is not None and time.monotonic() >= deadline:
            msg = f"a timeout occurred after {timeout}s ({tick} checks)"
            raise WaitTimeoutError(msg)

        time.sleep(interval)
        tick += 1

        if _run_predicate(predicate, _tick_limit(deadline, interval)):
            logger.debug(
                "Wait condition satisfied",
                ticks=tick,
                elapsed_seconds=round(time.monotonic() - start, 3),
            )
            return


def wait_for_success_job_finish(
    client: "AwxClient",
    job_id: int,
    timeout: float,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Wait until a job finishes, succeeding only on the ``successful`` status.

    Each status request carries the same per-tick limit as the predicate
    call, so an unresponsive server aborts the request instead of leaving it
    running.

    Args:
        client: Client used to fetch the job.
        job_id: Job to watch.
        timeout: Seconds before giving up; negative waits forever.
        interval: Seconds between status checks.

    Raises:
        JobFailedError: If the job ends as failed, error or canceled.
        WaitTimeoutError: If the job is still running when the timeout elapses.
        AwxError: If fetching the job status fails.
    """
    deadline = time.monotonic() + timeout if timeout >= 0 else None

    def job_finished() -> bool:
        job = client.jobs.get(job_id, timeout=_tick_limit(deadline, interval))
        logger.debug("Polled job status", job_id=job_id, status=job.status)

        if job.status == JobStatus.SUCCESSFUL:
            return True
        if job.status in (JobStatus.FAILED, JobStatus.ERROR, JobStatus.CANCELED):
            raise JobFailedError(job_id, job.status)
        return False

    wait_for(timeout, job_finished, interval=interval)
    logger.info("Job finished successfully", job_id=job_id)
