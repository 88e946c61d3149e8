"""Tests for wait_for and wait_for_success_job_finish.

Timings are scaled down through the interval argument; assertions allow a
generous margin for thread scheduling.
"""

import threading
import time
from unittest.mock import MagicMock

import pytest

from awx_client import client, polling, services, types
from awx_client.rest import errors

INTERVAL = 0.05
SLACK = 0.25


class BadTerminalState(Exception):
    """Stand-in for a predicate-reported failure."""


# ---------------------------------------------------------------------------
# wait_for
# ---------------------------------------------------------------------------


def test_wait_for_returns_after_first_successful_tick():
    """A predicate satisfied on the first tick returns within one interval."""
    predicate = MagicMock(return_value=True)

    start = time.monotonic()
    polling.wait_for(5, predicate, interval=INTERVAL)
    elapsed = time.monotonic() - start

    predicate.assert_called_once_with()
    assert elapsed < INTERVAL + SLACK


def test_wait_for_times_out_when_never_satisfied():
    """An always-false predicate ends in a timeout at or after the deadline."""
    timeout = 0.3
    predicate = MagicMock(return_value=False)

    start = time.monotonic()
    with pytest.raises(errors.WaitTimeoutError, match="timeout"):
        polling.wait_for(timeout, predicate, interval=INTERVAL)
    elapsed = time.monotonic() - start

    assert elapsed >= timeout
    assert elapsed < timeout + INTERVAL + SLACK
    assert predicate.call_count >= 1


def test_wait_for_propagates_predicate_error_exactly():
    """An error raised on tick 3 is re-raised unchanged, never reported as success."""
    error = BadTerminalState("job finished with bad status: failed")
    calls = []

    def predicate() -> bool:
        calls.append(1)
        if len(calls) == 3:  # noqa: PLR2004
            raise error
        return False

    with pytest.raises(BadTerminalState) as excinfo:
        polling.wait_for(5, predicate, interval=INTERVAL)

    assert excinfo.value is error
    assert len(calls) == 3  # noqa: PLR2004


def test_wait_for_keeps_polling_until_satisfied():
    """False results lead to further ticks until the predicate returns True."""
    predicate = MagicMock(side_effect=[False, False, False, True])
    polling.wait_for(5, predicate, interval=0.01)
    assert predicate.call_count == 4  # noqa: PLR2004


def test_wait_for_last_tick_gets_a_full_interval():
    """With timeout equal to interval, the only tick can still report success."""
    interval = 0.1

    def predicate() -> bool:
        time.sleep(0.005)
        return True

    for _ in range(5):
        polling.wait_for(interval, predicate, interval=interval)


def test_wait_for_zero_timeout_never_calls_predicate():
    """With a zero timeout the deadline has passed before the first tick."""
    predicate = MagicMock(return_value=True)
    with pytest.raises(errors.WaitTimeoutError):
        polling.wait_for(0, predicate, interval=INTERVAL)
    predicate.assert_not_called()


def test_wait_for_abandons_hung_predicate():
    """A predicate that blocks past the deadline does not block the caller."""
    release = threading.Event()
    finished = threading.Event()

    def predicate() -> bool:
        release.wait(10)
        finished.set()
        return True

    start = time.monotonic()
    try:
        with pytest.raises(errors.WaitTimeoutError):
            polling.wait_for(0.2, predicate, interval=INTERVAL)
        elapsed = time.monotonic() - start
        assert elapsed < 0.2 + INTERVAL + SLACK
        assert not finished.is_set()
    finally:
        release.set()


def test_wait_for_negative_timeout_polls_until_done():
    """A negative timeout disables the deadline."""
    predicate = MagicMock(side_effect=[False] * 9 + [True])
    polling.wait_for(polling.WAIT_FOREVER, predicate, interval=0.01)
    assert predicate.call_count == 10  # noqa: PLR2004


def test_wait_for_negative_timeout_does_not_limit_slow_predicate():
    """Without a deadline a slow predicate call is waited for, not cut off."""

    def predicate() -> bool:
        time.sleep(0.2)
        return True

    polling.wait_for(-5, predicate, interval=0.01)


def test_wait_for_negative_timeout_still_propagates_errors():
    """Errors end an unbounded wait."""
    predicate = MagicMock(side_effect=[False, BadTerminalState("boom")])
    with pytest.raises(BadTerminalState):
        polling.wait_for(-1, predicate, interval=0.01)


# ---------------------------------------------------------------------------
# wait_for_success_job_finish
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_client() -> MagicMock:
    """Mock AwxClient whose jobs.get return values are set per test."""
    mock = MagicMock(spec=client.AwxClient)
    mock.jobs = MagicMock(spec=services.JobService)
    return mock


def _jobs(*statuses: str) -> list[types.Job]:
    return [types.Job(id=42, status=status) for status in statuses]


def test_wait_for_job_succeeds_after_transitions(mock_client: MagicMock):
    """new -> pending -> running -> successful over four polls returns normally."""
    mock_client.jobs.get.side_effect = _jobs("new", "pending", "running", "successful")

    polling.wait_for_success_job_finish(mock_client, 42, 5, interval=0.01)

    assert mock_client.jobs.get.call_count == 4  # noqa: PLR2004
    assert mock_client.jobs.get.call_args.args == (42,)


@pytest.mark.parametrize("bad_status", ["failed", "error", "canceled"])
def test_wait_for_job_bad_terminal_status_raises(mock_client: MagicMock, bad_status: str):
    """A job ending in a failure status raises an error naming that status."""
    mock_client.jobs.get.side_effect = _jobs("new", "running", bad_status, "successful")

    with pytest.raises(errors.JobFailedError, match=bad_status) as excinfo:
        polling.wait_for_success_job_finish(mock_client, 42, 5, interval=0.01)

    assert excinfo.value.status == bad_status
    assert excinfo.value.job_id == 42  # noqa: PLR2004
    assert mock_client.jobs.get.call_count == 3  # noqa: PLR2004


def test_wait_for_job_waiting_status_keeps_polling(mock_client: MagicMock):
    """Non-terminal statuses such as waiting are polled through."""
    mock_client.jobs.get.side_effect = _jobs("waiting", "waiting", "successful")
    polling.wait_for_success_job_finish(mock_client, 42, 5, interval=0.01)
    assert mock_client.jobs.get.call_count == 3  # noqa: PLR2004


def test_wait_for_job_fetch_error_propagates(mock_client: MagicMock):
    """A failed status request ends the wait with that error."""
    failure = errors.StatusError(502, "Bad Gateway")
    mock_client.jobs.get.side_effect = failure

    with pytest.raises(errors.StatusError) as excinfo:
        polling.wait_for_success_job_finish(mock_client, 42, 5, interval=0.01)
    assert excinfo.value is failure


def test_wait_for_job_times_out(mock_client: MagicMock):
    """A job that never finishes ends in a timeout."""
    mock_client.jobs.get.return_value = types.Job(id=42, status="running")
    with pytest.raises(errors.WaitTimeoutError):
        polling.wait_for_success_job_finish(mock_client, 42, 0.2, interval=INTERVAL)


def test_wait_for_job_bounds_requests_by_remaining_time(mock_client: MagicMock):
    """Each status request carries a timeout no longer than the overall one."""
    mock_client.jobs.get.side_effect = _jobs("running", "successful")

    polling.wait_for_success_job_finish(mock_client, 42, 5, interval=0.01)

    for call in mock_client.jobs.get.call_args_list:
        request_timeout = call.kwargs["timeout"]
        assert 0 < request_timeout <= 5  # noqa: PLR2004


def test_wait_for_job_last_request_is_not_starved(mock_client: MagicMock):
    """The status request of the last tick keeps at least one interval to answer."""
    interval = 0.1
    mock_client.jobs.get.return_value = types.Job(id=42, status="successful")

    polling.wait_for_success_job_finish(mock_client, 42, interval, interval=interval)

    assert mock_client.jobs.get.call_args.kwargs["timeout"] >= interval


def test_wait_for_job_without_deadline_uses_default_timeout(mock_client: MagicMock):
    """With a negative timeout requests fall back to the transport default."""
    mock_client.jobs.get.side_effect = _jobs("successful")
    polling.wait_for_success_job_finish(mock_client, 42, -1, interval=0.01)
    assert mock_client.jobs.get.call_args.kwargs["timeout"] is None


def test_terminal_statuses_cover_every_finished_state():
    """The terminal set is exactly successful, failed, error and canceled."""
    assert {s.value for s in types.TERMINAL_JOB_STATUSES} == {
        "successful",
        "failed",
        "error",
        "canceled",
    }
    assert types.Job(status="canceled").is_finished
    assert not types.Job(status="waiting").is_finished
