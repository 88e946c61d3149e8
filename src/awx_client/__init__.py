"""AWX client.

Typed client for the AWX / Ansible automation controller REST API covering
job templates, jobs, inventories, hosts, groups and organizations, with a
polling helper to await job completion.
"""

__version__ = "0.1.0"

from .client import AwxClient
from .polling import WAIT_FOREVER, wait_for, wait_for_success_job_finish
from .rest import APIRequest, BasicAuth, TokenAuth, Transport
from .rest.errors import (
    AwxError,
    BodyReadError,
    DecodeError,
    InvalidJobIdError,
    JobFailedError,
    MissingParamsError,
    NetworkError,
    RequestBuildError,
    SerializationError,
    StatusError,
    WaitTimeoutError,
)
from .types import TERMINAL_JOB_STATUSES, JobStatus

__all__ = [
    "TERMINAL_JOB_STATUSES",
    "WAIT_FOREVER",
    "APIRequest",
    "AwxClient",
    "AwxError",
    "BasicAuth",
    "BodyReadError",
    "DecodeError",
    "InvalidJobIdError",
    "JobFailedError",
    "JobStatus",
    "MissingParamsError",
    "NetworkError",
    "RequestBuildError",
    "SerializationError",
    "StatusError",
    "TokenAuth",
    "Transport",
    "WaitTimeoutError",
    "wait_for",
    "wait_for_success_job_finish",
]
