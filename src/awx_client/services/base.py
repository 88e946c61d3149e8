"""Shared pieces of the resource services."""

from collections.abc import Iterable, Mapping
from typing import Any

from ..rest import Transport
from ..rest.errors import MissingParamsError

API_ROOT = "/api/v2"


def validate_params(data: Mapping[str, Any], mandatory_fields: Iterable[str]) -> None:
    """Check that every mandatory field is present in a payload.

    Args:
        data: Request payload.
        mandatory_fields: Keys that must be present (values are not checked).

    Raises:
        MissingParamsError: Listing every absent field, in the given order.
    """
    missing = [key for key in mandatory_fields if key not in data]
    if missing:
        raise MissingParamsError(missing)


class Service:
    """Base class binding a resource service to a transport."""

    def __init__(self, transport: Transport):
        self.transport = transport
