"""Tests for the shared payload validation helper."""

import pytest

from awx_client import services
from awx_client.rest import errors


def test_validate_params_reports_missing_in_order():
    """Every absent key is listed, keeping the requested order."""
    with pytest.raises(errors.MissingParamsError) as excinfo:
        services.validate_params({"b": None}, ["a", "b", "c"])
    assert excinfo.value.missing == ["a", "c"]
    assert "mandatory input arguments are absent" in str(excinfo.value)


def test_validate_params_accepts_present_none_values():
    """Presence is checked, not truthiness."""
    services.validate_params({"name": None, "inventory": 0}, ["name", "inventory"])


def test_validate_params_no_mandatory_fields():
    services.validate_params({}, [])
