"""Unit tests for the SlackHookError hierarchy."""

import pytest

from errors import (
    ConfigurationError,
    InvalidCallbackError,
    NoDeliveryMechanismError,
    SlackHookError,
    SubprocessError,
    TransportError,
)


@pytest.mark.parametrize(
    "error_cls, code",
    [
        (ConfigurationError, "configuration_error"),
        (InvalidCallbackError, "invalid_callback"),
        (NoDeliveryMechanismError, "no_delivery_mechanism"),
        (TransportError, "transport_error"),
        (SubprocessError, "subprocess_error"),
    ],
)
def test_error_codes(error_cls, code):
    e = error_cls("boom")
    assert isinstance(e, SlackHookError)
    assert e.error_code == code
    assert e.to_dict() == {"error": "boom", "code": code}


def test_configuration_error_carries_value():
    e = ConfigurationError("Invalid Slack webhook x", value="x")
    assert e.value == "x"
    assert e.to_dict()["details"] == {"value": "x"}


def test_details_are_optional():
    assert "details" not in TransportError("down").to_dict()
    assert SubprocessError("gone", details={"curl_bin": "curl"}).details == {"curl_bin": "curl"}
