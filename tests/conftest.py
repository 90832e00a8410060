"""Shared fixtures: a resolver that never touches the network or curl."""

import pytest

from notify.delivery import DeliveryResolver, default_resolver

WEBHOOK = "https://hooks.slack.com/services/T000/B000/XXXX"


class RecordingCallback:
    """Delivery callback that remembers every (json, webhook) it was handed."""

    def __init__(self, reply="ok"):
        self.calls = []
        self.reply = reply

    def __call__(self, json_payload, webhook):
        self.calls.append((json_payload, webhook))
        return self.reply


@pytest.fixture(autouse=True)
def reset_default_resolver():
    """Keep the process-wide resolver from leaking state between tests."""
    default_resolver.reset()
    yield
    default_resolver.reset()


@pytest.fixture
def recorder():
    return RecordingCallback()


@pytest.fixture
def resolver(recorder):
    r = DeliveryResolver(probes=[])
    r.set_callback(recorder)
    return r


@pytest.fixture
def fake_curl(tmp_path):
    """Create ``<tmp>/bin/curl`` as an executable file and return its directory."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    curl = bin_dir / "curl"
    curl.write_text("#!/bin/sh\necho ok\n")
    curl.chmod(0o755)
    return bin_dir
