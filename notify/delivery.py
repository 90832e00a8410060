"""Pick how a payload reaches the webhook: requests, the curl binary, or a callback."""

from __future__ import annotations

import functools
import importlib.util
import inspect
import logging
import threading
from typing import Any, Callable, Mapping, Optional, Sequence

from errors import InvalidCallbackError, NoDeliveryMechanismError
from notify.curl_bin import DEFAULT_TIMEOUT, find_curl_bin, post_with_curl_bin, search_dirs

logger = logging.getLogger(__name__)

DeliveryCallback = Callable[[str, str], Any]
Probe = Callable[[], Optional[DeliveryCallback]]


def _accepts_payload_and_webhook(callback: Any) -> bool:
    if not callable(callback):
        return False
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # Some builtins expose no signature; being callable is all we can check.
        return True
    try:
        signature.bind("{}", "https://hooks.slack.com/services/")
    except TypeError:
        return False
    return True


class DeliveryResolver:
    """
    Resolve and cache the delivery callback for a process.

    Probes run in order and the first one returning a callback wins. The
    choice, and the located curl binary, are kept until ``reset()``.
    """

    def __init__(
        self,
        probes: Optional[Sequence[Probe]] = None,
        *,
        verify_tls: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.verify_tls = verify_tls
        self.timeout = timeout
        self.env = env
        self.probes = list(probes) if probes is not None else [self.native_probe, self.curl_bin_probe]
        self._callback: Optional[DeliveryCallback] = None
        self._curl_bin: Optional[str] = None
        self._lock = threading.Lock()

    def set_callback(self, callback: DeliveryCallback) -> None:
        """Use ``callback(json, webhook)`` for every following post."""
        if not _accepts_payload_and_webhook(callback):
            raise InvalidCallbackError(
                "Invalid callback: it must be callable with (json, webhook) arguments"
            )
        self._callback = callback

    def reset(self) -> None:
        with self._lock:
            self._callback = None
            self._curl_bin = None

    def native_probe(self) -> Optional[DeliveryCallback]:
        if importlib.util.find_spec("requests") is None:
            return None
        # Imported here so the curl fallback still works where requests is missing.
        from transport import post_with_requests

        return functools.partial(post_with_requests, timeout=self.timeout, verify_tls=self.verify_tls)

    def curl_bin(self) -> Optional[str]:
        """Return the located curl binary, searching only on first use."""
        if self._curl_bin is None:
            self._curl_bin = find_curl_bin(search_dirs(self.env))
            if self._curl_bin:
                logger.debug("Found curl binary at %s", self._curl_bin)
        return self._curl_bin

    def curl_bin_probe(self) -> Optional[DeliveryCallback]:
        curl_bin = self.curl_bin()
        if not curl_bin:
            return None
        return functools.partial(post_with_curl_bin, curl_bin=curl_bin, timeout=self.timeout)

    def resolve(self) -> DeliveryCallback:
        callback = self._callback
        if callback is not None:
            return callback
        with self._lock:
            if self._callback is None:
                for probe in self.probes:
                    found = probe()
                    if self._callback is not None:
                        # set_callback() ran while probing; the override wins.
                        break
                    if found is not None:
                        logger.debug("Delivering webhook posts with %s", getattr(probe, "__name__", probe))
                        self._callback = found
                        break
            if self._callback is None:
                raise NoDeliveryMechanismError(
                    "No callback provided for posting to Slack. Use set_callback() to set"
                    " one; the callback takes two arguments: the json string with the"
                    " message payload, and the webhook url to post to."
                )
            return self._callback

    def post(self, json_payload: str, webhook: str) -> Any:
        return self.resolve()(json_payload, webhook)


default_resolver = DeliveryResolver()


def set_callback(callback: DeliveryCallback) -> None:
    """Override delivery for every notifier using the process default resolver."""
    default_resolver.set_callback(callback)
