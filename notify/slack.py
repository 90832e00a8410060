"""Slack incoming-webhook notifier."""

from __future__ import annotations

import json
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from errors import ConfigurationError
from models import MessageFormat
from notify.delivery import DeliveryResolver, default_resolver

# hooks.slack.com in practice; the platform domain itself is not pinned.
WEBHOOK_PATTERN = re.compile(r"^https://hooks\.[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+/services/[\w/]+$", re.ASCII)

FormatLike = Union[Mapping[str, Any], MessageFormat, None]


def _as_mapping(fmt: FormatLike) -> Mapping[str, Any]:
    if fmt is None:
        return {}
    if isinstance(fmt, MessageFormat):
        return fmt.as_dict()
    return fmt


def build_payload(message: str, fmt: FormatLike = None, defaults: FormatLike = None) -> Dict[str, Any]:
    """
    Merge the message text, per-call format and defaults into one payload.

    Later sources win: defaults, then ``{"text": message}``, then ``fmt``.
    """
    payload: Dict[str, Any] = dict(_as_mapping(defaults))
    payload["text"] = message
    payload.update(_as_mapping(fmt))
    return payload


class Notifier:
    """Posts messages to one Slack webhook, optionally with default formatting."""

    def __init__(
        self,
        webhook: str,
        defaults: FormatLike = None,
        *,
        resolver: Optional[DeliveryResolver] = None,
    ) -> None:
        webhook = (webhook or "").strip()
        if not webhook:
            raise ConfigurationError("Empty webhook")
        if not WEBHOOK_PATTERN.match(webhook):
            raise ConfigurationError(f"Invalid Slack webhook {webhook}", value=webhook)
        self._webhook = webhook
        self._defaults: Mapping[str, Any] = MappingProxyType(dict(_as_mapping(defaults)))
        self._resolver = resolver or default_resolver

    @property
    def defaults(self) -> Mapping[str, Any]:
        return self._defaults

    def send(self, message: str, fmt: FormatLike = None) -> Any:
        """Post ``message`` with ``fmt`` layered over the notifier defaults."""
        payload = build_payload(message, fmt, self._defaults)
        return self.post(json.dumps(payload))

    def post(self, json_payload: str) -> Any:
        """Post an already JSON-encoded payload to the webhook."""
        return self._resolver.post(json_payload, self._webhook)


def send_message(webhook_url: Optional[str], text: str, fmt: FormatLike = None) -> Any:
    """Send a message to Slack if a webhook URL is provided."""
    if not webhook_url:
        # No webhook means notifications are disabled, so quietly skip the request.
        return None
    return Notifier(webhook_url).send(text, fmt)
