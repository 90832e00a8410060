"""Native HTTP delivery to a webhook using requests."""

from __future__ import annotations

from typing import Optional

import requests

from errors import TransportError

DEFAULT_USER_AGENT = "slackhook/1.0 (+https://api.slack.com/messaging/webhooks)"
DEFAULT_TIMEOUT = 15
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_form_body(json_payload: str) -> bytes:
    """Return ``payload=<json>`` with the JSON embedded as-is, not URL-encoded."""
    return ("payload=" + json_payload).encode("utf-8")


def post_with_requests(
    json_payload: str,
    webhook: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
    verify_tls: bool = True,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """POST the payload form to the webhook and return the response body.

    The status code is not inspected; Slack answers with a short text body
    ("ok" or an error token) which is handed back to the caller untouched.
    """
    client = session or requests
    headers = {
        "Content-Type": FORM_CONTENT_TYPE,
        "User-Agent": user_agent,
    }
    try:
        response = client.post(
            webhook,
            data=build_form_body(json_payload),
            headers=headers,
            timeout=timeout,
            verify=verify_tls,
        )
    except requests.RequestException as exc:
        raise TransportError(f"POST to webhook failed: {exc}") from exc
    return response.text
