"""Message formatting models used across slackhook."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple


def _compact(obj: Any) -> Dict[str, Any]:
    # Unset values are left out of the wire payload rather than sent as null.
    return {f.name: getattr(obj, f.name) for f in fields(obj) if getattr(obj, f.name) is not None}


@dataclass(frozen=True)
class AttachmentField:
    """A single title/value pair rendered inside an attachment."""

    title: str
    value: str
    short: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass(frozen=True)
class Attachment:
    """Rich content block; only ``fallback`` is required by Slack."""

    fallback: str
    text: Optional[str] = None
    pretext: Optional[str] = None
    color: Optional[str] = None
    author_name: Optional[str] = None
    author_link: Optional[str] = None
    author_icon: Optional[str] = None
    title: Optional[str] = None
    title_link: Optional[str] = None
    fields: Tuple[AttachmentField, ...] = ()
    image_url: Optional[str] = None
    thumb_url: Optional[str] = None
    footer: Optional[str] = None
    footer_icon: Optional[str] = None
    ts: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping, keeping field order."""
        data = _compact(self)
        data.pop("fields", None)
        if self.fields:
            data["fields"] = [item.as_dict() for item in self.fields]
        return data


@dataclass(frozen=True)
class MessageFormat:
    """Author details and attachments for a posted message.

    ``icon_url`` and ``icon_emoji`` should not be combined; Slack picks one.
    """

    username: Optional[str] = None
    icon_url: Optional[str] = None
    icon_emoji: Optional[str] = None
    channel: Optional[str] = None
    attachments: Tuple[Attachment, ...] = ()

    def as_dict(self) -> Dict[str, Any]:
        data = _compact(self)
        data.pop("attachments", None)
        if self.attachments:
            data["attachments"] = [attachment.as_dict() for attachment in self.attachments]
        return data
