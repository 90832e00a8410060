"""Ready-made message formats to copy and adapt.

See https://api.slack.com/docs/message-formatting and
https://api.slack.com/docs/message-attachments for what each key renders as.
"""

from __future__ import annotations

from typing import Tuple

from models import Attachment, AttachmentField, MessageFormat

# Simple message, no attachments. Pick one of icon_url/icon_emoji when adapting.
SIMPLE = MessageFormat(
    username="slackhook",
    icon_url="https://slack.com/img/icons/app-57.png",
    icon_emoji=":robot_face:",
)

# Message with two attachments; keep it under 20 attachments, Slack caps it at 100.
WITH_ATTACHMENTS = MessageFormat(
    username="slackhook",
    icon_url="https://slack.com/img/icons/app-57.png",
    icon_emoji=":space_invader:",
    attachments=(
        Attachment(
            fallback="Required plain-text summary of the attachment.",
            text="Optional text that appears within the attachment",
            pretext="Optional text that should appear above the formatted data",
            color="#36a64f",
            author_name="Bobby Tables",
            author_link="http://flickr.com/bobby/",
            author_icon="http://flickr.com/icons/bobby.jpg",
            title="Slack API Documentation",
            title_link="https://api.slack.com/",
            fields=(
                AttachmentField(title="Priority", value="High", short=True),
                AttachmentField(title="UUID", value="123e4567-e89b-12d3-a456-426655440000", short=False),
            ),
            image_url="http://my-website.com/path/to/image.jpg",
            thumb_url="http://example.com/path/to/thumb.png",
            footer="Slack API",
            footer_icon="https://platform.slack-edge.com/img/default_application_icon.png",
            ts=123456789,
        ),
        Attachment(
            fallback="Second attachment fallback",
            text="A second block; color may be good, warning, danger or a hex code.",
            pretext="Second attachment",
            color="danger",
            author_name="Release Bot",
            title="Deploy checklist",
            title_link="https://example.com/deploys/",
            fields=(
                AttachmentField(title="Environment", value="production", short=True),
                AttachmentField(title="Version", value="1.4.2", short=True),
            ),
            footer="slackhook",
            ts=1486457892,
        ),
    ),
)

EXAMPLE_FORMATS: Tuple[MessageFormat, ...] = (SIMPLE, WITH_ATTACHMENTS)
