"""Simple CLI entry point to post one message to a Slack webhook."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from errors import SlackHookError
from models import Attachment, AttachmentField, MessageFormat
from notify.delivery import DeliveryResolver
from notify.slack import Notifier, build_payload
from templates import EXAMPLE_FORMATS

WEBHOOK_ENV = "SLACK_WEBHOOK_URL"
INSECURE_ENV = "SLACKHOOK_INSECURE"


def parse_field(raw: str, *, short: bool = False) -> AttachmentField:
    """Turn ``TITLE=VALUE`` into an attachment field."""
    title, sep, value = raw.partition("=")
    if not sep or not title.strip():
        raise ValueError(f"Invalid --field {raw!r}; expected TITLE=VALUE.")
    return AttachmentField(title=title.strip(), value=value.strip(), short=short)


def build_attachment(message: str, args: argparse.Namespace) -> Optional[Attachment]:
    """Build a single attachment from the attachment options, if any were given."""
    fields: Tuple[AttachmentField, ...] = tuple(
        parse_field(raw, short=args.short_fields) for raw in args.field or []
    )
    wanted = (
        args.color,
        args.title,
        args.title_link,
        args.pretext,
        args.footer,
        args.attachment_text,
        args.fallback,
    )
    if not fields and not any(wanted):
        return None
    return Attachment(
        fallback=args.fallback or message,
        text=args.attachment_text,
        pretext=args.pretext,
        color=args.color,
        title=args.title,
        title_link=args.title_link,
        fields=fields,
        footer=args.footer,
    )


def build_format(message: str, args: argparse.Namespace) -> MessageFormat:
    """Combine an optional template with the author and attachment options."""
    if args.example is not None:
        if not 0 <= args.example < len(EXAMPLE_FORMATS):
            raise ValueError(f"--example must be between 0 and {len(EXAMPLE_FORMATS) - 1}.")
        fmt = EXAMPLE_FORMATS[args.example]
    else:
        fmt = MessageFormat()

    username = args.username or os.environ.get("SLACK_USERNAME")
    icon_emoji = args.icon_emoji or os.environ.get("SLACK_ICON_EMOJI")
    icon_url = args.icon_url or os.environ.get("SLACK_ICON_URL")
    if icon_emoji and icon_url:
        raise ValueError("Provide either an icon emoji or an icon url, not both.")

    # Explicit author options replace the template's, including its icon choice.
    if username:
        fmt = replace(fmt, username=username)
    if icon_emoji:
        fmt = replace(fmt, icon_emoji=icon_emoji, icon_url=None)
    if icon_url:
        fmt = replace(fmt, icon_url=icon_url, icon_emoji=None)
    if args.channel:
        fmt = replace(fmt, channel=args.channel)

    attachment = build_attachment(message, args)
    if attachment:
        fmt = replace(fmt, attachments=fmt.attachments + (attachment,))
    return fmt


def build_parser() -> argparse.ArgumentParser:
    """Describe the command-line options available to the user."""
    parser = argparse.ArgumentParser(description="Post a message to a Slack incoming webhook.")
    parser.add_argument("message", help="Message text to post")
    parser.add_argument(
        "--webhook",
        default=None,
        help=f"Slack webhook URL (defaults to {WEBHOOK_ENV} env var if unset)",
    )
    parser.add_argument(
        "--username",
        default=None,
        help="Name shown as the message author (defaults to SLACK_USERNAME env var if unset)",
    )
    icons = parser.add_mutually_exclusive_group()
    icons.add_argument(
        "--icon-emoji",
        default=None,
        help="Author icon as an emoji, e.g. :robot_face: (defaults to SLACK_ICON_EMOJI env var)",
    )
    icons.add_argument(
        "--icon-url",
        default=None,
        help="Author icon image URL (defaults to SLACK_ICON_URL env var)",
    )
    parser.add_argument("--channel", default=None, help="Channel override, e.g. #deploys")
    parser.add_argument(
        "--example",
        type=int,
        default=None,
        help=f"Start from a bundled example format (0-{len(EXAMPLE_FORMATS) - 1})",
    )
    parser.add_argument("--color", default=None, help="Attachment color: good, warning, danger or #hex")
    parser.add_argument("--title", default=None, help="Attachment title")
    parser.add_argument("--title-link", default=None, help="URL for the attachment title")
    parser.add_argument("--pretext", default=None, help="Text shown above the attachment")
    parser.add_argument("--attachment-text", default=None, help="Text shown inside the attachment")
    parser.add_argument("--fallback", default=None, help="Plain-text attachment summary (defaults to the message)")
    parser.add_argument("--footer", default=None, help="Attachment footer")
    parser.add_argument(
        "--field",
        action="append",
        metavar="TITLE=VALUE",
        help="Attachment field; repeat for more fields",
    )
    parser.add_argument("--short-fields", action="store_true", help="Render fields side by side")
    parser.add_argument(
        "--insecure",
        action="store_true",
        help=f"Skip TLS certificate verification (or set {INSECURE_ENV}=1)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the JSON payload without posting")
    parser.add_argument("--verbose", action="store_true", help="Log delivery details")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse CLI arguments and post the message."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    fmt = build_format(args.message, args)

    if args.dry_run:
        # Dry-run prints the payload to help you verify formatting without touching Slack.
        print(json.dumps(build_payload(args.message, fmt), indent=2))
        return 0

    webhook = args.webhook or os.environ.get(WEBHOOK_ENV)
    if not webhook:
        raise ValueError(f"No webhook given; pass --webhook or set {WEBHOOK_ENV}.")
    insecure = args.insecure or os.environ.get(INSECURE_ENV) == "1"

    resolver = DeliveryResolver(verify_tls=not insecure)
    try:
        notifier = Notifier(webhook, resolver=resolver)
        response = notifier.send(args.message, fmt)
    except SlackHookError as exc:
        print(f"[ERROR] {exc.message}", file=sys.stderr)
        return 1

    lines: List[str] = ["[INFO] Message posted."]
    if response:
        lines.append(f"[INFO] Webhook replied: {str(response).strip()}")
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
