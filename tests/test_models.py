"""Unit tests for formatting models and bundled templates."""

import json

from models import Attachment, AttachmentField, MessageFormat
from templates import EXAMPLE_FORMATS, SIMPLE, WITH_ATTACHMENTS


class TestAttachmentField:
    def test_as_dict(self):
        assert AttachmentField("Priority", "High", short=True).as_dict() == {
            "title": "Priority",
            "value": "High",
            "short": True,
        }

    def test_short_defaults_to_false(self):
        assert AttachmentField("UUID", "123").as_dict()["short"] is False


class TestAttachment:
    def test_only_fallback_required(self):
        assert Attachment(fallback="summary").as_dict() == {"fallback": "summary"}

    def test_unset_values_are_omitted(self):
        data = Attachment(fallback="fb", color="good", ts=1486457892).as_dict()
        assert data == {"fallback": "fb", "color": "good", "ts": 1486457892}

    def test_fields_keep_order(self):
        attachment = Attachment(
            fallback="fb",
            fields=(AttachmentField("Writer", "A"), AttachmentField("Artist", "B", short=True)),
        )
        assert [item["title"] for item in attachment.as_dict()["fields"]] == ["Writer", "Artist"]


class TestMessageFormat:
    def test_empty_format(self):
        assert MessageFormat().as_dict() == {}

    def test_author_and_attachments(self):
        fmt = MessageFormat(
            username="Bot",
            icon_emoji=":robot_face:",
            attachments=(Attachment(fallback="one"), Attachment(fallback="two")),
        )
        assert fmt.as_dict() == {
            "username": "Bot",
            "icon_emoji": ":robot_face:",
            "attachments": [{"fallback": "one"}, {"fallback": "two"}],
        }


class TestTemplates:
    def test_two_examples(self):
        assert EXAMPLE_FORMATS == (SIMPLE, WITH_ATTACHMENTS)

    def test_simple_has_no_attachments(self):
        assert "attachments" not in SIMPLE.as_dict()
        assert SIMPLE.as_dict()["username"] == "slackhook"

    def test_attachment_example_is_fully_populated(self):
        first = WITH_ATTACHMENTS.as_dict()["attachments"][0]
        assert set(first) == {
            "fallback", "text", "pretext", "color", "author_name", "author_link",
            "author_icon", "title", "title_link", "fields", "image_url", "thumb_url",
            "footer", "footer_icon", "ts",
        }
        assert first["fields"][0] == {"title": "Priority", "value": "High", "short": True}

    def test_examples_serialize_to_json(self):
        for fmt in EXAMPLE_FORMATS:
            assert json.loads(json.dumps(fmt.as_dict())) == fmt.as_dict()
