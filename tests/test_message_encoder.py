import json
from urllib.parse import parse_qsl

import pytest

from src.business.message_encoder import encode_attachments, encode_message, escape_message_text, to_wire_value
from src.entity.message_entity import (AttachmentEntity, AttachmentFieldEntity, ColorEnum, LinkNamesEnum,
                                       MessageEntity, MessageParseBehaviorEnum)
from src.util.slack_error import SlackError, SlackErrorKind


def _fields(encoded: str) -> list:
    return parse_qsl(encoded, keep_blank_values=True)


def _attachment(**kwargs) -> AttachmentEntity:
    return AttachmentEntity(fallback="Build 42 passed", ts=1475592000, **kwargs)


class TestNoMessageContent:

    def test_empty_message_fails(self):
        with pytest.raises(SlackError) as exc_info:
            encode_message(MessageEntity())

        assert exc_info.value.kind is SlackErrorKind.NO_MESSAGE_CONTENT

    def test_options_without_content_still_fail(self):
        message = MessageEntity(parse=MessageParseBehaviorEnum.FULL, username="bot", mrkdwn=True)

        with pytest.raises(SlackError) as exc_info:
            encode_message(message)

        assert exc_info.value.kind is SlackErrorKind.NO_MESSAGE_CONTENT

    def test_empty_text_counts_as_content(self):
        assert _fields(encode_message(MessageEntity(text=""))) == [("text", "")]

    def test_empty_attachment_list_counts_as_content(self):
        assert _fields(encode_message(MessageEntity(attachments=[]))) == [("attachments", "[]")]


def test_text_only_message_has_exactly_one_field():
    assert encode_message(MessageEntity(text="hello")) == "text=hello"


def test_field_order_follows_message_layout():
    message = MessageEntity(
        mrkdwn=False,
        icon_emoji=":robot_face:",
        icon_url="https://example.com/icon.png",
        as_user=False,
        username="deploy-bot",
        unfurl_media=True,
        unfurl_links=False,
        link_names=LinkNamesEnum.ENABLE,
        parse=MessageParseBehaviorEnum.FULL,
        attachments=[_attachment()],
        text="deployed",
    )

    names = [name for name, _ in _fields(encode_message(message))]

    assert names == ["text", "attachments", "parse", "link_names", "unfurl_links", "unfurl_media", "username",
                     "as_user", "icon_url", "icon_emoji", "mrkdwn"]


def test_option_wire_tokens():
    message = MessageEntity(
        text="hi",
        parse=MessageParseBehaviorEnum.NONE,
        link_names=LinkNamesEnum.DISABLE,
        unfurl_links=True,
        as_user=False,
        mrkdwn=True,
    )

    assert dict(_fields(encode_message(message))) == {
        "text": "hi",
        "parse": "none",
        "link_names": "0",
        "unfurl_links": "true",
        "as_user": "false",
        "mrkdwn": "true",
    }


def test_full_parse_and_enabled_link_names_tokens():
    message = MessageEntity(text="hi", parse=MessageParseBehaviorEnum.FULL, link_names=LinkNamesEnum.ENABLE)

    assert dict(_fields(encode_message(message))) == {"text": "hi", "parse": "full", "link_names": "1"}


def test_text_is_percent_encoded_but_not_entity_encoded():
    encoded = encode_message(MessageEntity(text="this & < & > <http://www.google.com> ð"))

    assert "&amp;" not in encoded
    assert _fields(encoded) == [("text", "this & < & > <http://www.google.com> ð")]


def test_escape_message_text_entity_encodes_control_characters():
    assert escape_message_text("a & b < c > d") == "a &amp; b &lt; c &gt; d"
    assert escape_message_text("&amp;") == "&amp;amp;"


def test_attachments_are_a_single_json_field():
    attachment = _attachment(
        color=ColorEnum.GOOD,
        title="CI",
        title_link="https://ci.example.com/42",
        fields=[AttachmentFieldEntity(title="Branch", value="main", short=True)],
        mrkdwn_in=["text", "pretext"],
    )

    fields = _fields(encode_message(MessageEntity(attachments=[attachment])))

    assert [name for name, _ in fields] == ["attachments"]
    assert json.loads(fields[0][1]) == [{
        "fallback": "Build 42 passed",
        "ts": 1475592000,
        "color": "good",
        "title": "CI",
        "title_link": "https://ci.example.com/42",
        "fields": [{"title": "Branch", "value": "main", "short": True}],
        "mrkdwn_in": ["text", "pretext"],
    }]


def test_attachments_json_is_compact_and_keeps_unicode():
    encoded = encode_attachments([_attachment(title="Café ☕")])

    assert encoded == '[{"fallback":"Build 42 passed","title":"Café ☕","ts":1475592000}]'


@pytest.mark.parametrize("color, expected", [
    (ColorEnum.GOOD, "good"),
    (ColorEnum.WARNING, "warning"),
    (ColorEnum.DANGER, "danger"),
    ("#439FE0", "#439FE0"),
])
def test_attachment_color_rendering(color, expected):
    fields = _fields(encode_message(MessageEntity(attachments=[_attachment(color=color)])))

    assert json.loads(fields[0][1])[0]["color"] == expected


def test_encoding_is_deterministic():
    message = MessageEntity(
        text="release notes",
        attachments=[_attachment(color="#ff0000", fields=[AttachmentFieldEntity("a", "1"),
                                                           AttachmentFieldEntity("b", "2")])],
        link_names=LinkNamesEnum.ENABLE,
        icon_emoji=":ship:",
    )

    assert encode_message(message) == encode_message(message)


@pytest.mark.parametrize("value, expected", [
    (True, "true"),
    (False, "false"),
    (MessageParseBehaviorEnum.FULL, "full"),
    (LinkNamesEnum.ENABLE, "1"),
    ("plain", "plain"),
    (7, "7"),
])
def test_to_wire_value(value, expected):
    assert to_wire_value(value) == expected
