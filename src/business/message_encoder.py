from enum import Enum
from urllib.parse import urlencode

from src.controller.slack_dto_schema import AttachmentDTOSchema
from src.entity.message_entity import MessageEntity
from src.util.slack_error import SlackError, SlackErrorKind

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Encoded after text and attachments, in this order
MESSAGE_OPTION_FIELDS = (
    "parse",
    "link_names",
    "unfurl_links",
    "unfurl_media",
    "username",
    "as_user",
    "icon_url",
    "icon_emoji",
    "mrkdwn",
)

_ENTITY_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"))


def to_wire_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return str(value)


def escape_message_text(text: str) -> str:
    for char, entity in _ENTITY_ESCAPES:
        text = text.replace(char, entity)
    return text


def encode_message_text(text: str) -> str:
    # Slack markup (<http://...|label>, <@U123>) must reach the server intact.
    # Percent-encoding happens in urlencode.
    return text


def encode_attachments(attachments: list) -> str:
    return AttachmentDTOSchema(many=True).dumps(attachments, separators=(",", ":"), ensure_ascii=False)


def encode_message(message: MessageEntity) -> str:
    if message.text is None and message.attachments is None:
        raise SlackError(SlackErrorKind.NO_MESSAGE_CONTENT)

    form_fields = []
    if message.text is not None:
        form_fields.append(("text", encode_message_text(message.text)))
    if message.attachments is not None:
        form_fields.append(("attachments", encode_attachments(message.attachments)))

    for field_name in MESSAGE_OPTION_FIELDS:
        value = getattr(message, field_name)
        if value is not None:
            form_fields.append((field_name, to_wire_value(value)))

    return urlencode(form_fields)
