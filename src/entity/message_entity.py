from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class MessageParseBehaviorEnum(Enum):
    FULL = "full"
    NONE = "none"


class LinkNamesEnum(Enum):
    ENABLE = "1"
    DISABLE = "0"


class ColorEnum(Enum):
    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


@dataclass
class AttachmentFieldEntity:
    title: str
    value: str
    short: bool = False


@dataclass
class AttachmentEntity:
    fallback: str
    ts: int
    # named color or a literal hex string such as "#36a64f"
    color: Optional[Union[ColorEnum, str]] = None
    pretext: Optional[str] = None
    author_name: Optional[str] = None
    author_link: Optional[str] = None
    author_icon: Optional[str] = None
    title: Optional[str] = None
    title_link: Optional[str] = None
    text: Optional[str] = None
    fields: Optional[List[AttachmentFieldEntity]] = None
    image_url: Optional[str] = None
    thumb_url: Optional[str] = None
    footer: Optional[str] = None
    footer_icon: Optional[str] = None
    mrkdwn_in: Optional[List[str]] = None


@dataclass
class MessageEntity:
    text: Optional[str] = None
    attachments: Optional[List[AttachmentEntity]] = None
    parse: Optional[MessageParseBehaviorEnum] = None
    link_names: Optional[LinkNamesEnum] = None
    unfurl_links: Optional[bool] = None
    unfurl_media: Optional[bool] = None
    username: Optional[str] = None
    as_user: Optional[bool] = None
    icon_url: Optional[str] = None
    icon_emoji: Optional[str] = None
    mrkdwn: Optional[bool] = None


# Message as echoed back by chat.postMessage / chat.update
@dataclass
class PostedMessageEntity:
    ts: str
    type: Optional[str] = None
    subtype: Optional[str] = None
    text: Optional[str] = None
    user: Optional[str] = None
    bot_id: Optional[str] = None
    username: Optional[str] = None
