from dataclasses import dataclass, asdict
from enum import Enum
from typing import List, Optional


class ChannelTypeEnum(Enum):
    PUBLIC = "C"
    DIRECT_MESSAGE = "D"
    PRIVATE = "G"


@dataclass
class ChannelTopicEntity:
    value: str
    creator: str
    last_set: int


@dataclass
class ChannelEntity:
    id: str
    name: str
    created: int
    creator: str
    is_archived: bool
    is_general: bool
    members: Optional[List[str]] = None
    topic: Optional[ChannelTopicEntity] = None
    purpose: Optional[ChannelTopicEntity] = None
    is_member: Optional[bool] = None
    last_read: Optional[float] = None
    unread_count: Optional[int] = None
    unread_count_display: Optional[int] = None

    @property
    def channel_type(self) -> Optional[ChannelTypeEnum]:
        # Server ids are not validated; unknown prefixes have no type
        for channel_type in ChannelTypeEnum:
            if self.id.startswith(channel_type.value):
                return channel_type
        return None

    def as_dict(self) -> dict:
        return asdict(self)


# Limited channel object returned by channels.rename
@dataclass
class RenamedChannelEntity:
    id: str
    is_channel: bool
    name: str
    created: int
