from dataclasses import dataclass, asdict
from typing import List, Optional

from src.entity.channel_entity import ChannelEntity, RenamedChannelEntity
from src.entity.message_entity import PostedMessageEntity
from src.entity.user_entity import UserEntity


@dataclass
class ApiResponseEntity:
    ok: bool
    error: Optional[str] = None
    warning: Optional[str] = None

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class ApiTestResponseEntity(ApiResponseEntity):
    args: Optional[dict] = None


@dataclass
class ChannelResponseEntity(ApiResponseEntity):
    channel: Optional[ChannelEntity] = None
    already_in_channel: Optional[bool] = None


@dataclass
class ChannelsListResponseEntity(ApiResponseEntity):
    channels: Optional[List[ChannelEntity]] = None


@dataclass
class ChannelLeaveResponseEntity(ApiResponseEntity):
    not_in_channel: Optional[bool] = None


@dataclass
class ChannelRenameResponseEntity(ApiResponseEntity):
    channel: Optional[RenamedChannelEntity] = None


@dataclass
class ChannelPurposeResponseEntity(ApiResponseEntity):
    purpose: Optional[str] = None


@dataclass
class ChannelTopicResponseEntity(ApiResponseEntity):
    topic: Optional[str] = None


@dataclass
class ChatResponseEntity(ApiResponseEntity):
    channel: Optional[str] = None
    ts: Optional[str] = None
    text: Optional[str] = None
    message: Optional[PostedMessageEntity] = None


@dataclass
class UserResponseEntity(ApiResponseEntity):
    user: Optional[UserEntity] = None


@dataclass
class UsersListResponseEntity(ApiResponseEntity):
    members: Optional[List[UserEntity]] = None
