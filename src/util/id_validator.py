from src.entity.channel_entity import ChannelTypeEnum
from src.util.slack_error import SlackError, SlackErrorKind

CHANNEL_ID_PREFIXES = frozenset(channel_type.value for channel_type in ChannelTypeEnum)
USER_ID_PREFIX = "U"


def is_valid_channel_id(channel_id: str) -> bool:
    return bool(channel_id) and channel_id[0] in CHANNEL_ID_PREFIXES


def is_valid_user_id(user_id: str) -> bool:
    return bool(user_id) and user_id[0] == USER_ID_PREFIX


def validate_channel_id(channel_id: str):
    if not is_valid_channel_id(channel_id):
        raise SlackError(SlackErrorKind.INVALID_CHANNEL_ID, detail=repr(channel_id))


def validate_user_id(user_id: str):
    if not is_valid_user_id(user_id):
        raise SlackError(SlackErrorKind.INVALID_USER_ID, detail=repr(user_id))
