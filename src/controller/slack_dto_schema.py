from marshmallow import EXCLUDE, Schema, fields, post_dump, post_load, pre_load

from src.entity.channel_entity import ChannelEntity, ChannelTopicEntity, RenamedChannelEntity
from src.entity.message_entity import ColorEnum, PostedMessageEntity
from src.entity.response_entity import (ApiResponseEntity, ApiTestResponseEntity, ChannelLeaveResponseEntity,
                                        ChannelPurposeResponseEntity, ChannelRenameResponseEntity,
                                        ChannelResponseEntity, ChannelsListResponseEntity,
                                        ChannelTopicResponseEntity, ChatResponseEntity, UserResponseEntity,
                                        UsersListResponseEntity)
from src.entity.user_entity import UserEntity


class SlackDTOSchema(Schema):
    entity_class = None

    class Meta:
        unknown = EXCLUDE

    @post_load
    def make_entity(self, data, **kwargs):
        if self.entity_class is None:
            return data
        return self.entity_class(**data)


#
# objects
#

class ChannelTopicDTOSchema(SlackDTOSchema):
    entity_class = ChannelTopicEntity

    value = fields.String(required=True)
    creator = fields.String(required=True)
    last_set = fields.Integer(required=True)


class ChannelDTOSchema(SlackDTOSchema):
    entity_class = ChannelEntity

    id = fields.String(required=True)
    name = fields.String(required=True)
    created = fields.Integer(required=True)
    creator = fields.String(required=True)
    is_archived = fields.Boolean(required=True)
    is_general = fields.Boolean(required=True)
    members = fields.List(fields.String(), allow_none=True)
    topic = fields.Nested(ChannelTopicDTOSchema, allow_none=True)
    purpose = fields.Nested(ChannelTopicDTOSchema, allow_none=True)
    is_member = fields.Boolean(allow_none=True)
    last_read = fields.Float(allow_none=True)
    unread_count = fields.Integer(allow_none=True)
    unread_count_display = fields.Integer(allow_none=True)


class RenamedChannelDTOSchema(SlackDTOSchema):
    entity_class = RenamedChannelEntity

    id = fields.String(required=True)
    is_channel = fields.Boolean(required=True)
    name = fields.String(required=True)
    created = fields.Integer(required=True)


class UserDTOSchema(SlackDTOSchema):
    entity_class = UserEntity

    id = fields.String(required=True)
    name = fields.String(required=True)
    real_name = fields.String(allow_none=True)
    display_name = fields.String(allow_none=True)
    title = fields.String(allow_none=True)
    first_name = fields.String(allow_none=True)
    last_name = fields.String(allow_none=True)
    email = fields.String(allow_none=True)
    team_id = fields.String(allow_none=True)
    is_bot = fields.Boolean(allow_none=True)
    is_deleted = fields.Boolean(allow_none=True)
    is_app_user = fields.Boolean(allow_none=True)
    image_original = fields.String(allow_none=True)

    @pre_load
    def flatten_profile(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        user = dict(data)
        profile = user.pop("profile", None) or {}
        if "deleted" in user:
            user["is_deleted"] = user.pop("deleted")
        user["display_name"] = profile.get("display_name") or user.get("real_name")
        for key in ("title", "first_name", "last_name", "email", "image_original"):
            if key in profile:
                user[key] = profile[key]
        return user


class PostedMessageDTOSchema(SlackDTOSchema):
    entity_class = PostedMessageEntity

    ts = fields.String(required=True)
    type = fields.String(allow_none=True)
    subtype = fields.String(allow_none=True)
    text = fields.String(allow_none=True)
    user = fields.String(allow_none=True)
    bot_id = fields.String(allow_none=True)
    username = fields.String(allow_none=True)


#
# responses
#

class ApiResponseDTOSchema(SlackDTOSchema):
    entity_class = ApiResponseEntity

    ok = fields.Boolean(required=True)
    error = fields.String(allow_none=True)
    warning = fields.String(allow_none=True)


class ApiTestResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ApiTestResponseEntity

    args = fields.Dict(keys=fields.String(), allow_none=True)


class ChannelResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ChannelResponseEntity

    channel = fields.Nested(ChannelDTOSchema, required=True)
    already_in_channel = fields.Boolean(allow_none=True)


class ChannelsListResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ChannelsListResponseEntity

    channels = fields.List(fields.Nested(ChannelDTOSchema), required=True)


class ChannelLeaveResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ChannelLeaveResponseEntity

    not_in_channel = fields.Boolean(allow_none=True)


class ChannelRenameResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ChannelRenameResponseEntity

    channel = fields.Nested(RenamedChannelDTOSchema, required=True)


class ChannelPurposeResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ChannelPurposeResponseEntity

    purpose = fields.String(required=True)


class ChannelTopicResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ChannelTopicResponseEntity

    topic = fields.String(required=True)


class ChatResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = ChatResponseEntity

    channel = fields.String(allow_none=True)
    ts = fields.String(allow_none=True)
    text = fields.String(allow_none=True)
    message = fields.Nested(PostedMessageDTOSchema, allow_none=True)


class UserResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = UserResponseEntity

    user = fields.Nested(UserDTOSchema, required=True)


class UsersListResponseDTOSchema(ApiResponseDTOSchema):
    entity_class = UsersListResponseEntity

    members = fields.List(fields.Nested(UserDTOSchema), required=True)


#
# outgoing attachments
#

class AttachmentFieldDTOSchema(Schema):
    title = fields.String()
    value = fields.String()
    short = fields.Boolean()


class AttachmentDTOSchema(Schema):
    fallback = fields.String()
    color = fields.Method("dump_color")
    pretext = fields.String()
    author_name = fields.String()
    author_link = fields.String()
    author_icon = fields.String()
    title = fields.String()
    title_link = fields.String()
    text = fields.String()
    attachment_fields = fields.List(fields.Nested(AttachmentFieldDTOSchema), attribute="fields", data_key="fields")
    image_url = fields.String()
    thumb_url = fields.String()
    footer = fields.String()
    footer_icon = fields.String()
    ts = fields.Integer()
    mrkdwn_in = fields.List(fields.String())

    def dump_color(self, attachment):
        if isinstance(attachment.color, ColorEnum):
            return attachment.color.value
        return attachment.color

    @post_dump
    def remove_empty(self, data, **kwargs):
        return {key: value for key, value in data.items() if value is not None}
