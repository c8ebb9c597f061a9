import logging
from typing import List

from src.controller.slack_dto_schema import (ApiResponseDTOSchema, ChannelLeaveResponseDTOSchema,
                                             ChannelPurposeResponseDTOSchema, ChannelRenameResponseDTOSchema,
                                             ChannelResponseDTOSchema, ChannelsListResponseDTOSchema,
                                             ChannelTopicResponseDTOSchema)
from src.entity.channel_entity import ChannelEntity, RenamedChannelEntity
from src.util.id_validator import validate_channel_id, validate_user_id


class SlackChannelsHandler:

    def __init__(self, web_client):
        self._logger_bot = logging.getLogger("")
        self._web_client = web_client

    def archive(self, channel_id: str):
        validate_channel_id(channel_id)
        self._web_client.dispatch("channels.archive", {"channel": channel_id}, ApiResponseDTOSchema())
        self._logger_bot.info(f"Slack channel {channel_id} archived")

    def create(self, channel_name: str) -> ChannelEntity:
        response = self._web_client.dispatch("channels.create", {"name": channel_name}, ChannelResponseDTOSchema())
        self._logger_bot.info(f"Slack channel {channel_name} created ({response.channel.id})")
        return response.channel

    def get_channel_by_id(self, channel_id: str) -> ChannelEntity:
        validate_channel_id(channel_id)
        response = self._web_client.dispatch("channels.info", {"channel": channel_id}, ChannelResponseDTOSchema())
        self._logger_bot.debug(f"channel_entity: {response.channel.as_dict()}")
        return response.channel

    def invite(self, channel_id: str, user_id: str) -> ChannelEntity:
        validate_channel_id(channel_id)
        validate_user_id(user_id)
        response = self._web_client.dispatch("channels.invite", {"channel": channel_id, "user": user_id},
                                             ChannelResponseDTOSchema())
        self._logger_bot.info(f"User {user_id} invited to Slack channel {channel_id}")
        return response.channel

    def join(self, channel_name: str) -> ChannelEntity:
        response = self._web_client.dispatch("channels.join", {"name": channel_name}, ChannelResponseDTOSchema())
        if response.already_in_channel:
            self._logger_bot.info(f"Already a member of Slack channel {channel_name}")
        return response.channel

    def kick(self, channel_id: str, user_id: str):
        validate_channel_id(channel_id)
        validate_user_id(user_id)
        self._web_client.dispatch("channels.kick", {"channel": channel_id, "user": user_id}, ApiResponseDTOSchema())
        self._logger_bot.info(f"User {user_id} removed from Slack channel {channel_id}")

    def leave(self, channel_id: str) -> bool:
        validate_channel_id(channel_id)
        response = self._web_client.dispatch("channels.leave", {"channel": channel_id},
                                             ChannelLeaveResponseDTOSchema())
        return not response.not_in_channel

    def load(self, exclude_archived: bool = False) -> List[ChannelEntity]:
        response = self._web_client.dispatch("channels.list", {"exclude_archived": exclude_archived},
                                             ChannelsListResponseDTOSchema())
        self._logger_bot.info(f"Slack channels loaded ({len(response.channels)})")
        return response.channels

    def mark(self, channel_id: str, ts: str):
        validate_channel_id(channel_id)
        self._web_client.dispatch("channels.mark", {"channel": channel_id, "ts": ts}, ApiResponseDTOSchema())

    def rename(self, channel_id: str, channel_name: str) -> RenamedChannelEntity:
        validate_channel_id(channel_id)
        response = self._web_client.dispatch("channels.rename", {"channel": channel_id, "name": channel_name},
                                             ChannelRenameResponseDTOSchema())
        return response.channel

    def set_purpose(self, channel_id: str, purpose: str) -> str:
        validate_channel_id(channel_id)
        response = self._web_client.dispatch("channels.setPurpose", {"channel": channel_id, "purpose": purpose},
                                             ChannelPurposeResponseDTOSchema())
        return response.purpose

    def set_topic(self, channel_id: str, topic: str) -> str:
        validate_channel_id(channel_id)
        response = self._web_client.dispatch("channels.setTopic", {"channel": channel_id, "topic": topic},
                                             ChannelTopicResponseDTOSchema())
        return response.topic

    def unarchive(self, channel_id: str):
        validate_channel_id(channel_id)
        self._web_client.dispatch("channels.unarchive", {"channel": channel_id}, ApiResponseDTOSchema())
        self._logger_bot.info(f"Slack channel {channel_id} unarchived")
