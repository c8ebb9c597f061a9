import logging

from src.business.message_encoder import encode_message
from src.controller.slack_dto_schema import ChatResponseDTOSchema
from src.entity.message_entity import MessageEntity
from src.entity.response_entity import ChatResponseEntity
from src.util.id_validator import validate_channel_id


class SlackMessagesHandler:

    def __init__(self, web_client):
        self._logger_bot = logging.getLogger("")
        self._web_client = web_client

    def post_message(self, channel_id: str, message: MessageEntity) -> ChatResponseEntity:
        validate_channel_id(channel_id)
        body = encode_message(message)
        response = self._web_client.dispatch("chat.postMessage", {"channel": channel_id}, ChatResponseDTOSchema(),
                                             body=body)
        self._logger_bot.info(f"Message posted to Slack channel {channel_id} (ts {response.ts})")
        return response

    def update_message(self, channel_id: str, ts: str, message: MessageEntity) -> ChatResponseEntity:
        validate_channel_id(channel_id)
        body = encode_message(message)
        response = self._web_client.dispatch("chat.update", {"channel": channel_id, "ts": ts},
                                             ChatResponseDTOSchema(), body=body)
        self._logger_bot.info(f"Message (ts {ts}) updated in Slack channel {channel_id}")
        return response

    def delete_message(self, channel_id: str, ts: str, as_user: bool = None) -> ChatResponseEntity:
        validate_channel_id(channel_id)
        response = self._web_client.dispatch("chat.delete", {"channel": channel_id, "ts": ts, "as_user": as_user},
                                             ChatResponseDTOSchema())
        self._logger_bot.info(f"Message (ts {ts}) deleted from Slack channel {channel_id}")
        return response

    def me_message(self, channel_id: str, text: str) -> ChatResponseEntity:
        validate_channel_id(channel_id)
        return self._web_client.dispatch("chat.meMessage", {"channel": channel_id, "text": text},
                                         ChatResponseDTOSchema())
