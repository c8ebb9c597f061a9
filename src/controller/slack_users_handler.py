import logging
from typing import List

from src.controller.slack_dto_schema import UserResponseDTOSchema, UsersListResponseDTOSchema
from src.entity.user_entity import UserEntity
from src.util.id_validator import validate_user_id


class SlackUsersHandler:

    def __init__(self, web_client):
        self._logger_bot = logging.getLogger("")
        self._web_client = web_client

    def load(self, presence: bool = None) -> List[UserEntity]:
        response = self._web_client.dispatch("users.list", {"presence": presence}, UsersListResponseDTOSchema())
        self._logger_bot.info(f"Slack users loaded ({len(response.members)})")
        return response.members

    def get_user_by_id(self, user_id: str) -> UserEntity:
        validate_user_id(user_id)
        response = self._web_client.dispatch("users.info", {"user": user_id}, UserResponseDTOSchema())
        self._logger_bot.debug(f"user_entity: {response.user.as_dict()}")
        return response.user
