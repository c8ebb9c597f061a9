import logging
from typing import Optional

from src.controller.slack_dto_schema import ApiTestResponseDTOSchema
from src.entity.response_entity import ApiTestResponseEntity


class SlackApiHandler:

    def __init__(self, web_client):
        self._logger_bot = logging.getLogger("")
        self._web_client = web_client

    # api.test echoes the arguments back; `error` makes the service fail with that code
    def test(self, arguments: Optional[dict] = None, error: Optional[str] = None) -> ApiTestResponseEntity:
        params = dict(arguments or {})
        if error is not None:
            params["error"] = error
        response = self._web_client.dispatch("api.test", params, ApiTestResponseDTOSchema())
        self._logger_bot.info(f"Slack api.test succeeded: {response.as_dict()}")
        return response
