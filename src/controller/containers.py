from dependency_injector import containers, providers

from src.controller.slack_api_handler import SlackApiHandler
from src.controller.slack_channels_handler import SlackChannelsHandler
from src.controller.slack_messages_handler import SlackMessagesHandler
from src.controller.slack_users_handler import SlackUsersHandler
from src.controller.slack_web_client import SlackWebClient
from src.util.settings_parser import SettingsParser


class Containers(containers.DeclarativeContainer):
    settings = providers.Singleton(SettingsParser)

    slack_web_client = providers.Singleton(SlackWebClient,
                                           slack_api_token=settings.provided.slack_api_token,
                                           slack_api_url=settings.provided.slack_api_url,
                                           request_timeout=settings.provided.request_timeout)

    slack_api_handler = providers.Singleton(SlackApiHandler, slack_web_client)
    slack_channels_handler = providers.Singleton(SlackChannelsHandler, slack_web_client)
    slack_messages_handler = providers.Singleton(SlackMessagesHandler, slack_web_client)
    slack_users_handler = providers.Singleton(SlackUsersHandler, slack_web_client)
