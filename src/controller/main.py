import logging
import os
import sys
from logging.handlers import TimedRotatingFileHandler

from src.controller.containers import Containers
from src.util.settings_parser import SettingsParser
from src.util.slack_error import SlackError

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(settings: SettingsParser):
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        os.makedirs(os.path.dirname(settings.log_file), exist_ok=True)
        timed_handler = TimedRotatingFileHandler(settings.log_file, when='midnight', interval=1, backupCount=10)
        timed_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.insert(0, timed_handler)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=handlers)


def main() -> int:
    container = Containers()
    configure_logging(container.settings())

    api_handler = container.slack_api_handler()
    try:
        api_handler.test({"client": "slack-web-client"})
    except SlackError as e:
        logging.getLogger("").error(f"Slack API check failed: {e} [{e.category.value}/{e.kind.value}]")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
