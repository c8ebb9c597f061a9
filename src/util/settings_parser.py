import configparser
import os
from typing import Optional

from src.util.settings_error import SettingsError

DEFAULT_SLACK_API_URL = "https://slack.com/api"


class SettingsParser:
    slack_api_token: str
    slack_api_url: str
    request_timeout: Optional[float]
    log_file: Optional[str]
    work_dir: str

    def __init__(self):
        self.work_dir = os.environ.get('WORKDIR') or os.getcwd()
        self._config = configparser.ConfigParser()
        settings_file = os.path.join(self.work_dir, 'settings.ini')
        if os.path.exists(settings_file):
            self._config.read(settings_file)

        self.slack_api_token = self._get('SLACK_API_TOKEN', 'slack', 'slack_api_token')
        self.slack_api_url = self._get('SLACK_API_URL', 'slack', 'slack_api_url') or DEFAULT_SLACK_API_URL

        request_timeout = self._get('SLACK_REQUEST_TIMEOUT', 'slack', 'request_timeout')
        self.request_timeout = float(request_timeout) if request_timeout else None

        log_file = self._get('LOG_FILE', 'config', 'log_file')
        self.log_file = os.path.join(self.work_dir, 'log', log_file) if log_file else None

        if self.slack_api_token == '' or self.slack_api_token is None:
            raise SettingsError('slack_api_token')

    # Environment variables win over settings.ini
    def _get(self, env_name: str, section: str, option: str) -> Optional[str]:
        value = os.environ.get(env_name)
        if (value == '' or value is None) and self._config.has_option(section, option):
            value = self._config[section][option]
        return value
