class SettingsError(Exception):
    def __init__(self, setting_name: str = "slack_api_token"):
        self.setting_name = setting_name
        super().__init__(f"Setting '{setting_name}' is missing: set the environment variable "
                         f"or add it to settings.ini")
