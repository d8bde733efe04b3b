"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised at startup when a required setting is missing or unusable."""

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"{message} (set {setting})")
