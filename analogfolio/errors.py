"""Exceptions raised while listing, enriching and assembling pages."""


class AnalogfolioError(Exception):
    """Base class for everything this package raises on purpose."""


class ConfigurationMissing(AnalogfolioError):
    def __init__(self, setting: str):
        super().__init__(f"Missing required setting: {setting}")
        self.setting = setting


class ExternalServiceFailure(AnalogfolioError):
    """The media service (search or image delivery) failed or timed out."""


class PhotoNotFound(AnalogfolioError):
    def __init__(self, index):
        super().__init__(f"No photo with index {index!r}")
        self.index = index
