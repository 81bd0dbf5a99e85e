from typing import Any

from expo_push.core.config import settings
from expo_push.core.enums import StorageDriver
from expo_push.exceptions import InvalidTokenInputError, UnsupportedDriverError
from expo_push.storage.drivers import Driver, FileDriver

__all__ = [
    "DriverManager",
]


class DriverManager:
    """Normalizes channels and tokens before handing them to a storage driver."""

    supported_drivers: dict[str, type[Driver]] = {
        StorageDriver.FILE.value: FileDriver,
    }

    def __init__(self, driver: str | None = None, **config: Any):
        driver = driver or settings.STORAGE_DRIVER
        self.driver_key = driver.lower()

        driver_class = self.supported_drivers.get(self.driver_key)
        if driver_class is None:
            raise UnsupportedDriverError(driver)

        self.driver = driver_class(**config)

    def subscribe(self, channel: str, tokens: Any) -> bool:
        return self.driver.store(
            self.normalize_channel(channel),
            self.normalize_tokens(tokens),
        )

    def get_subscriptions(self, channel: str) -> list[str] | None:
        return self.driver.retrieve(self.normalize_channel(channel))

    def unsubscribe(self, channel: str, tokens: Any) -> bool:
        return self.driver.forget(
            self.normalize_channel(channel),
            self.normalize_tokens(tokens),
        )

    @staticmethod
    def normalize_channel(channel: str) -> str:
        return channel.strip().lower()

    @staticmethod
    def normalize_tokens(tokens: Any) -> list[str]:
        if isinstance(tokens, (list, tuple)) and len(tokens) > 0:
            return list(tokens)

        if isinstance(tokens, str):
            return [tokens]

        raise InvalidTokenInputError(
            detail="Tokens must be a string or non empty list"
        )
