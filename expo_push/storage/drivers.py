import os
from abc import ABC, abstractmethod
from logging import getLogger

from expo_push.core.config import settings
from expo_push.exceptions import PathNotFoundError
from expo_push.storage.json_file import JsonFile
from expo_push.utils import token_hint

__all__ = [
    "Driver",
    "FileDriver",
]

logger = getLogger(__name__)


class Driver(ABC):
    """Storage backend for channel subscriptions."""

    @abstractmethod
    def store(self, channel: str, tokens: list[str]) -> bool:
        """Add tokens to a channel, ignoring the ones already subscribed."""

    @abstractmethod
    def retrieve(self, channel: str) -> list[str] | None:
        """Return the channel's tokens, or None when it has no subscriptions."""

    @abstractmethod
    def forget(self, channel: str, tokens: list[str]) -> bool:
        """Remove tokens from a channel, dropping the channel once it is empty."""


class FileDriver(Driver):
    """
    Keeps subscriptions in a JSON file.

    Without ``path`` the driver uses ``settings.STORAGE_PATH``. A relative
    path is resolved against the current working directory, not the package,
    and the file must already exist.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None):
        if path is None:
            path = settings.STORAGE_PATH

        if not isinstance(path, (str, os.PathLike)) or os.fspath(path) == "":
            raise PathNotFoundError(str(path or ""))

        self.file = JsonFile(path)

    def store(self, channel: str, tokens: list[str]) -> bool:
        with self.file.lock():
            store = self.file.read()
            subscriptions = store.get(channel) or []
            store[channel] = list(dict.fromkeys([*subscriptions, *tokens]))
            self.file.write(store)

        logger.info(
            "Subscribed %d token(s) to channel %s",
            len(tokens),
            channel,
        )
        return True

    def retrieve(self, channel: str) -> list[str] | None:
        return self.file.read().get(channel)

    def forget(self, channel: str, tokens: list[str]) -> bool:
        with self.file.lock():
            store = self.file.read()
            subscriptions = store.get(channel)

            if subscriptions is None:
                return True

            forgotten = set(tokens)
            removed = [token for token in subscriptions if token in forgotten]
            remaining = [token for token in subscriptions if token not in forgotten]

            if remaining:
                store[channel] = remaining
            else:
                del store[channel]

            self.file.write(store)

        logger.info(
            "Unsubscribed %s from channel %s",
            ", ".join(token_hint(token) for token in removed if isinstance(token, str)),
            channel,
        )
        return True
