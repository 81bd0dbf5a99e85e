from collections.abc import Callable, Iterable, Mapping
from logging import getLogger
from typing import Any

from expo_push.exceptions import (
    DispatchError,
    DriverNotConfiguredError,
    EmptyMessageListError,
    InvalidMessageListError,
    InvalidTokenInputError,
    NoRecipientError,
    NoValidTokensError,
)
from expo_push.schemas.message import ExpoMessage
from expo_push.services.client import ExpoClient
from expo_push.services.hooks import DEVICES_NOT_REGISTERED, HookRegistry
from expo_push.services.response import ExpoResponse
from expo_push.storage.manager import DriverManager
from expo_push.utils import is_expo_push_token, token_hint, validate_tokens

__all__ = [
    "Expo",
]

logger = getLogger(__name__)


class Expo:
    """
    Queues messages and pushes them to Expo in a single request.

    An instance holds the queued messages and default recipients between
    ``send``/``to`` and ``push``, so it must not be shared between threads.
    """

    hooks = HookRegistry()

    def __init__(
        self,
        manager: DriverManager | None = None,
        client: ExpoClient | None = None,
        **client_options: Any,
    ):
        self.manager = manager
        self.client = client or ExpoClient(**client_options)
        self._messages: list[ExpoMessage] = []
        self._recipients: list[str] | None = None

    @classmethod
    def driver(cls, driver: str | None = None, **config: Any) -> "Expo":
        return cls(DriverManager(driver, **config))

    @classmethod
    def add_devices_not_registered_handler(
        cls, callback: Callable[[list[str]], Any]
    ) -> None:
        cls.hooks.register(DEVICES_NOT_REGISTERED, callback)

    def _require_manager(self) -> DriverManager:
        if self.manager is None:
            raise DriverNotConfiguredError()
        return self.manager

    def subscribe(self, channel: str, tokens: Any = None) -> bool:
        return self._require_manager().subscribe(channel, tokens)

    def unsubscribe(self, channel: str, tokens: Any = None) -> bool:
        return self._require_manager().unsubscribe(channel, tokens)

    def get_subscriptions(self, channel: str) -> list[str] | None:
        return self._require_manager().get_subscriptions(channel)

    def has_subscriptions(self, channel: str) -> bool:
        return bool(self.get_subscriptions(channel))

    def to_channel(self, channel: str) -> "Expo":
        self._recipients = self.get_subscriptions(channel)
        return self

    @staticmethod
    def is_expo_push_token(value: Any) -> bool:
        return is_expo_push_token(value)

    @property
    def recipients(self) -> list[str] | None:
        return self._recipients

    @property
    def messages(self) -> list[ExpoMessage]:
        return self._messages

    def send(
        self, messages: ExpoMessage | Iterable[ExpoMessage | Mapping[str, Any]]
    ) -> "Expo":
        if isinstance(messages, ExpoMessage):
            messages = [messages]
        elif isinstance(messages, (Mapping, str, bytes)):
            raise InvalidMessageListError()

        queued = []
        for message in messages:
            if isinstance(message, ExpoMessage):
                queued.append(message)
            elif isinstance(message, Mapping):
                queued.append(ExpoMessage(message))
            else:
                raise InvalidMessageListError()

        self._messages = queued
        return self

    def to(self, recipients: Any = None) -> "Expo":
        self._recipients = validate_tokens(recipients)
        return self

    def push(self) -> ExpoResponse:
        if not self._messages:
            raise EmptyMessageListError()

        default_tokens = None
        if self._recipients is not None:
            try:
                default_tokens = validate_tokens(self._recipients)
            except InvalidTokenInputError as exc:
                raise DispatchError("Default recipients are invalid") from exc
            except NoValidTokensError as exc:
                raise DispatchError("No valid default recipients provided.") from exc

        batch = self._expand(default_tokens)

        # Clear before sending so a failed request leaves nothing queued
        self.reset()

        logger.info("Pushing %d message(s) to Expo", len(batch))
        response = self.client.send_push_notifications(batch)

        unregistered = self._reconcile_tickets(response, batch)
        if unregistered and self.hooks.has(DEVICES_NOT_REGISTERED):
            self.hooks.invoke(DEVICES_NOT_REGISTERED, unregistered)

        return response

    def _expand(self, default_tokens: list[str] | None) -> list[dict[str, Any]]:
        """One request entry per (message, token), in queue then token order."""
        batch = []

        for message in self._messages:
            payload = message.to_dict()
            source = payload["to"] if "to" in payload else default_tokens

            if not source:
                raise NoRecipientError()

            try:
                tokens = validate_tokens(source)
            except (InvalidTokenInputError, NoValidTokensError) as exc:
                raise DispatchError(
                    "A message must have at least one valid recipient to send"
                ) from exc

            for token in tokens:
                batch.append({**payload, "to": token})

        return batch

    def _reconcile_tickets(
        self, response: ExpoResponse, batch: list[dict[str, Any]]
    ) -> list[str]:
        """
        Log failed tickets and collect the tokens Expo no longer knows.

        Tickets line up with ``batch`` by index; when a DeviceNotRegistered
        ticket does not name its token, the request entry at that index does.
        """
        tickets = response.tickets
        if tickets is None:
            return []

        unregistered: set[str] = set()
        for index, ticket in enumerate(tickets):
            if ticket is None:
                continue

            if not ticket.device_not_registered:
                if ticket.is_error:
                    logger.warning(
                        "Expo push delivery error for token %s: error=%s message=%s",
                        token_hint(str(batch[index]["to"])) if index < len(batch) else "?",
                        ticket.error,
                        ticket.message,
                    )
                continue

            token = ticket.details.expo_push_token if ticket.details else None
            if token is None and index < len(batch):
                token = batch[index]["to"]
            if isinstance(token, str):
                unregistered.add(token)
                logger.info("Expo reported DeviceNotRegistered: %s", token_hint(token))

        return list(unregistered)

    def get_receipts(self, ticket_ids: Iterable[Any]) -> ExpoResponse:
        ids = [ticket_id for ticket_id in ticket_ids if isinstance(ticket_id, str)]
        return self.client.get_push_notification_receipts(ids)

    def set_access_token(self, access_token: str) -> "Expo":
        self.client.set_access_token(access_token)
        return self

    def reset(self) -> None:
        self._messages = []
        self._recipients = None
