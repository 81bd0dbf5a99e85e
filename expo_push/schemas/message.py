from collections.abc import Mapping
from typing import Any

from expo_push.core.enums import Priority
from expo_push.exceptions import InvalidMessageDataError, InvalidMessagePriorityError
from expo_push.utils import is_list_shaped, validate_tokens

__all__ = [
    "CONTENT_AVAILABLE_KEY",
    "ExpoMessage",
]

# Expo reads the iOS content-available flag from this key
CONTENT_AVAILABLE_KEY = "_contentAvailable"

_SCALAR_TYPES = (str, bytes, int, float, bool)


class ExpoMessage:
    """
    A single Expo push message.

    Fields are set through the chainable ``set_*`` methods, which validate
    their input, or all at once by passing a mapping of Expo field names:

        ExpoMessage({"title": "Hi", "to": "ExponentPushToken[xxx]"})

    Unknown keys in that mapping are ignored. See
    https://docs.expo.dev/push-notifications/sending-notifications/#message-request-format
    """

    def __init__(self, attributes: Mapping[str, Any] | None = None):
        self._to: list[str] | None = None
        self._data: Any = None
        self._title: str | None = None
        self._body: str | None = None
        self._ttl: int | None = None
        self._expiration: int | None = None
        self._priority: str = Priority.DEFAULT.value
        self._subtitle: str | None = None
        self._sound: str | None = None
        self._badge: int | float | None = None
        self._channel_id: str | None = None
        self._category_id: str | None = None
        self._mutable_content = False
        self._content_available = False

        for key, value in (attributes or {}).items():
            if not isinstance(key, str):
                continue
            if key.startswith("_"):
                key = key[1:]
            setter = self._SETTERS.get(key)
            if setter is not None:
                setter(self, value)

    def set_to(self, tokens: str | list[str]) -> "ExpoMessage":
        self._to = validate_tokens(tokens)
        return self

    def set_data(self, data: Any = None) -> "ExpoMessage":
        """
        Set the JSON payload delivered to the app.

        None clears it and an empty container becomes ``{}``. Anything
        list-shaped or scalar is rejected because Expo only takes objects.
        """
        if data is None:
            self._data = None
            return self

        if isinstance(data, _SCALAR_TYPES):
            raise InvalidMessageDataError(data)

        if isinstance(data, (list, tuple, Mapping)):
            if len(data) == 0:
                self._data = {}
                return self
            if is_list_shaped(data):
                raise InvalidMessageDataError(data)

        self._data = data
        return self

    def set_title(self, title: str | None = None) -> "ExpoMessage":
        self._title = title
        return self

    def set_body(self, body: str | None = None) -> "ExpoMessage":
        self._body = body
        return self

    def set_ttl(self, ttl: int | None = None) -> "ExpoMessage":
        self._ttl = ttl
        return self

    def set_expiration(self, expiration: int | None = None) -> "ExpoMessage":
        self._expiration = expiration
        return self

    def set_priority(self, priority: str | Priority = Priority.DEFAULT) -> "ExpoMessage":
        if isinstance(priority, Priority):
            priority = priority.value
        if not isinstance(priority, str):
            raise InvalidMessagePriorityError()

        priority = priority.lower()
        if priority not in {member.value for member in Priority}:
            raise InvalidMessagePriorityError()

        self._priority = priority
        return self

    def set_subtitle(self, subtitle: str | None = None) -> "ExpoMessage":
        self._subtitle = subtitle
        return self

    def play_sound(self) -> "ExpoMessage":
        self._sound = "default"
        return self

    def set_sound(self, sound: str | None = None) -> "ExpoMessage":
        self._sound = sound
        return self

    def set_badge(self, badge: int | float | None = None) -> "ExpoMessage":
        self._badge = badge
        return self

    def set_channel_id(self, channel_id: str | None = None) -> "ExpoMessage":
        self._channel_id = channel_id
        return self

    def set_category_id(self, category_id: str | None = None) -> "ExpoMessage":
        self._category_id = category_id
        return self

    def set_mutable_content(self, mutable: bool) -> "ExpoMessage":
        self._mutable_content = bool(mutable)
        return self

    def set_content_available(self, content_available: bool) -> "ExpoMessage":
        self._content_available = bool(content_available)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Wire representation, leaving out every field that is None."""
        fields = {
            "to": self._to,
            "data": self._data,
            "title": self._title,
            "body": self._body,
            "ttl": self._ttl,
            "expiration": self._expiration,
            "priority": self._priority,
            "subtitle": self._subtitle,
            "sound": self._sound,
            "badge": self._badge,
            "channelId": self._channel_id,
            "categoryId": self._category_id,
            "mutableContent": self._mutable_content,
            CONTENT_AVAILABLE_KEY: self._content_available,
        }
        return {key: value for key, value in fields.items() if value is not None}

    def __repr__(self) -> str:
        return f"ExpoMessage({self.to_dict()!r})"

    # Expo field names (and their snake_case spellings) to setters
    _SETTERS = {
        "to": set_to,
        "data": set_data,
        "title": set_title,
        "body": set_body,
        "ttl": set_ttl,
        "expiration": set_expiration,
        "priority": set_priority,
        "subtitle": set_subtitle,
        "sound": set_sound,
        "badge": set_badge,
        "channelId": set_channel_id,
        "channel_id": set_channel_id,
        "categoryId": set_category_id,
        "category_id": set_category_id,
        "mutableContent": set_mutable_content,
        "mutable_content": set_mutable_content,
        "contentAvailable": set_content_available,
        "content_available": set_content_available,
    }
