from typing import Any

from .base import ExpoError

__all__ = [
    "MessageError",
    "InvalidMessageDataError",
    "InvalidMessagePriorityError",
]


class MessageError(ExpoError):
    """Base class for all message building errors."""

    detail = "Invalid push message."


class InvalidMessageDataError(MessageError):
    def __init__(self, data: Any):
        detail = (
            "Message data must be either a mapping, object or None. "
            f"{type(data).__name__} given"
        )
        super().__init__(detail)


class InvalidMessagePriorityError(MessageError):
    detail = "Priority must be default, normal or high."
