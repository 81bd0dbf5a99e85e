from .base import ExpoError

__all__ = [
    "DispatchError",
    "EmptyMessageListError",
    "InvalidMessageListError",
    "NoRecipientError",
    "UnexpectedTicketCountError",
    "UnexpectedReceiptsError",
    "RemoteApiError",
]


class DispatchError(ExpoError):
    """Raised when queued messages can not be turned into a push request."""

    detail = "Unable to dispatch push messages."


class EmptyMessageListError(DispatchError):
    detail = "You must have at least one message to push"


class InvalidMessageListError(DispatchError):
    detail = "You can only send an ExpoMessage instance or a list of messages"


class NoRecipientError(DispatchError):
    detail = "A message must have at least one recipient to send"


class UnexpectedTicketCountError(ExpoError):
    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        noun = "ticket" if expected == 1 else "tickets"
        super().__init__(
            f"Expected Expo to respond with {expected} {noun} but received {received}"
        )


class UnexpectedReceiptsError(ExpoError):
    detail = (
        "Expected Expo to respond with a map from receipt IDs to receipts "
        "but received data of another type"
    )


class RemoteApiError(ExpoError):
    """Raised when Expo answers with a non 200 status or an errors array."""
