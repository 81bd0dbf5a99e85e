from .base import ExpoError
from .message_exceptions import (
    InvalidMessageDataError,
    InvalidMessagePriorityError,
    MessageError,
)
from .push_exceptions import (
    DispatchError,
    EmptyMessageListError,
    InvalidMessageListError,
    NoRecipientError,
    RemoteApiError,
    UnexpectedReceiptsError,
    UnexpectedTicketCountError,
)
from .storage_exceptions import (
    DriverNotConfiguredError,
    InvalidFileTypeError,
    PathNotFoundError,
    StorageError,
    UnableToReadError,
    UnableToWriteError,
    UnsupportedDriverError,
)
from .token_exceptions import InvalidTokenInputError, NoValidTokensError

__all__ = [
    "ExpoError",
    "InvalidTokenInputError",
    "NoValidTokensError",
    "MessageError",
    "InvalidMessageDataError",
    "InvalidMessagePriorityError",
    "StorageError",
    "PathNotFoundError",
    "InvalidFileTypeError",
    "UnableToReadError",
    "UnableToWriteError",
    "UnsupportedDriverError",
    "DriverNotConfiguredError",
    "DispatchError",
    "EmptyMessageListError",
    "InvalidMessageListError",
    "NoRecipientError",
    "UnexpectedTicketCountError",
    "UnexpectedReceiptsError",
    "RemoteApiError",
]
