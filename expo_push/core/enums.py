from enum import Enum, unique


@unique
class Priority(str, Enum):
    DEFAULT = "default"
    NORMAL = "normal"
    HIGH = "high"


@unique
class TicketStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


@unique
class PushErrorCode(str, Enum):
    DEVICE_NOT_REGISTERED = "DeviceNotRegistered"
    INVALID_CREDENTIALS = "InvalidCredentials"
    MESSAGE_TOO_BIG = "MessageTooBig"
    MESSAGE_RATE_EXCEEDED = "MessageRateExceeded"
    MISMATCH_SENDER_ID = "MismatchSenderId"


@unique
class StorageDriver(str, Enum):
    FILE = "file"
