from expo_push.exceptions import ExpoError
from expo_push.schemas.message import ExpoMessage
from expo_push.services.client import ExpoClient
from expo_push.services.expo import Expo
from expo_push.services.response import ExpoResponse
from expo_push.storage.manager import DriverManager

__all__ = [
    "DriverManager",
    "Expo",
    "ExpoClient",
    "ExpoError",
    "ExpoMessage",
    "ExpoResponse",
]
