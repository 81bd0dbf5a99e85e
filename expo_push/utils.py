from collections.abc import Mapping
from typing import Any

from expo_push.exceptions import InvalidTokenInputError, NoValidTokensError

EXPO_TOKEN_PREFIXES = ("ExponentPushToken[", "ExpoPushToken[")
MIN_TOKEN_LENGTH = 15


def is_expo_push_token(value: Any) -> bool:
    if not isinstance(value, str) or len(value) < MIN_TOKEN_LENGTH:
        return False
    return value.startswith(EXPO_TOKEN_PREFIXES) and value.endswith("]")


def array_wrap(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def is_list_shaped(value: Any) -> bool:
    """
    A non-empty structure whose keys are exactly 0..n-1, in order.

    Sequences are list-shaped whenever they are non-empty; mappings only
    when their keys form that dense integer run. Everything else, empty
    containers included, counts as map-shaped.
    """
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    if isinstance(value, Mapping):
        return len(value) > 0 and list(value.keys()) == list(range(len(value)))
    return False


def validate_tokens(tokens: Any) -> list[str]:
    """
    Keep only valid Expo push tokens, preserving order and duplicates.

    Raises InvalidTokenInputError when ``tokens`` is neither a string nor a
    list, and NoValidTokensError when nothing valid is left.
    """
    if not isinstance(tokens, (str, list, tuple)):
        raise InvalidTokenInputError(tokens)

    valid = [token for token in array_wrap(tokens) if is_expo_push_token(token)]
    if not valid:
        raise NoValidTokensError()

    return valid


def token_hint(token: str) -> str:
    if len(token) <= 16:
        return token
    return f"{token[:12]}...{token[-4:]}"
