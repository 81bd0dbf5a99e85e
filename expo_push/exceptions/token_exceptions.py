from typing import Any

from .base import ExpoError

__all__ = [
    "InvalidTokenInputError",
    "NoValidTokensError",
]


class InvalidTokenInputError(ExpoError):
    """Raised when tokens are passed as something other than a string or a list."""

    def __init__(self, value: Any = None, detail: str | None = None):
        if detail is None:
            detail = (
                "Tokens must be a string or non empty list, "
                f"{type(value).__name__} given."
            )
        super().__init__(detail)


class NoValidTokensError(ExpoError):
    """Raised when no Expo push token survives validation."""

    detail = "No valid expo tokens provided."
