from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from expo_push.core.enums import PushErrorCode, TicketStatus

__all__ = [
    "PushReceipt",
    "PushTicket",
    "PushTicketDetails",
]


class PushTicketDetails(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    error: str | None = None
    expo_push_token: str | None = Field(default=None, alias="expoPushToken")

    @field_validator("error", "expo_push_token", mode="before")
    @classmethod
    def drop_non_string(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class _TicketBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: str | None = None
    message: str | None = None
    details: PushTicketDetails | None = None

    # Non-string values are dropped rather than rejected
    @field_validator("status", "message", mode="before")
    @classmethod
    def drop_non_string(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None

    @field_validator("details", mode="before")
    @classmethod
    def drop_non_mapping_details(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @property
    def is_error(self) -> bool:
        return self.status == TicketStatus.ERROR.value

    @property
    def error(self) -> str | None:
        return self.details.error if self.details else None

    @property
    def device_not_registered(self) -> bool:
        return self.error == PushErrorCode.DEVICE_NOT_REGISTERED.value


class PushTicket(_TicketBase):
    """One entry of the push/send response, aligned by index with the request."""

    id: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def drop_non_string_id(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class PushReceipt(_TicketBase):
    """Delivery receipt returned by push/getReceipts, keyed by ticket id."""
