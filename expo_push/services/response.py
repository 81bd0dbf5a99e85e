import json
from logging import getLogger
from typing import Any

import httpx
from pydantic import ValidationError

from expo_push.schemas.push_ticket import PushReceipt, PushTicket

__all__ = [
    "ExpoResponse",
]

logger = getLogger(__name__)


class ExpoResponse:
    """
    Wraps a response from the Expo push API.

    Check ``ok`` before trusting ``data``; it is None for failed requests.
    """

    def __init__(self, response: httpx.Response):
        self.status_code = response.status_code
        try:
            self.body: Any = json.loads(response.text)
        except ValueError:
            self.body = None

    @property
    def ok(self) -> bool:
        return (
            self.status_code == 200
            and isinstance(self.body, dict)
            and "errors" not in self.body
        )

    @property
    def data(self) -> Any:
        return self.body.get("data") if self.ok else None

    @property
    def tickets(self) -> list[PushTicket | None] | None:
        """Tickets in request order, None where an entry is not a ticket."""
        data = self.data
        if not isinstance(data, list):
            return None

        tickets: list[PushTicket | None] = []
        for index, entry in enumerate(data):
            ticket = None
            if isinstance(entry, dict):
                try:
                    ticket = PushTicket.model_validate(entry)
                except ValidationError:
                    logger.warning("Malformed Expo ticket at index %d", index)
            tickets.append(ticket)
        return tickets

    @property
    def receipts(self) -> dict[str, PushReceipt] | None:
        data = self.data
        if not isinstance(data, dict):
            return None

        receipts = {}
        for receipt_id, entry in data.items():
            if not isinstance(entry, dict):
                continue
            try:
                receipts[receipt_id] = PushReceipt.model_validate(entry)
            except ValidationError:
                logger.warning("Skipping malformed Expo receipt %s", receipt_id)
        return receipts

    def __repr__(self) -> str:
        return f"ExpoResponse(status_code={self.status_code}, ok={self.ok})"
