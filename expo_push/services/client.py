import dataclasses
import gzip
import json
from collections.abc import Sequence
from logging import getLogger
from typing import Any

import httpx
from pydantic import BaseModel

from expo_push.core.config import settings
from expo_push.exceptions import (
    RemoteApiError,
    UnexpectedReceiptsError,
    UnexpectedTicketCountError,
)
from expo_push.services.error_parsing import (
    get_error_from_result,
    get_text_response_error,
    parse_error_response,
)
from expo_push.services.response import ExpoResponse
from expo_push.utils import array_wrap

__all__ = [
    "ExpoClient",
]

logger = getLogger(__name__)


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if hasattr(value, "__dict__"):
        return vars(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class ExpoClient:
    """
    HTTP transport for the Expo push API.

    Pass ``http_client`` to reuse a configured ``httpx.Client``; otherwise
    one is created from ``client_options``.
    """

    def __init__(
        self,
        access_token: str | None = None,
        *,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        **client_options: Any,
    ):
        self.access_token = access_token or settings.EXPO_ACCESS_TOKEN
        self.base_url = (base_url or settings.EXPO_BASE_URL).rstrip("/")

        client_options.setdefault("timeout", settings.EXPO_REQUEST_TIMEOUT)
        self.http_client = http_client or httpx.Client(**client_options)

    def set_access_token(self, access_token: str) -> None:
        self.access_token = access_token

    def send_push_notifications(self, messages: Sequence[dict[str, Any]]) -> ExpoResponse:
        expected = self._count_recipients(messages)
        response = self._post("/push/send", list(messages))

        if response.status_code != 200:
            raise parse_error_response(response)

        try:
            result = json.loads(response.text)
        except ValueError:
            raise get_text_response_error(response.text, response.status_code)

        if not isinstance(result, dict):
            raise get_text_response_error(response.text, response.status_code)

        if "errors" in result:
            raise get_error_from_result(result, response.status_code)

        data = result.get("data")
        received = len(data) if isinstance(data, list) else 0
        if not isinstance(data, list) or received != expected:
            raise UnexpectedTicketCountError(expected, received)

        logger.info("Expo accepted %d push message(s)", expected)
        return ExpoResponse(response)

    def get_push_notification_receipts(self, ticket_ids: Sequence[str]) -> ExpoResponse:
        response = self._post("/push/getReceipts", {"ids": list(ticket_ids)})

        if response.status_code != 200:
            raise RemoteApiError(
                f"Request failed with status code {response.status_code}",
                response.status_code,
            )

        try:
            result = json.loads(response.text)
        except ValueError:
            raise RemoteApiError(
                "Invalid JSON response from Expo API",
                response.status_code,
            )

        if not isinstance(result, dict) or not isinstance(result.get("data"), dict):
            raise UnexpectedReceiptsError()

        logger.info("Fetched receipts for %d ticket(s)", len(ticket_ids))
        return ExpoResponse(response)

    def get_default_headers(self) -> dict[str, str]:
        headers = {
            "Host": httpx.URL(self.base_url).host,
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "Content-Type": "application/json",
        }

        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        return headers

    def compress_body(self, value: Any) -> tuple[bool, bytes]:
        body = json.dumps(value, separators=(",", ":"), default=_json_default).encode()

        if len(body) > settings.COMPRESSION_THRESHOLD_BYTES:
            logger.debug("Compressing %d byte request body", len(body))
            return True, gzip.compress(body, compresslevel=settings.COMPRESSION_LEVEL)

        return False, body

    def close(self) -> None:
        self.http_client.close()

    def _post(self, path: str, payload: Any) -> httpx.Response:
        compressed, body = self.compress_body(payload)
        headers = self.get_default_headers()

        if compressed:
            headers["Content-Encoding"] = "gzip"

        return self.http_client.post(f"{self.base_url}{path}", headers=headers, content=body)

    @staticmethod
    def _count_recipients(messages: Sequence[dict[str, Any]]) -> int:
        return sum(len(array_wrap(message.get("to"))) for message in messages)
