"""
Turns failed Expo responses into RemoteApiError.

Only the first entry of an ``errors`` array is surfaced.
"""
import json
from typing import Any

import httpx

from expo_push.exceptions import RemoteApiError

__all__ = [
    "get_error_from_result",
    "get_text_response_error",
    "parse_error_response",
    "response_has_errors",
]


def parse_error_response(response: httpx.Response) -> RemoteApiError:
    status_code = response.status_code
    text = response.text

    try:
        result = json.loads(text)
    except ValueError:
        return get_text_response_error(text, status_code)

    if not isinstance(result, dict) or not response_has_errors(result):
        return get_text_response_error(text, status_code)

    return get_error_from_result(result, status_code)


def get_text_response_error(text: str, status_code: int) -> RemoteApiError:
    return RemoteApiError(
        f"Expo responded with an error with status code: {status_code}: {text}",
        status_code,
    )


def get_error_from_result(result: dict[str, Any], status_code: int) -> RemoteApiError:
    if not response_has_errors(result):
        return RemoteApiError(
            "Expected at least one error from Expo. Found none",
            status_code,
        )

    error = result["errors"][0]
    if not isinstance(error, dict):
        return get_text_response_error(json.dumps(result), status_code)

    message = error.get("message", "")
    code = error.get("code")

    # String codes such as "PUSH_TOO_MANY_EXPERIENCE_IDS" go in the message
    if isinstance(code, str):
        message = f"{code}: {message}"
        code = status_code

    return RemoteApiError(message, code if isinstance(code, int) else status_code)


def response_has_errors(result: dict[str, Any]) -> bool:
    errors = result.get("errors")
    return isinstance(errors, list) and len(errors) > 0
