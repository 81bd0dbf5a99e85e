from collections.abc import Callable, Generator
from pathlib import Path

import httpx
import pytest

from expo_push.services.client import ExpoClient
from expo_push.services.expo import Expo

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clear_hooks() -> Generator[None, None, None]:
    Expo.hooks.clear()
    yield
    Expo.hooks.clear()


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    path = tmp_path / "expo.json"
    path.write_text("")
    return path


@pytest.fixture
def make_client() -> Callable[..., ExpoClient]:
    def _make_client(handler: Handler, access_token: str | None = None) -> ExpoClient:
        return ExpoClient(
            access_token,
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

    return _make_client


@pytest.fixture
def tickets_handler() -> Callable[[list[dict]], Handler]:
    """Answers push/send with the given tickets and records requests."""

    def _tickets_handler(tickets: list[dict]) -> Handler:
        def handler(request: httpx.Request) -> httpx.Response:
            handler.requests.append(request)  # type: ignore[attr-defined]
            return httpx.Response(200, json={"data": tickets})

        handler.requests = []  # type: ignore[attr-defined]
        return handler

    return _tickets_handler
