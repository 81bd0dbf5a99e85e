from collections.abc import Callable
from typing import Any

__all__ = [
    "DEVICES_NOT_REGISTERED",
    "HookRegistry",
]

DEVICES_NOT_REGISTERED = "devicesNotRegistered"


class HookRegistry:
    """Callbacks keyed by event name. Only documented events are accepted."""

    events = frozenset({DEVICES_NOT_REGISTERED})

    def __init__(self) -> None:
        self._hooks: dict[str, Callable[..., Any]] = {}

    def register(self, name: str, callback: Callable[..., Any]) -> None:
        if name not in self.events:
            raise ValueError(f"Unknown hook {name!r}")
        if not callable(callback):
            raise TypeError("Hook callback must be callable")
        self._hooks[name] = callback

    def has(self, name: str) -> bool:
        return name in self._hooks

    def invoke(self, name: str, *args: Any) -> Any:
        return self._hooks[name](*args)

    def forget(self, name: str) -> None:
        self._hooks.pop(name, None)

    def clear(self) -> None:
        self._hooks.clear()
