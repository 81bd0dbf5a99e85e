import fcntl
import json
import os
import shutil
import tempfile
from collections.abc import Iterator, Mapping
from contextlib import contextmanager, suppress
from logging import getLogger
from typing import Any

from expo_push.exceptions import (
    InvalidFileTypeError,
    PathNotFoundError,
    UnableToReadError,
    UnableToWriteError,
)

__all__ = [
    "JsonFile",
]

logger = getLogger(__name__)


class JsonFile:
    """
    A JSON object document on disk.

    The whole document is read and written in one go. Writes go through a
    temporary file and ``os.replace`` while holding an exclusive lock on
    ``<path>.lock``, so concurrent readers only ever see a complete document.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = os.fspath(path)
        self._lock_depth = 0

        if not self.path or not os.path.exists(self.path):
            raise PathNotFoundError(self.path)

        if not self.path.endswith(".json"):
            raise InvalidFileTypeError()

        self._validate_contents()

    @property
    def lock_path(self) -> str:
        return f"{self.path}.lock"

    def _validate_contents(self) -> None:
        contents = self._read_text()

        if not contents.strip():
            self.write({})
            return

        if not isinstance(self._decode(contents), dict):
            logger.warning("Replacing non-object JSON in %s with an empty object", self.path)
            self.write({})

    def _read_text(self) -> str:
        if not os.path.isfile(self.path):
            raise UnableToReadError(self.path)
        try:
            with open(self.path, encoding="utf-8") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise UnableToReadError(self.path) from exc

    def _decode(self, contents: str) -> Any:
        try:
            return json.loads(contents)
        except json.JSONDecodeError as exc:
            raise UnableToReadError(self.path) from exc

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Hold the exclusive write lock. Re-entrant within one instance."""
        if self._lock_depth:
            self._lock_depth += 1
            try:
                yield
            finally:
                self._lock_depth -= 1
            return

        try:
            handle = open(self.lock_path, "a")
        except OSError as exc:
            raise UnableToWriteError(self.path) from exc

        with handle:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            self._lock_depth = 1
            try:
                yield
            finally:
                self._lock_depth = 0
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)

    def read(self) -> dict[str, Any]:
        contents = self._read_text()

        if not contents.strip():
            return {}

        decoded = self._decode(contents)
        return decoded if isinstance(decoded, dict) else {}

    def write(self, contents: Mapping[str, Any]) -> bool:
        if not os.path.exists(self.path):
            raise UnableToWriteError(self.path)

        # Encoding errors surface here, before the file is touched
        payload = json.dumps(contents)

        with self.lock():
            directory = os.path.dirname(os.path.abspath(self.path))
            tmp_path = None
            try:
                fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(payload)
                shutil.copymode(self.path, tmp_path)
                os.replace(tmp_path, self.path)
            except OSError as exc:
                if tmp_path is not None:
                    with suppress(OSError):
                        os.unlink(tmp_path)
                raise UnableToWriteError(self.path) from exc

        return True

    def empty(self) -> None:
        self.write({})
