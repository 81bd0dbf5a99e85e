from .base import ExpoError

__all__ = [
    "StorageError",
    "PathNotFoundError",
    "InvalidFileTypeError",
    "UnableToReadError",
    "UnableToWriteError",
    "UnsupportedDriverError",
    "DriverNotConfiguredError",
]


class StorageError(ExpoError):
    """Base class for all subscription storage errors."""

    detail = "An error occurred with the subscription storage."


class PathNotFoundError(StorageError):
    def __init__(self, path: str):
        super().__init__(f"The file {path} does not exist.")


class InvalidFileTypeError(StorageError):
    detail = "The storage file must have a .json extension."


class UnableToReadError(StorageError):
    def __init__(self, path: str):
        super().__init__(f"Unable to read file at {path}.")


class UnableToWriteError(StorageError):
    def __init__(self, path: str):
        super().__init__(f"Unable to write file at {path}.")


class UnsupportedDriverError(StorageError):
    def __init__(self, driver: str):
        super().__init__(f"Driver {driver} is not supported")


class DriverNotConfiguredError(StorageError):
    detail = "You must provide a driver to interact with subscriptions."
