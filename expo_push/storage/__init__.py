from .drivers import Driver, FileDriver
from .json_file import JsonFile
from .manager import DriverManager

__all__ = [
    "Driver",
    "DriverManager",
    "FileDriver",
    "JsonFile",
]
