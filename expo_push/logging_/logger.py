import logging
import os
import sys
from datetime import datetime
from typing import Any

from loguru import logger
from loguru._logger import Logger

from expo_push.core.config import settings


class InterceptHandler(logging.Handler):
    """Forwards stdlib log records (the expo_push.* loggers) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def dynamic_formatter(record: Any) -> str:
    base = "[{time:HH:mm:ss}] [{level}] {name}:{function}:{line} - {message}"

    extras = record.get("extra", {})
    if extras:
        base += " ("
        for key, value in extras.items():
            base += f"{key}={value}, "
        base += ")\n"
    else:
        base += "\n"

    if record["exception"]:
        base += "{exception}"

    return base


def dynamic_console_formatter(record: Any) -> str:
    base = "[<green>{time:HH:mm:ss}</green>] <level>[{level}]</level> {name}:{function}:<blue>{line}</blue> - {message}\n"

    if record["exception"]:
        base += "{exception}"

    return base


def setup_logger(
    name: str = "expo_push",
    log_dir: str | None = None,
    console: bool = True,
) -> Logger:
    today = datetime.now().strftime("%Y-%m-%d")
    log_path = os.path.join(log_dir or settings.LOG_DIR, today, name)
    os.makedirs(log_path, exist_ok=True)

    log_file_debug = os.path.join(log_path, "debug.log")
    log_file_errors = os.path.join(log_path, "error.log")
    log_file_info = os.path.join(log_path, "info.log")

    logger.remove()  # Remove default handler

    if settings.DEBUG:
        logger.add(
            log_file_debug,
            format=dynamic_formatter,
            level="DEBUG",
            rotation="00:00",  # Rotate daily at midnight
            compression="zip",  # Compress rotated logs
            backtrace=True,
            diagnose=True,
            retention="7 days",
        )

    logger.add(
        log_file_errors,
        format=dynamic_formatter,
        level="ERROR",
        rotation="00:00",
        compression="zip",
        backtrace=True,
        diagnose=False,
        retention="30 days",
    )

    logger.add(
        log_file_info,
        format=dynamic_formatter,
        level="INFO",
        rotation="00:00",
        compression="zip",
        backtrace=True,
        diagnose=False,
    )

    if console:
        logger.add(
            sys.stderr,
            format=dynamic_console_formatter,
            level="DEBUG" if settings.DEBUG else "INFO",
            backtrace=True,
            diagnose=settings.DEBUG,
            colorize=True,
        )

    package_logger = logging.getLogger("expo_push")
    package_logger.handlers = [InterceptHandler()]
    package_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    package_logger.propagate = False

    return logger  # type: ignore
