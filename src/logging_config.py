"""Centralized logging configuration."""
import logging
import sys

CONSOLE_HANDLER_NAME = "word-picker-console"

# Libraries whose INFO output drowns the pick logs
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore", "aiosqlite")


def _console_handler() -> logging.Handler | None:
    for handler in logging.getLogger().handlers:
        if handler.get_name() == CONSOLE_HANDLER_NAME:
            return handler
    return None


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure logging for the application.

    Safe to call more than once: the stdout handler is installed a single
    time and later calls only change its level.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = _console_handler()
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(console_handler)
    console_handler.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    return logging.getLogger(name)
