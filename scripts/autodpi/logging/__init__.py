import logging
import sys
from pathlib import Path
from typing import Optional, Union

LEVEL_COLORS = {
    "DEBUG": "\x1b[36m",
    "INFO": "\x1b[32m",
    "WARNING": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "CRITICAL": "\x1b[41m",
}
RESET = "\x1b[0m"

PACKAGE_LOGGER = "autodpi"
FILE_FORMAT = "%(asctime)s - %(name)s - [%(levelname)s] %(message)s"


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt: str):
        super().__init__(fmt)

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so the file handler never sees escape codes.
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        color = LEVEL_COLORS.get(levelname, "")
        record.levelname = f"{color}{levelname}{RESET}" if color else levelname
        return super().format(record)


class Logger:
    def __init__(self, name: str, level: Union[str, int] = "INFO", log_file: Optional[str] = None):
        self.name = name
        self.logger = logging.getLogger(name)
        self._set_level(level)
        self._setup_handlers(log_file)

    def _set_level(self, level: Union[str, int]) -> None:
        if isinstance(level, int):
            level_value = level
        else:
            level_value = logging.getLevelName(level)
            if isinstance(level_value, str):
                level_value = logging.INFO
        self.logger.setLevel(level_value)

    def _setup_handlers(self, log_file: Optional[str]) -> None:
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)

        console_format = "[%(levelname)s] %(name)s: %(message)s"
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter(console_format))
        self.logger.addHandler(console_handler)

        if log_file:
            self.logger.addHandler(_file_handler(log_file))

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self.logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs) -> None:
        self.logger.critical(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self.logger.exception(msg, *args, **kwargs)


def _file_handler(log_file: Union[str, Path]) -> logging.FileHandler:
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def duplicate_log(log_file: Union[str, Path]) -> logging.FileHandler:
    """Append every record emitted under the package logger to ``log_file``.

    Module loggers keep their own stdout handler and propagate to the package
    logger, which only carries the file handler, so each line is written once
    to the console and once to the file.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG)
    handler = _file_handler(log_file)
    package_logger.addHandler(handler)
    return handler


def detach_log(handler: logging.Handler) -> None:
    logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
    handler.close()


__all__ = ["Logger", "ColoredFormatter", "duplicate_log", "detach_log"]
