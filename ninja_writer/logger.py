from typing import NotRequired, TypedDict
import logging
from ninja_writer.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "ninja_writer",
    "is_enabled": True,
    "level": logging.DEBUG,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class ScopedLogger(logging.LoggerAdapter):
    """A view of a shared logger with its own on/off switch and level.

    Loggers are process-wide, so two owners of the same name must not flip
    ``disabled`` or raise the level under each other.
    """

    def __init__(self, logger: logging.Logger, is_enabled: bool, level: int):
        super().__init__(logger, {})
        self.is_enabled = is_enabled
        self.threshold = level

    def isEnabledFor(self, level: int) -> bool:
        return self.is_enabled and level >= self.threshold and self.logger.isEnabledFor(level)


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.logger = logging.getLogger(self.config["name"])
        self.scoped = ScopedLogger(self.logger, self.config["is_enabled"], self.config["level"])
        self.set_configuration()

    def set_configuration(self):
        if not self.config["is_enabled"]:
            return

        if self.logger.level == logging.NOTSET or self.logger.level > self.config["level"]:
            self.logger.setLevel(self.config["level"])
        # only attach one handler per name
        if self.logger.handlers:
            return
        self.formatter = logging.Formatter(self.config["format"])
        self.ch = logging.StreamHandler()
        self.ch.setFormatter(self.formatter)
        self.logger.addHandler(self.ch)
