from dataclasses import dataclass

from .constant import *


@dataclass
class LoggerConfig:
    """Logger configuration.

    Attributes:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Write records to stdout
        colorize: Enable colored console output
        serialize: Emit JSON lines instead of the human format
        service_name: Service name bound to every record
    """

    level: LogLevel = DEFAULT_LEVEL
    enable_console: bool = DEFAULT_ENABLE_CONSOLE
    colorize: bool = DEFAULT_COLORIZE
    serialize: bool = DEFAULT_SERIALIZE
    service_name: str = DEFAULT_SERVICE_NAME

    def __post_init__(self):
        if isinstance(self.level, str) and not isinstance(self.level, LogLevel):
            value = self.level.upper()
            if value == "WARN":
                value = LogLevel.WARNING.value
            try:
                self.level = LogLevel(value)
            except ValueError:
                valid_levels = [l.value for l in LogLevel]
                raise ValueError(
                    f"Invalid log level: {self.level}. Must be one of {valid_levels}"
                )
        if not self.service_name or not self.service_name.strip():
            raise ValueError("service_name cannot be empty")


__all__ = ["LoggerConfig"]
