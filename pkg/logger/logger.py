import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional, Protocol, runtime_checkable

from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Per-task trace context (works for both threads and asyncio tasks)
_trace_id_var: ContextVar[Optional[str]] = ContextVar(TRACE_ID_KEY, default=None)
_request_id_var: ContextVar[Optional[str]] = ContextVar(REQUEST_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ) -> Iterator[None]: ...

    def get_trace_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Loguru wrapper with trace ID support.

    One instance is created in each entry point and passed down to the
    adapters and use cases that need it.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))
        with logger.trace_context(trace_id="evt_123"):
            logger.info("Processing notification")
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        # Replace loguru's default stderr sink
        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        def inject_context(record) -> bool:
            record["extra"][TRACE_ID_KEY] = _trace_id_var.get() or ""
            request_id = _request_id_var.get()
            if request_id:
                record["extra"][REQUEST_ID_KEY] = request_id
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_TRACE} | "
            f"{LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize and not self.config.serialize,
            serialize=self.config.serialize,
            format=format_str,
            level=self.config.level.value,
            filter=inject_context,
        )

    @contextmanager
    def trace_context(
        self, trace_id: Optional[str] = None, request_id: Optional[str] = None
    ):
        """Bind trace / request IDs for everything logged inside the block."""
        trace_token = _trace_id_var.set(trace_id) if trace_id else None
        request_token = _request_id_var.set(request_id) if request_id else None
        try:
            yield
        finally:
            if trace_token is not None:
                _trace_id_var.reset(trace_token)
            if request_token is not None:
                _request_id_var.reset(request_token)

    def get_trace_id(self) -> Optional[str]:
        return _trace_id_var.get()

    def get_request_id(self) -> Optional[str]:
        return _request_id_var.get()

    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).critical(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log an error with the active exception's traceback."""
        self._loguru.opt(depth=1, exception=True).error(message, **kwargs)

    def bind(self, **kwargs):
        return self._loguru.bind(**kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
