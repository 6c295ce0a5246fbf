"""
Async queue-based logging system.

Provides non-blocking logging so console I/O never stalls the event
loop serving dashboard requests.
"""

import logging
import sys
from datetime import datetime
from logging.handlers import QueueHandler, QueueListener
from queue import Queue

from spreadwatch.config.constants import LOG_DATE_FORMAT, LOG_FORMAT, MAX_LOG_QUEUE_SIZE


class MillisecondFormatter(logging.Formatter):
    """Formatter with millisecond precision timestamps."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format time with milliseconds."""
        ct = datetime.fromtimestamp(record.created)
        s = ct.strftime(datefmt or LOG_DATE_FORMAT)
        return f"{s}.{int(record.msecs):03d}"


class AsyncLogger:
    """
    Async-friendly logger with queue-based output.

    All logging calls are non-blocking - messages are queued
    and written by a background thread.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize async logger.

        Args:
            name: Logger name.
            level: Logging level.
        """
        self._name = name
        self._level = level
        self._queue: Queue[logging.LogRecord] = Queue(maxsize=MAX_LOG_QUEUE_SIZE)
        self._listener: QueueListener | None = None
        self._queue_handler: QueueHandler | None = None
        self._logger = logging.getLogger(name)

    def start(self) -> None:
        """Start the async logging system."""
        if self._listener:
            return

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(MillisecondFormatter(LOG_FORMAT, LOG_DATE_FORMAT))
        console_handler.setLevel(self._level)

        # Set up queue handler for non-blocking logging
        self._queue_handler = QueueHandler(self._queue)
        self._logger.addHandler(self._queue_handler)
        self._logger.setLevel(self._level)

        self._listener = QueueListener(
            self._queue,
            console_handler,
            respect_handler_level=True,
        )
        self._listener.start()

    def stop(self) -> None:
        """Stop the async logging system, flushing queued records."""
        if self._listener:
            self._listener.stop()
            self._listener = None
        if self._queue_handler:
            self._logger.removeHandler(self._queue_handler)
            self._queue_handler = None

    def info(self, msg: str, *args: object) -> None:
        """Log info message."""
        self._logger.info(msg, *args)


def setup_logging(level: str = "INFO") -> AsyncLogger:
    """
    Set up application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).

    Returns:
        Started AsyncLogger instance; call stop() on shutdown.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    async_logger = AsyncLogger(name="spreadwatch", level=numeric_level)
    async_logger.start()

    # Suppress noisy third-party loggers
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return async_logger
