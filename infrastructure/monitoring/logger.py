import json
import logging
import sys
import time
import traceback
from dataclasses import asdict, dataclass, field
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from config.settings import Settings

EVENTS_LOGGER_NAME = 'currentcy.events'


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, Decimal):
            return str(o)
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line. `extra_data` passed through `extra=` lands under "data".
    """
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            entry['exception'] = {
                'type': exc_type.__name__,
                'message': str(exc_value),
                'traceback': traceback.format_exception(*record.exc_info),
            }

        extra_data = getattr(record, 'extra_data', None)
        if extra_data is not None:
            entry['data'] = extra_data

        return json.dumps(entry, ensure_ascii=False, cls=CustomJSONEncoder)


class AppLogger:
    """
    Root logger setup.

    Console always; with `log_to_file`, rotating JSON files under `log_directory`:
        system/app.log     everything at `file_level` and above
        errors/errors.log  warnings and errors only
        events/events.log  structured provider-call and sync events
    """
    def __init__(self,
                 log_directory: str = "logs",
                 console_level: str = "INFO",
                 file_level: str = "DEBUG",
                 log_to_file: bool = True,
                 max_file_size: int = 10 * 1024 * 1024,
                 backup_count: int = 5):
        self.log_directory = Path(log_directory)
        self.console_level = getattr(logging, console_level.upper())
        self.file_level = getattr(logging, file_level.upper())
        self.log_to_file = log_to_file
        self.max_file_size = max_file_size
        self.backup_count = backup_count

        self._configure()

    def _configure(self) -> None:
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(logging.DEBUG)

        # request lines from the HTTP and sqlite drivers are noise at INFO
        for noisy in ("httpx", "httpcore", "aiosqlite"):
            logging.getLogger(noisy).setLevel(logging.WARNING)

        console = logging.StreamHandler(sys.stdout)
        console.setLevel(self.console_level)
        console.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s', datefmt='%H:%M:%S'
        ))
        root.addHandler(console)

        events = logging.getLogger(EVENTS_LOGGER_NAME)
        for handler in events.handlers[:]:
            events.removeHandler(handler)
            handler.close()

        if not self.log_to_file:
            return

        root.addHandler(self._rotating_handler("system", "app.log", self.file_level))
        root.addHandler(self._rotating_handler("errors", "errors.log", logging.WARNING))
        events.addHandler(self._rotating_handler("events", "events.log", logging.DEBUG))

    def _rotating_handler(self, subdirectory: str, filename: str, level: int) -> RotatingFileHandler:
        directory = self.log_directory / subdirectory
        directory.mkdir(parents=True, exist_ok=True)

        handler = RotatingFileHandler(
            directory / filename,
            maxBytes=self.max_file_size,
            backupCount=self.backup_count,
            encoding='utf-8'
        )
        handler.setLevel(level)
        handler.setFormatter(JSONFormatter())
        return handler


class EventType(Enum):
    PROVIDER_CALL = "provider_call"
    RATE_SYNC = "rate_sync"


@dataclass
class LogEvent:
    event_type: EventType
    message: str
    level: int = logging.INFO
    duration_ms: float | None = None
    context: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data['event_type'] = self.event_type.value
        data['level'] = logging.getLevelName(self.level)
        data['timestamp'] = self.timestamp.isoformat()
        return data


class EventLogger:
    """Structured events on top of the plain module loggers."""

    def __init__(self, name: str = EVENTS_LOGGER_NAME):
        self.logger = logging.getLogger(name)

    def log_event(self, event: LogEvent) -> None:
        self.logger.log(event.level, event.message, extra={'extra_data': event.to_dict()})

    def log_provider_call(self, provider: str, endpoint: str, success: bool,
                          duration_ms: float, error_message: str | None = None) -> None:
        context = {'provider': provider, 'endpoint': endpoint, 'success': success}
        if error_message:
            context['error_message'] = error_message

        self.log_event(LogEvent(
            event_type=EventType.PROVIDER_CALL,
            level=logging.INFO if success else logging.WARNING,
            message=f"Provider call {provider}/{endpoint}: {'SUCCESS' if success else 'FAILED'}",
            duration_ms=duration_ms,
            context=context,
        ))

    def log_rate_sync(self, provider: str, fetched: int, known: int, duration_ms: float) -> None:
        self.log_event(LogEvent(
            event_type=EventType.RATE_SYNC,
            message=f"Rate sync from {provider}: {fetched} rates, {known} known currencies",
            duration_ms=duration_ms,
            context={'provider': provider, 'fetched': fetched, 'known': known},
        ))


def elapsed_ms(start: float) -> float:
    """Milliseconds since a `time.perf_counter()` reading."""
    return (time.perf_counter() - start) * 1000


_event_logger: EventLogger | None = None


def get_event_logger() -> EventLogger:
    global _event_logger
    if _event_logger is None:
        _event_logger = EventLogger()
    return _event_logger


def configure_logging(settings: Settings) -> AppLogger:
    return AppLogger(
        log_directory=settings.LOG_DIRECTORY,
        console_level=settings.LOG_LEVEL,
        file_level="DEBUG" if settings.DEBUG else "INFO",
        log_to_file=settings.LOG_TO_FILE,
    )
