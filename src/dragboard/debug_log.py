"""In-memory debug log for the board TUI.

Direct ``log`` calls, drag gesture traces and stdlib ``logging`` records from
the ``dragboard`` package all land in one bounded ring buffer. Nothing is
written to disk until the user exports it (F12).
"""

from __future__ import annotations

import contextlib
import logging
import time
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dragboard.limits import MAX_LOG_LINES, MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from collections.abc import Iterator

    from dragboard.core.events import DragEvent

LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LogSource(Enum):
    """Where a buffered entry came from."""

    DIRECT = "DIRECT"
    GESTURE = "GESTURE"
    LOGGING = "LOGGING"


_SOURCE_TAGS = {LogSource.DIRECT: "[DB]", LogSource.GESTURE: "[GS]", LogSource.LOGGING: "[PY]"}


@dataclass(slots=True)
class LogEntry:
    level: str
    message: str
    timestamp: float
    source: LogSource
    origin: str = ""
    fields: dict[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        stamp = datetime.fromtimestamp(self.timestamp).strftime("%H:%M:%S.%f")[:-3]
        origin = f" {self.origin}:" if self.origin else ""
        return f"{stamp} {_SOURCE_TAGS[self.source]} [{self.level}]{origin} {self.message}"


log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)

_buffer_generation: int = 0


def _truncate(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + "... [truncated]"
    return message


def _append(entry: LogEntry) -> None:
    log_buffer.append(entry)
    # Devtools console is optional; outside an app this is a no-op.
    with contextlib.suppress(Exception):
        from textual import log as textual_log

        textual_log(entry.message)


class DragboardLogger:
    """Process-wide logger used by the UI layer.

    Keyword arguments are kept on the entry as ``fields`` and appended to the
    message as ``key=value`` pairs.
    """

    def __call__(self, *args: object, **kwargs: Any) -> None:
        self.info(*args, **kwargs)

    def _log(self, level: str, *args: object, **kwargs: Any) -> None:
        message = " ".join(str(arg) for arg in args)
        if kwargs:
            pairs = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
            message = f"{message} {pairs}" if message else pairs
        _append(
            LogEntry(
                level=level,
                message=_truncate(message),
                timestamp=time.time(),
                source=LogSource.DIRECT,
                fields=dict(kwargs),
            )
        )

    def debug(self, *args: object, **kwargs: Any) -> None:
        self._log("DEBUG", *args, **kwargs)

    def info(self, *args: object, **kwargs: Any) -> None:
        self._log("INFO", *args, **kwargs)

    def warning(self, *args: object, **kwargs: Any) -> None:
        self._log("WARNING", *args, **kwargs)

    def error(self, *args: object, **kwargs: Any) -> None:
        self._log("ERROR", *args, **kwargs)

    def gesture(self, event: DragEvent) -> None:
        """Trace one drag event as the adapter emitted it, stamped with its own time."""
        fields = {
            name: getattr(event, name)
            for name in ("active_id", "kind", "active_kind", "over_id", "over_kind", "event_id")
            if hasattr(event, name)
        }
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        _append(
            LogEntry(
                level="DEBUG",
                message=f"{type(event).__name__} {pairs}",
                timestamp=event.occurred_at.timestamp(),
                source=LogSource.GESTURE,
                fields=fields,
            )
        )


class DebugLogHandler(logging.Handler):
    """Copies ``logging`` records into the ring buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            _append(
                LogEntry(
                    level=record.levelname,
                    message=_truncate(self.format(record)),
                    timestamp=record.created,
                    source=LogSource.LOGGING,
                    origin=record.name,
                )
            )
        except Exception:
            self.handleError(record)


_handler: DebugLogHandler | None = None


def setup_debug_logging(level: int = logging.DEBUG) -> None:
    """Route the ``dragboard`` logger hierarchy into the buffer.

    Idempotent: the handler is attached once per process.
    """
    global _handler

    if _handler is not None:
        return

    _handler = DebugLogHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("dragboard")
    package_logger.addHandler(_handler)
    package_logger.setLevel(level)

    log.info("Debug logging initialized - press F12 to export logs")


def clear_log_buffer() -> None:
    global _buffer_generation
    log_buffer.clear()
    _buffer_generation += 1


def get_buffer_generation() -> int:
    """Generation counter, bumped on every clear."""
    return _buffer_generation


def iter_entries(min_level: str | None = None) -> Iterator[LogEntry]:
    """Buffered entries, oldest first, at or above ``min_level``."""
    threshold = LEVELS.index(min_level.upper()) if min_level else 0
    for entry in list(log_buffer):
        rank = LEVELS.index(entry.level) if entry.level in LEVELS else len(LEVELS)
        if rank >= threshold:
            yield entry


def export_logs_to_file(file_path: str | Path, *, min_level: str | None = None) -> int:
    """Write buffered entries to ``file_path``, creating parent directories.

    Returns:
        Number of entries written.

    Raises:
        ValueError: If ``min_level`` is not a known level name.
    """
    if min_level is not None and min_level.upper() not in LEVELS:
        msg = f"Unknown log level {min_level!r}"
        raise ValueError(msg)
    entries = list(iter_entries(min_level))
    output_path = Path(file_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        f.write(f"# Dragboard debug log, {len(entries)} entries")
        f.write(f" (generation {_buffer_generation})\n\n")
        for entry in entries:
            f.write(entry.render() + "\n")
    return len(entries)


log = DragboardLogger()
