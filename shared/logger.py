"""
SafePass Structured Logger
===========================

:class:`SafePassLogger` binds a component name to a stdlib logger named
``safepass.<component>``. Records go to stderr through Rich and, when a
log file is configured, to a rotating file as plain text or JSON lines.

Callers attach context as keyword arguments (``size="10k"``) and may
scope a block to a named operation; both end up in the JSON record.
Password material is never logged: only lengths, list sizes, and
outcomes.

:func:`configure_logging` pushes the ``[global]`` settings of a loaded
configuration onto every component logger at once.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterator, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

if TYPE_CHECKING:
    from shared.config import GlobalConfig

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold bright_blue",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

# Keyword arguments forwarded to logging.Logger.log untouched
_PASSTHROUGH_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_TEXT_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

_DEFAULT_MAX_BYTES = 5_242_880
_DEFAULT_BACKUP_COUNT = 3

# Component name -> most recently built logger for it
_components: dict[str, SafePassLogger] = {}


def _level_for(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message`` and, when set,
    ``component``, ``operation``, ``context`` and ``exc_info``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in ("component", "operation", "context"):
            value = getattr(record, f"safepass_{key}", None)
            if value:
                entry[key] = value
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _stderr_handler(level: int) -> RichHandler:
    return RichHandler(
        level=level,
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )


def _file_handler(
    path: Path, level: int, json_logs: bool, max_bytes: int, backup_count: int
) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONLinesFormatter() if json_logs
        else logging.Formatter(fmt=_TEXT_FORMAT, datefmt=_TEXT_DATEFMT)
    )
    return handler


@dataclass
class Stopwatch:
    """Elapsed-time reading yielded by :meth:`SafePassLogger.timed`."""

    started: float
    stopped: float | None = None

    @property
    def elapsed(self) -> float:
        """Seconds between start and stop (or now, while running)."""
        end = self.stopped if self.stopped is not None else time.perf_counter()
        return end - self.started


class SafePassLogger:
    """Component logger with keyword context and operation scopes.

    Usage::

        log = SafePassLogger("wordlist", log_file="safepass.log", json_logs=True)
        with log.operation("load"):
            log.warning("Wordlist %s unavailable", "1m", path=str(path))

    Args:
        tool_name: Component name (``engine``, ``wordlist``, ``generator``).
        log_level: Minimum level name; unknown names fall back to WARNING.
        log_file: Rotating log file, or ``None`` for stderr only.
        json_logs: Write JSON lines instead of text to *log_file*.
        max_bytes: Rotation threshold for *log_file*.
        backup_count: Rotated files to keep.
        console_output: Attach the Rich stderr handler.
    """

    def __init__(
        self,
        tool_name: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = _DEFAULT_MAX_BYTES,
        backup_count: int = _DEFAULT_BACKUP_COUNT,
        console_output: bool = True,
    ) -> None:
        self._tool_name = tool_name
        # Per task: concurrent coroutines each see their own scope
        self._operation: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
            f"safepass_{tool_name}_operation", default=None
        )
        self._logger = logging.getLogger(f"safepass.{tool_name}")
        self._logger.propagate = False

        level = _level_for(log_level)
        handlers: list[logging.Handler] = []
        if console_output:
            handlers.append(_stderr_handler(level))
        if log_file:
            handlers.append(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )
        self.install(level, handlers)
        _components[tool_name] = self

    @property
    def tool_name(self) -> str:
        return self._tool_name

    @property
    def underlying(self) -> logging.Logger:
        return self._logger

    @property
    def current_operation(self) -> Optional[str]:
        """Operation tag of the calling task, or ``None`` outside a scope."""
        return self._operation.get()

    def install(self, level: int, handlers: list[logging.Handler]) -> None:
        """Replace level and handlers of the underlying logger.

        Handlers still attached to another SafePass component are detached
        here but left open.
        """
        self._logger.setLevel(level)
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            shared = any(
                handler in other.underlying.handlers
                for other in _components.values()
                if other.underlying is not self._logger
            )
            if not shared:
                handler.close()
        for handler in handlers:
            self._logger.addHandler(handler)

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextlib.contextmanager
    def operation(self, name: str) -> Iterator[SafePassLogger]:
        """Tag records emitted inside the block with ``operation=name``.

        The tag lives in a context variable, so a scope held across an
        ``await`` never leaks into a concurrently running task.
        """
        token = self._operation.set(name)
        try:
            yield self
        finally:
            self._operation.reset(token)

    @contextlib.contextmanager
    def timed(self, label: str) -> Iterator[Stopwatch]:
        """Log the duration of the block at DEBUG level.

        Usage::

            with log.timed("password assessment"):
                report = analyzer.analyze(candidate)
        """
        watch = Stopwatch(started=time.perf_counter())
        try:
            yield watch
        finally:
            watch.stopped = time.perf_counter()
            self.debug("Completed: %s (%.3f ms)", label, watch.elapsed * 1000.0)

    # ------------------------------------------------------------------ #
    #  Emitters
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        passthrough = {k: kwargs.pop(k) for k in list(kwargs) if k in _PASSTHROUGH_KWARGS}
        extra = {
            "safepass_component": self._tool_name,
            "safepass_operation": self._operation.get(),
            "safepass_context": kwargs,
        }
        passthrough.setdefault("stacklevel", 3)
        self._logger.log(level, msg, *args, extra=extra, **passthrough)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """ERROR record carrying the active traceback."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, args, kwargs)


def configure_logging(settings: GlobalConfig) -> None:
    """Apply the ``[global]`` logging settings to every component logger.

    All components built so far (``engine``, ``wordlist``, ``generator``)
    share one stderr handler and, when ``log_file`` is set, one rotating
    file handler, so their records interleave in a single file.
    """
    level = _level_for("DEBUG" if settings.debug else settings.log_level)
    handlers: list[logging.Handler] = [_stderr_handler(level)]
    if settings.log_file:
        handlers.append(
            _file_handler(
                Path(settings.log_file),
                level,
                settings.log_json,
                _DEFAULT_MAX_BYTES,
                _DEFAULT_BACKUP_COUNT,
            )
        )
    for component in list(_components.values()):
        component.install(level, handlers)
