"""Structured logging with bound context.

- Immutable loggers: bind() returns a new logger with merged context
- Human-readable console output for development, JSON Lines for machines
- Scoped context via log_context

Quick Start:
    >>> from fpkit.observability import configure_logging, get_logger
    >>>
    >>> configure_logging(format="console", level="DEBUG")
    >>> log = get_logger("orders")
    >>> log.info("validated", errors=0)

Unspecified configure_logging() arguments fall back to FPKIT_LOG_* settings.
"""

from __future__ import annotations

import logging
import sys
import time
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal, Protocol, TextIO, runtime_checkable

import orjson

from ..foundation.config import get_settings

if TYPE_CHECKING:
    from types import TracebackType

LogDict = dict[str, Any]

# Context bound by log_context(), merged into every entry
_log_context: ContextVar[LogDict] = ContextVar("fpkit_log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Logger
# ─────────────────────────────────────────────────────────────────────────────


LogLevel = Literal["debug", "info", "warning", "error", "critical"]


@dataclass(slots=True)
class BoundLogger:
    """Logger carrying key-value context that is attached to every event.

    ``renderer`` pins output to one destination; when unset, events go to
    whatever configure_logging() installed for the current context.

    Example:
        >>> log = BoundLogger(context={"step": "parse"})
        >>> log.info("row rejected", line=12)
        # => 10:30:45.120 [info] row rejected line=12 step="parse"
    """

    context: LogDict = field(default_factory=dict)
    renderer: LogRenderer | None = None
    min_level: int = logging.DEBUG

    def bind(self, **kw: Any) -> BoundLogger:
        """Return a copy with ``kw`` merged into the context."""
        return replace(self, context={**self.context, **kw})

    def unbind(self, *keys: str) -> BoundLogger:
        """Return a copy with ``keys`` removed from the context."""
        return replace(self, context={k: v for k, v in self.context.items() if k not in keys})

    def log(self, level: LogLevel, event: str, **kw: Any) -> None:
        """Emit ``event`` at a level given by name."""
        self._emit(_LEVELS[level], event, kw)

    def debug(self, event: str, **kw: Any) -> None:
        self._emit(logging.DEBUG, event, kw)

    def info(self, event: str, **kw: Any) -> None:
        self._emit(logging.INFO, event, kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._emit(logging.WARNING, event, kw)

    def error(self, event: str, **kw: Any) -> None:
        self._emit(logging.ERROR, event, kw)

    def critical(self, event: str, **kw: Any) -> None:
        self._emit(logging.CRITICAL, event, kw)

    def _emit(self, level: int, event: str, extra: LogDict) -> None:
        if level < self.min_level:
            return
        entry = LogEntry(time.time(), _level_name(level), event, {**_log_context.get(), **self.context, **extra})
        (self.renderer or _current_renderer()).render(entry)


@dataclass(slots=True)
class LogEntry:
    """A single rendered log event."""

    timestamp: float
    level: str
    event: str
    context: LogDict

    @property
    def ts_iso(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """HH:MM:SS.mmm"""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable console output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        c = _COLORS if self.colors else _NO_COLORS
        parts = [f"{c['dim']}{entry.ts_human}{c['reset']}"] if self.show_timestamp else []
        parts += [f"{_LEVEL_COLORS.get(entry.level, c['dim']) if self.colors else ''}[{entry.level}]{c['reset']}",
                  f"{c['bold']}{entry.event}{c['reset']}"]
        parts += [f"{c['cyan']}{k}{c['reset']}={_format_value(v, c)}" for k, v in sorted(entry.context.items())]
        print(" ".join(parts), file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        line = orjson.dumps(
            {"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event, **entry.context},
            default=repr,
            option=orjson.OPT_NON_STR_KEYS,
        )
        print(line.decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Per-Context Configuration
# ─────────────────────────────────────────────────────────────────────────────

# Both are context variables: a configuration applies to the context that set
# it and to tasks spawned from it. New threads start empty and rebuild from
# settings on first use.
_active_renderer: ContextVar[LogRenderer | None] = ContextVar("fpkit_log_renderer", default=None)
_active_level: ContextVar[int | None] = ContextVar("fpkit_log_level", default=None)


def configure_logging(
    format: str | None = None,  # noqa: A002 - matches stdlib naming
    level: str | None = None,
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Install a renderer and minimum level for the current context.

    ``format`` is "console", "json" or "none". Arguments left as None come
    from FPKIT_LOG_* settings. The choice is not process-wide: a thread
    started afterwards does not inherit it and configures itself from
    settings the first time it logs.
    """
    settings = get_settings()
    format = format or settings.logging.format
    level = level or settings.effective_log_level
    colors = settings.logging.colors if colors is None else colors

    match format:
        case "console":
            renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr, colors=colors)
        case "json":
            renderer = JsonRenderer(output=output or sys.stdout)
        case "none":
            renderer = NoOpRenderer()
        case _:
            raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _active_level.set(getattr(logging, level.upper(), logging.INFO))
    _active_renderer.set(renderer)
    return renderer


def get_logger(name: str | None = None, *, renderer: LogRenderer | None = None, **initial_context: Any) -> BoundLogger:
    """Return a logger with ``name`` bound as 'logger'.

    Pass ``renderer`` to send this logger's events somewhere other than the
    configured destination; its loggers derived by bind() keep it.
    """
    ctx = {**initial_context, **({"logger": name} if name else {})}
    return BoundLogger(context=ctx, renderer=renderer, min_level=_current_level())


def _current_level() -> int:
    if (level := _active_level.get()) is None:
        level = getattr(logging, get_settings().effective_log_level, logging.INFO)
    return level


def _current_renderer() -> LogRenderer:
    if (renderer := _active_renderer.get()) is None:
        renderer = configure_logging()
    return renderer


class log_context:  # noqa: N801
    """Context manager adding key-value pairs to every log entry within the scope."""

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: Any) -> None:
        self._ctx: LogDict = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        self._token = _log_context.set({**_log_context.get(), **self._ctx})
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _log_context.reset(self._token)  # type: ignore[arg-type]
            self._token = None


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


_COLORS = {"reset": "\033[0m", "bold": "\033[1m", "dim": "\033[2m", "red": "\033[31m",
           "green": "\033[32m", "yellow": "\033[33m", "blue": "\033[34m", "cyan": "\033[36m", "white": "\033[37m"}
_NO_COLORS = {k: "" for k in _COLORS}
_LEVEL_COLORS = {"debug": _COLORS["dim"], "info": _COLORS["green"], "warning": _COLORS["yellow"],
                 "error": _COLORS["red"], "critical": _COLORS["bold"] + _COLORS["red"]}
_LEVELS: dict[str, int] = {"debug": logging.DEBUG, "info": logging.INFO, "warning": logging.WARNING,
                           "error": logging.ERROR, "critical": logging.CRITICAL}


def _level_name(level: int) -> str:
    return logging.getLevelName(level).lower()


def _format_value(v: object, c: dict[str, str]) -> str:
    """Format a value for console output."""
    match v:
        case str(): return f'{c["yellow"]}"{v}"{c["reset"]}'
        case bool(): return f'{c["blue"]}{str(v).lower()}{c["reset"]}'
        case int() | float(): return f'{c["blue"]}{v}{c["reset"]}'
        case dict(): return f'{c["dim"]}{{{len(v)} items}}{c["reset"]}'
        case list() | tuple(): return f'{c["dim"]}[{len(v)} items]{c["reset"]}'
        case _: return f'{c["white"]}{v!r}{c["reset"]}'
