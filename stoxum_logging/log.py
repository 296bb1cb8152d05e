# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Hierarchical logger with namespace prefixes."""

import weakref
from collections.abc import Sequence
from typing import Any

from . import registry
from .engine import EngineLike, LogLevel

_SEPARATOR = ": "


class Logger:
    """Logger that prefixes every message with its namespace.

    Loggers form a hierarchy through ``sub()``; each level down appends one
    namespace segment to the prefix.

    Example:
        >>> from stoxum_logging import log
        >>> server_log = log.sub("server")
        >>> server_log.info("connection successful")
        >>> # prints: '[...] server: connection successful -- ...'

    Loggers are immutable. A logger built without an explicit engine uses
    the process-wide active engine at call time.
    """

    def __init__(self, namespace: str | Sequence[str] | None = None, engine: EngineLike | None = None):
        """Initialize logger.

        Args:
            namespace: None for a root logger, a single segment, or a list or
                tuple of segments used as-is
            engine: Optional engine used instead of the active engine
        """
        if not namespace:
            segments: tuple[str, ...] = ()
        elif isinstance(namespace, (list, tuple)):
            segments = tuple(namespace)
        else:
            segments = (str(namespace),)

        self._namespace = segments
        self._prefix = _SEPARATOR.join(segments + ("",))
        self._engine = engine
        self._parent_ref: weakref.ref["Logger"] | None = None

    @property
    def namespace(self) -> tuple[str, ...]:
        return self._namespace

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def engine(self) -> EngineLike | None:
        """Engine bound at construction, or None to follow the active engine."""
        return self._engine

    @property
    def parent(self) -> "Logger | None":
        """Logger this one was derived from, if it is still alive."""
        return self._parent_ref() if self._parent_ref is not None else None

    def __repr__(self) -> str:
        return f"Logger(namespace={list(self._namespace)!r})"

    def sub(self, namespace: str | None = None) -> "Logger":
        """Create a sub-logger.

        Args:
            namespace: Segment to append. Only non-empty strings are
                appended; anything else yields a logger with the same
                segments as this one.

        Returns:
            New logger whose parent is this logger
        """
        segments = list(self._namespace)
        if namespace and isinstance(namespace, str):
            segments.append(namespace)

        sub_logger = Logger(segments, engine=self._engine)
        sub_logger._parent_ref = weakref.ref(self)
        return sub_logger

    def _log(self, level: LogLevel, message: Any, args: tuple[Any, ...]) -> None:
        engine = self._engine if self._engine is not None else registry.get_engine()
        engine.log_object(int(level), f"{self._prefix}{message}", list(args))

    def debug(self, message: Any, *args: Any) -> None:
        """Log a debug-level message.

        Args:
            message: The log message
            *args: Additional values to output after the message
        """
        self._log(LogLevel.DEBUG, message, args)

    def info(self, message: Any, *args: Any) -> None:
        """Log an info-level message.

        Args:
            message: The log message
            *args: Additional values to output after the message
        """
        self._log(LogLevel.INFO, message, args)

    def warn(self, message: Any, *args: Any) -> None:
        """Log a warning-level message.

        Args:
            message: The log message
            *args: Additional values to output after the message
        """
        self._log(LogLevel.WARN, message, args)

    warning = warn

    def error(self, message: Any, *args: Any) -> None:
        """Log an error-level message.

        Args:
            message: The log message
            *args: Additional values to output after the message
        """
        self._log(LogLevel.ERROR, message, args)

    get_engine = staticmethod(registry.get_engine)
    set_engine = staticmethod(registry.set_engine)
