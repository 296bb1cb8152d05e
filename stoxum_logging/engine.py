# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Engine interface and the formatting shared by console engines."""

import inspect
import json
import logging
import os
import pprint
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

_package_dir = os.path.normcase(os.path.dirname(os.path.abspath(__file__)))


class LogLevel(IntEnum):
    """Numeric rank of each level method."""

    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


class OutputStream(Enum):
    """Output stream classes an engine can write to."""

    STANDARD = "standard"
    WARNING = "warning"
    ERROR = "error"


_stream_by_level = {
    LogLevel.DEBUG: OutputStream.STANDARD,
    LogLevel.INFO: OutputStream.STANDARD,
    LogLevel.WARN: OutputStream.WARNING,
    LogLevel.ERROR: OutputStream.ERROR,
}


@runtime_checkable
class EngineLike(Protocol):
    """Protocol for objects the registry accepts as engines."""

    def log_object(self, level: int, message: str, args: list[Any]) -> None: ...


class Engine(ABC):
    """Abstract base class for output engines.

    An engine decides how the values passed to a level call are rendered
    and where the resulting line is written.
    """

    @abstractmethod
    def log_object(self, level: int, message: str, args: list[Any]) -> None:
        """Output one log call.

        Args:
            level: Numeric level (see LogLevel)
            message: Message with the logger prefix already applied
            args: Extra values passed to the level method
        """
        pass


def stream_for_level(level: int) -> OutputStream | None:
    """Return the output stream for a numeric level, or None if unknown."""
    try:
        return _stream_by_level[LogLevel(level)]
    except ValueError:
        return None


def serialize(value: Any) -> str:
    """Render a value as indented JSON text for plain text consoles.

    Values JSON cannot represent (non-string keys, circular references)
    fall back to a pretty-printed repr.
    """
    try:
        return json.dumps(value, indent=2, default=str)
    except (TypeError, ValueError):
        return pprint.pformat(value)


def format_timestamp(now: datetime | None = None) -> str:
    """Return the current UTC instant as ``[YYYY-MM-DDTHH:MM:SS.mmmZ]``."""
    now = now or datetime.now(timezone.utc)
    return "[" + now.isoformat(timespec="milliseconds").replace("+00:00", "Z") + "]"


def find_caller() -> str:
    """Describe the first stack frame outside this package.

    Returns:
        ``"<function> (<file>:<line>)"``, or an empty string when frame
        introspection is unavailable or no such frame exists.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            code = frame.f_code
            filename = os.path.normcase(os.path.abspath(code.co_filename))
            if os.path.dirname(filename) != _package_dir:
                return f"{code.co_name} ({code.co_filename}:{frame.f_lineno})"
            frame = frame.f_back
        return ""
    finally:
        del frame


def get_log_info(message: str, args: list[Any]) -> list[Any]:
    """Assemble the items written for one log call.

    Args:
        message: Prefixed log message
        args: Rendered extra values

    Returns:
        ``[timestamp, message, "--", location, "\\n", *args]``
    """
    return [format_timestamp(), message, "--", find_caller(), "\n", *args]


class ConsoleEngine(Engine):
    """Engine that writes timestamped, located lines to console streams.

    Subclasses choose how extra values are rendered and how items reach
    each output stream.
    """

    def render(self, args: list[Any]) -> list[Any]:
        """Render extra values before output. Defaults to pass-through."""
        return list(args)

    @abstractmethod
    def write(self, stream: OutputStream, items: list[Any]) -> None:
        """Write assembled items to an output stream."""
        pass

    def log_object(self, level: int, message: str, args: list[Any]) -> None:
        stream = stream_for_level(level)
        if stream is None:
            logger.debug(f"{type(self).__name__}: dropping message with unknown level {level!r}")
            return
        self.write(stream, get_log_info(message, self.render(args)))
