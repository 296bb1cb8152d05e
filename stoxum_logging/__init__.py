# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Stoxum Logging.

Logging functionality for stoxum libraries and any applications built on
them. Loggers form a namespace hierarchy, and all output goes through a
swappable engine chosen at import time from the capabilities of the runtime.

Example:
    >>> from stoxum_logging import log
    >>>
    >>> log.debug("My object is", {"id": 1})
    >>>
    >>> server_log = log.sub("server")
    >>> server_log.info("connection successful")
    >>> # prints: '[...] server: connection successful -- ...'
    >>>
    >>> # Silence all output, e.g. in a test harness
    >>> from stoxum_logging import engines, set_engine
    >>> set_engine(engines["none"])
"""

__version__ = "0.1.0"

from .basic_engine import BasicEngine
from .engine import ConsoleEngine, Engine, EngineLike, LogLevel, OutputStream
from .interactive_engine import InteractiveEngine
from .log import Logger
from .null_engine import NullEngine
from .recording_engine import RecordingEngine
from .registry import create_engine, engines, get_engine, set_engine

# Root logger
log = Logger()

# Logger for stoxum libraries internally
internal = log.sub()

__all__ = [
    "__version__",
    "BasicEngine",
    "ConsoleEngine",
    "Engine",
    "EngineLike",
    "InteractiveEngine",
    "LogLevel",
    "Logger",
    "NullEngine",
    "OutputStream",
    "RecordingEngine",
    "create_engine",
    "engines",
    "get_engine",
    "internal",
    "log",
    "set_engine",
]
