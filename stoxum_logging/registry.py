# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Built-in engines and the process-wide active engine."""

import logging
import os
import sys
from types import MappingProxyType

from rich.console import Console

from .basic_engine import BasicEngine
from .engine import Engine, EngineLike
from .interactive_engine import InteractiveEngine
from .null_engine import NullEngine

logger = logging.getLogger(__name__)

ENGINE_ENV_VAR = "STOXUM_LOG_ENGINE"

engines = MappingProxyType(
    {
        "basic": BasicEngine(),
        "interactive": InteractiveEngine(),
        "none": NullEngine(),
    }
)

_active_engine: EngineLike | None = None


def _default(value: str | None, env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return (value or os.getenv(env_var) or fallback)


def detect_engine() -> str:
    """Pick a built-in engine name from the capabilities of the runtime.

    Returns:
        ``"none"`` when there is no stdout, ``"interactive"`` for Jupyter
        front ends and interactive terminals, ``"basic"`` otherwise.
    """
    if sys.stdout is None or not callable(getattr(sys.stdout, "write", None)):
        return "none"
    console = Console()
    if console.is_jupyter or console.is_terminal:
        return "interactive"
    return "basic"


def create_engine(engine_type: str | None = None) -> Engine:
    """Return a built-in engine by name.

    Args:
        engine_type: One of "basic", "interactive", "none". Defaults to the
            STOXUM_LOG_ENGINE env var, then to capability detection.

    Returns:
        The shared built-in engine instance

    Raises:
        ValueError: If engine_type is not recognized
    """
    engine_type = _default(engine_type, ENGINE_ENV_VAR, "").lower() or detect_engine()

    try:
        return engines[engine_type]
    except KeyError:
        raise ValueError(
            f"Unknown engine_type: {engine_type}. "
            f"Must be one of: {', '.join(engines)}"
        ) from None


def get_engine() -> EngineLike | None:
    """Return the active engine."""
    return _active_engine


def set_engine(engine: EngineLike) -> None:
    """Replace the active engine for the whole process.

    Args:
        engine: Object with a callable ``log_object(level, message, args)``

    Raises:
        TypeError: If engine is None, a primitive value, or has no callable
            log_object
    """
    global _active_engine

    if engine is None or isinstance(engine, (type, str, bytes, int, float)):
        raise TypeError(f"engine must be an object, got {type(engine).__name__}")
    if not callable(getattr(engine, "log_object", None)):
        raise TypeError(f"engine {engine!r} has no callable log_object")

    _active_engine = engine
    logger.debug(f"Active log engine set to {type(engine).__name__}")


def reset_engine() -> None:
    """Select the startup engine again, honoring STOXUM_LOG_ENGINE."""
    try:
        engine = create_engine()
    except ValueError as e:
        logger.warning(f"Ignoring {ENGINE_ENV_VAR}: {e}")
        engine = engines[detect_engine()]
    set_engine(engine)


reset_engine()
