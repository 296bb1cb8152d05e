# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Rich console engine."""

from typing import Any

from rich.console import Console

from .engine import ConsoleEngine, OutputStream, serialize


class InteractiveEngine(ConsoleEngine):
    """Engine for consoles that render Python objects natively.

    Extra values are handed to rich unmodified so dicts, lists and other
    objects are pretty-printed with highlighting. Legacy Windows consoles
    cannot render that output, so values are serialized there as in the
    basic engine.
    """

    def __init__(
        self,
        console: Console | None = None,
        warning_console: Console | None = None,
        error_console: Console | None = None,
    ):
        """Initialize interactive engine.

        Args:
            console: Console for debug and info lines (default: stdout)
            warning_console: Console for warning lines (default: stderr)
            error_console: Console for error lines (default: stderr)
        """
        self.console = console or Console()
        self.warning_console = warning_console or Console(stderr=True)
        self.error_console = error_console or self.warning_console
        self._consoles = {
            OutputStream.STANDARD: self.console,
            OutputStream.WARNING: self.warning_console,
            OutputStream.ERROR: self.error_console,
        }

    @property
    def is_legacy(self) -> bool:
        """True when the standard console is a legacy Windows console."""
        return bool(getattr(self.console, "legacy_windows", False))

    def render(self, args: list[Any]) -> list[Any]:
        if self.is_legacy:
            return [serialize(arg) for arg in args]
        return list(args)

    def write(self, stream: OutputStream, items: list[Any]) -> None:
        self._consoles[stream].print(*items, markup=False, emoji=False)
