# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Plain text console engine."""

import sys
from typing import Any, TextIO

from .engine import ConsoleEngine, OutputStream, serialize


class BasicEngine(ConsoleEngine):
    """Engine for plain text consoles.

    Every extra value is serialized to indented JSON before output, so the
    result reads the same on any stream that accepts text. This is the engine
    used when no interactive console is detected.
    """

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None):
        """Initialize basic engine.

        Args:
            stdout: Stream for debug and info lines. Defaults to the
                current ``sys.stdout`` at write time.
            stderr: Stream for warning and error lines. Defaults to the
                current ``sys.stderr`` at write time.
        """
        self._stdout = stdout
        self._stderr = stderr

    def render(self, args: list[Any]) -> list[str]:
        return [serialize(arg) for arg in args]

    def write(self, stream: OutputStream, items: list[Any]) -> None:
        if stream is OutputStream.STANDARD:
            target = self._stdout if self._stdout is not None else sys.stdout
        else:
            target = self._stderr if self._stderr is not None else sys.stderr
        print(*items, file=target, flush=True)
