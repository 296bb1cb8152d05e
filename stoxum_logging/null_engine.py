# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Engine that discards all output."""

from typing import Any

from .engine import Engine


class NullEngine(Engine):
    """Engine that swallows every message.

    Selected when no console is available, and useful in test harnesses
    that should stay quiet.
    """

    def log_object(self, level: int, message: str, args: list[Any]) -> None:
        pass
