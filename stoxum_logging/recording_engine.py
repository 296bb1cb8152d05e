# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Recording engine implementation for testing."""

from typing import Any

from .engine import Engine


class RecordingEngine(Engine):
    """Engine that stores log calls in memory without output.

    Useful for testing to verify logging behavior without cluttering test output.
    Values are kept exactly as passed; nothing is serialized or timestamped.
    """

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []

    def log_object(self, level: int, message: str, args: list[Any]) -> None:
        """Store one log call.

        Args:
            level: Numeric log level
            message: Prefixed log message
            args: Extra values passed to the level method
        """
        self.records.append(
            {
                "level": level,
                "message": message,
                "args": list(args),
            }
        )

    def clear(self) -> None:
        """Clear all stored records (useful for testing)."""
        self.records.clear()

    def get_records(self, level: int | None = None) -> list[dict[str, Any]]:
        """Get stored records, optionally filtered by level.

        Args:
            level: Optional numeric level to filter by

        Returns:
            List of records
        """
        if level is None:
            return list(self.records)
        return [record for record in self.records if record["level"] == level]

    def has_message(self, text: str, level: int | None = None) -> bool:
        """Check if a message containing ``text`` was logged.

        Args:
            text: Text to search for (substring match)
            level: Optional numeric level to filter by

        Returns:
            True if a matching record is found, False otherwise
        """
        return any(text in record["message"] for record in self.get_records(level))
