# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Stoxum contributors

"""Shared fixtures for stoxum_logging tests."""

import pytest

from stoxum_logging import RecordingEngine, registry


@pytest.fixture(autouse=True)
def reset_engine_state():
    """Restore the active engine after each test."""
    saved = registry._active_engine
    yield
    registry._active_engine = saved


@pytest.fixture
def recording_engine():
    """Install a RecordingEngine as the active engine."""
    engine = RecordingEngine()
    registry.set_engine(engine)
    return engine
