"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fakes import FakeClock, RecordingSurface

from burstfx.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        SCREEN_WIDTH=800,
        SCREEN_HEIGHT=600,
        WINDOW_TITLE="Test",
        BACKGROUND_COLOR=(34, 34, 34),
        GLOW_LAYERS=4,
        GLOW_ALPHA=0.35,
        DEBUG=False,
        LOG_LEVEL="DEBUG",
        DEFAULT_EFFECT="explosion",
    )
    yield
    # Reset settings after test
    settings._wrapped = None


@pytest.fixture
def surface() -> RecordingSurface:
    """A fresh recording surface."""
    return RecordingSurface()


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock starting at 1000 ms."""
    return FakeClock()
