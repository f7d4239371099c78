"""Shared fixtures."""
from __future__ import annotations

from datetime import datetime

import pytest

from tglog.kernel.time import FrozenClock


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Clock pinned to 2026-01-01 12:00 local time."""
    return FrozenClock(datetime(2026, 1, 1, 12, 0))
