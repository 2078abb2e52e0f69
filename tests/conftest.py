"""Shared fixtures: global logger/config-root reset and loguru capture."""

from __future__ import annotations

import contextlib

import numpy as np
import pytest
from loguru import logger

from coordmap.utils.logger import LoggerManager
from coordmap.utils.paths import reset_config_root

# real world -> pixel, from a four-marker bench calibration
BENCH_TO_PIXEL = [
    [1.4003, 0.3827, -136.5900],
    [-0.0785, 1.8049, -83.1054],
    [-0.0003, 0.0016, 1.0000],
]


@pytest.fixture(autouse=True)
def _reset_global_state():
    yield
    LoggerManager.shutdown()
    reset_config_root()


@pytest.fixture
def log_messages():
    """Collect "LEVEL|message" strings emitted through loguru."""
    LoggerManager.initialize()
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(f"{message.record['level'].name}|{message.record['message']}"),
        level="DEBUG",
    )
    yield messages
    with contextlib.suppress(ValueError):
        logger.remove(handler_id)


@pytest.fixture
def bench_to_pixel() -> np.ndarray:
    return np.array(BENCH_TO_PIXEL)
