"""Test fixtures for ChainSync."""

import logging
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog

from chainsync import ChainSync, ChainSyncConfig
from chainsync.config.loader import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def clean_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """Isolate tests from CHAINSYNC_* variables and config files.

    Runs each test from an empty temporary directory and resets logging
    afterwards.
    """
    for env_var in [*ENV_OVERRIDES, "CHAINSYNC_CONFIG"]:
        # Record the variable so values loaded from a .env are undone too
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
    monkeypatch.chdir(tmp_path)
    yield
    # Reset logging
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    structlog.reset_defaults()


@pytest.fixture
def log_sink() -> MagicMock:
    """Create a diagnostic sink that records emitted lines."""
    return MagicMock()


@pytest.fixture
def processor(log_sink: MagicMock) -> ChainSync:
    """Create a quiet processor with an injected sink."""
    return ChainSync(logger=log_sink)


@pytest.fixture
def verbose_processor(log_sink: MagicMock) -> ChainSync:
    """Create a verbose processor with an injected sink."""
    return ChainSync(ChainSyncConfig(verbose=True), logger=log_sink)
