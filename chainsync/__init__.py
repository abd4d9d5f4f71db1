"""
ChainSync - a configurable asynchronous processor.
"""

__version__ = "0.1.0"

from chainsync.config import ChainSyncConfig, load_config
from chainsync.exceptions import ChainSyncError, ConfigurationError, WorkUnitError
from chainsync.processor import (
    WORK_UNIT_DELAY_MS,
    ChainSync,
    ProcessOutput,
    ProcessResult,
)

__all__ = [
    "WORK_UNIT_DELAY_MS",
    "ChainSync",
    "ChainSyncConfig",
    "ChainSyncError",
    "ConfigurationError",
    "ProcessOutput",
    "ProcessResult",
    "WorkUnitError",
    "__version__",
    "load_config",
]
