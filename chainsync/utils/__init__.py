"""
Utilities module for ChainSync.
"""

from chainsync.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
