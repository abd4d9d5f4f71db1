"""
Configuration module for ChainSync.

This module provides configuration models and loading utilities.
"""

from chainsync.config.loader import load_config
from chainsync.config.models import ChainSyncConfig

__all__ = ["ChainSyncConfig", "load_config"]
