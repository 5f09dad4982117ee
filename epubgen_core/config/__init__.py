"""
Configuration Management
========================

Configuration utilities for EPUB package builds.
"""

from epubgen_core.config.settings import (
    CONTAINER_PATH,
    EpubConfig,
    PackagingConfig,
    configure_logging,
    get_default_config,
    load_config,
    save_config,
)

__all__ = [
    "CONTAINER_PATH",
    "EpubConfig",
    "PackagingConfig",
    "configure_logging",
    "get_default_config",
    "load_config",
    "save_config",
]
