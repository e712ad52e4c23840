"""
================================================================================
CRM Tools Common Utilities
================================================================================

Configuration management and logging setup shared by the UI framework.

Exports:
    - get_config / set_config: Dot-path access to the merged configuration
    - reload_config: Drop cached configuration and load it again
    - init_logger: Loguru sink configuration

Usage:
    from crm_tools.common import get_config, init_logger

    init_logger()
    screenshot_dir = get_config("screenshots.dir", "./screenshots")

================================================================================
"""

from .global_config import (
    get_config,
    init_logger,
    reload_config,
    set_config,
)

__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "init_logger",
]
