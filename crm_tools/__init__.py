"""
================================================================================
CRM Tools
================================================================================

Shared infrastructure for the CRM UI automation suites.

Modules:
    - common: Configuration loading and Loguru logging setup
    - report_tools: Allure attachment helpers

Example:
    from crm_tools.common import get_config, init_logger

    init_logger()
    timeout = get_config("wait.timeout_seconds", 15)

================================================================================
"""

__version__ = "2.0.0"

__all__ = [
    "common",
    "report_tools",
]
