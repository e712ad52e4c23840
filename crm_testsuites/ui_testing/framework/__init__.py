"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based helper layer for CRM UI automation.

Components:
    - web_driver_utility: WebDriverUtility, the per-page helper entry point
    - session: BrowserSession, the active-window pointer
    - locators: By locator strategies
    - wait_helpers: explicit and fluent waits
    - element_actions: mouse, keyboard, dropdown and checkbox helpers
    - window_manager: window/tab switching and navigation
    - alert_handler: alert / confirm / prompt responses
    - javascript_actions: script execution and scrolling
    - screenshot_manager: screenshot capture
    - browser_manager: browser lifecycle for test fixtures

Author: Automation Team
License: MIT
================================================================================
"""

from .alert_handler import AlertHandler, NoAlertError
from .browser_manager import BrowserManager
from .element_actions import ElementActions, InteractionError
from .javascript_actions import JavaScriptActions
from .locators import By
from .screenshot_manager import ScreenshotManager
from .session import BrowserSession, NoSuchWindowError
from .wait_helpers import WaitActions, WaitConfig, WaitTimeoutError, fluent_wait
from .web_driver_utility import WebDriverUtility
from .window_manager import WindowManager

__all__ = [
    "AlertHandler",
    "BrowserManager",
    "BrowserSession",
    "By",
    "ElementActions",
    "InteractionError",
    "JavaScriptActions",
    "NoAlertError",
    "NoSuchWindowError",
    "ScreenshotManager",
    "WaitActions",
    "WaitConfig",
    "WaitTimeoutError",
    "WebDriverUtility",
    "WindowManager",
    "fluent_wait",
]
