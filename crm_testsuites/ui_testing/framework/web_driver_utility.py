"""
================================================================================
WebDriver Utility
================================================================================

Reusable browser helpers for CRM UI tests, grouped by concern and bound to
one caller-supplied Playwright page:

    util = WebDriverUtility(page)

    util.windows    window/tab switching, maximize, back/forward/refresh
    util.waits      explicit and fluent waits
    util.actions    mouse, keyboard, dropdown, checkbox and radio helpers
    util.alerts     alert / confirm / prompt responses
    util.js         JavaScript execution and scrolling
    util.screenshots  full-page screenshots

All facades share one BrowserSession, so switching windows through
``util.windows`` retargets every other facade. The utility never launches or
closes the browser; the caller owns the page.

Example:
    util = WebDriverUtility(page, wait_config=WaitConfig(timeout_seconds=20))
    util.waits.wait_for_page_load()
    util.actions.hover(By.css("img[src='themes/softed/images/user.PNG']"))
    util.actions.wait_and_click(By.link_text("Sign Out"))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from playwright.sync_api import Page

from .alert_handler import AlertHandler
from .element_actions import ElementActions
from .javascript_actions import JavaScriptActions
from .screenshot_manager import ScreenshotManager
from .session import BrowserSession
from .wait_helpers import WaitActions, WaitConfig
from .window_manager import WindowManager


class WebDriverUtility:
    """Browser interaction helper composed of per-concern facades."""

    def __init__(
        self,
        page: Page,
        wait_config: Optional[WaitConfig] = None,
        screenshot_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the utility.

        Args:
            page: Playwright page to drive; becomes the active window
            wait_config: Default timeout and polling (global config if None)
            screenshot_dir: Screenshot output directory (global config if None)
        """
        self.session = BrowserSession(page)

        self.waits = WaitActions(self.session, wait_config)
        self.actions = ElementActions(self.session, self.waits)
        self.windows = WindowManager(self.session)
        self.alerts = AlertHandler(self.session)
        self.js = JavaScriptActions(self.session)
        self.screenshots = ScreenshotManager(self.session, screenshot_dir)

    @property
    def page(self) -> Page:
        """The currently active window."""
        return self.session.page


__all__ = [
    "WebDriverUtility",
]
