"""
================================================================================
Browser Session
================================================================================

Holds the one Playwright page a helper drives. The session is created from
a caller-supplied page and never launches or closes the browser itself; the
only state it owns is which window (page) is currently active.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import List, Union

from loguru import logger
from playwright.sync_api import BrowserContext, Locator, Page

from .locators import By


# Anything the facades accept as "the element to act on"
ElementTarget = Union[str, By, Locator]


class NoSuchWindowError(Exception):
    """Raised when the active or requested window has already been closed."""
    pass


class BrowserSession:
    """
    Active-window pointer over a Playwright browser context.

    Usage:
        session = BrowserSession(page)
        session.locate(By.id("username")).fill("admin")
        session.switch_to(other_page)
    """

    def __init__(self, page: Page):
        """
        Initialize the session.

        Args:
            page: Playwright Page that starts out as the active window
        """
        self._page = page

    @property
    def page(self) -> Page:
        """The active page; raises NoSuchWindowError once it has been closed."""
        if self._page.is_closed():
            raise NoSuchWindowError("The active window has been closed")
        return self._page

    @property
    def context(self) -> BrowserContext:
        """Browser context that owns every window of this session."""
        return self._page.context

    @property
    def pages(self) -> List[Page]:
        """Open windows in creation order."""
        return [p for p in self.context.pages if not p.is_closed()]

    def switch_to(self, page: Page) -> None:
        """
        Make ``page`` the active window.

        Args:
            page: Page of the same browser context

        Raises:
            NoSuchWindowError: If the page is already closed
        """
        if page.is_closed():
            raise NoSuchWindowError("Cannot switch to a closed window")
        self._page = page
        page.bring_to_front()
        logger.debug(f"Switched active window to: {page.url}")

    def locate(self, target: ElementTarget) -> Locator:
        """Resolve a selector string, By locator or Locator on the active page."""
        if isinstance(target, By):
            return self.page.locator(target.selector)
        if isinstance(target, str):
            return self.page.locator(target)
        return target


__all__ = [
    "BrowserSession",
    "ElementTarget",
    "NoSuchWindowError",
]
