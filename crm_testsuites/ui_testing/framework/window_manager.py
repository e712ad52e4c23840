"""
================================================================================
Window Manager
================================================================================

Window/tab handling for a BrowserSession.

Features:
    - Switch to a window by (partial) title or URL
    - Return to a parent window and close every child window
    - Maximize / fullscreen the viewport
    - History navigation and refresh

Windows are the Playwright pages of the session's browser context, scanned
in creation order. A title/URL switch that finds no match leaves the
original window active and returns False.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Callable, List

import allure
from loguru import logger
from playwright.sync_api import Page

from .session import BrowserSession, NoSuchWindowError


class WindowManager:
    """
    Window, tab and navigation helper.

    Usage:
        windows = WindowManager(session)
        parent = windows.current_window_handle
        actions.wait_and_click(By.css("img[alt='Select']"))   # opens a popup
        if windows.switch_to_window_by_url("module=Accounts&action=Popup"):
            ...
        windows.close_all_child_windows(parent)
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    @property
    def window_handles(self) -> List[Page]:
        """Open windows of the session, in creation order."""
        return self.session.pages

    @property
    def current_window_handle(self) -> Page:
        """The active window."""
        return self.session.page

    # =========================================================================
    # Window Size
    # =========================================================================

    @allure.step("Maximize window")
    def maximize_window(self) -> None:
        """Resize the viewport to the screen's available area."""
        page = self.session.page
        size = page.evaluate(
            "() => ({width: window.screen.availWidth, height: window.screen.availHeight})"
        )
        page.set_viewport_size(size)
        logger.debug(f"Viewport maximized to {size['width']}x{size['height']}")

    @allure.step("Fullscreen window")
    def fullscreen_window(self) -> None:
        """Resize the viewport to the full screen size."""
        page = self.session.page
        size = page.evaluate(
            "() => ({width: window.screen.width, height: window.screen.height})"
        )
        page.set_viewport_size(size)
        logger.debug(f"Viewport set to fullscreen {size['width']}x{size['height']}")

    # =========================================================================
    # Window Switching
    # =========================================================================

    @allure.step("Switch to window with title containing: {partial_title}")
    def switch_to_window_by_title(self, partial_title: str) -> bool:
        """
        Switch to the first window whose title contains ``partial_title``.

        Args:
            partial_title: Partial or full window title

        Returns:
            True if a window matched; False if none did (active window unchanged)
        """
        return self._switch_to_first_match(
            lambda page: partial_title in page.title(),
            f"title containing '{partial_title}'",
        )

    @allure.step("Switch to window with URL containing: {partial_url}")
    def switch_to_window_by_url(self, partial_url: str) -> bool:
        """
        Switch to the first window whose URL contains ``partial_url``.

        Args:
            partial_url: Partial or full URL

        Returns:
            True if a window matched; False if none did (active window unchanged)
        """
        return self._switch_to_first_match(
            lambda page: partial_url in page.url,
            f"URL containing '{partial_url}'",
        )

    @allure.step("Switch to parent window")
    def switch_to_parent_window(self, parent_window: Page) -> None:
        """
        Make a previously captured window active again.

        Raises:
            NoSuchWindowError: If the window has been closed
        """
        self.session.switch_to(parent_window)

    @allure.step("Close all child windows")
    def close_all_child_windows(self, parent_window: Page) -> None:
        """
        Close every window except ``parent_window`` and switch back to it.

        Raises:
            NoSuchWindowError: If the parent window has been closed
        """
        if parent_window.is_closed():
            raise NoSuchWindowError("Parent window has already been closed")

        for page in self.session.pages:
            if page is not parent_window:
                logger.debug(f"Closing child window: {page.url}")
                page.close()

        self.session.switch_to(parent_window)

    def _switch_to_first_match(self, predicate: Callable[[Page], bool], description: str) -> bool:
        for page in self.session.pages:
            if predicate(page):
                self.session.switch_to(page)
                logger.info(f"Switched to window with {description}: {page.url}")
                return True

        logger.warning(f"No window with {description}; active window unchanged")
        return False

    # =========================================================================
    # Browser Navigation
    # =========================================================================

    @allure.step("Navigate back")
    def navigate_back(self) -> None:
        self.session.page.go_back()

    @allure.step("Navigate forward")
    def navigate_forward(self) -> None:
        self.session.page.go_forward()

    @allure.step("Refresh page")
    def refresh_page(self) -> None:
        self.session.page.reload()


__all__ = [
    "WindowManager",
]
