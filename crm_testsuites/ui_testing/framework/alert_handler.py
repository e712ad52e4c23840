"""
================================================================================
Alert Handler
================================================================================

JavaScript alert / confirm / prompt handling.

A Playwright dialog blocks the page until it is handled, so the response is
armed *before* the step that opens the dialog:

    alerts.accept_alert()
    actions.wait_and_click(By.css("input[value='Delete']"))
    assert "Are you sure" in alerts.get_alert_text()

An armed response applies to the next dialog of the window that was active
when it was armed, and is used once. Arming again replaces a response that
has not fired yet.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

import allure
from loguru import logger
from playwright.sync_api import Dialog, Page

from .session import BrowserSession


class NoAlertError(Exception):
    """Raised when alert text is requested before any dialog was handled."""
    pass


class AlertHandler:
    """One-shot dialog responses for the active window."""

    def __init__(self, session: BrowserSession):
        self.session = session
        self._pending: Optional[Tuple[Page, Callable[[Dialog], None]]] = None
        self._last_message: Optional[str] = None

    @allure.step("Accept next alert")
    def accept_alert(self) -> None:
        """Accept the next dialog (OK)."""
        self._arm(accept=True)

    @allure.step("Dismiss next alert")
    def dismiss_alert(self) -> None:
        """Dismiss the next dialog (Cancel)."""
        self._arm(accept=False)

    @allure.step("Answer next prompt with: {text}")
    def send_text_to_alert(self, text: str) -> None:
        """Type ``text`` into the next prompt dialog and accept it."""
        self._arm(accept=True, prompt_text=text)

    def get_alert_text(self) -> str:
        """
        Message of the most recently handled dialog.

        Raises:
            NoAlertError: If no armed dialog has fired yet
        """
        if self._last_message is None:
            raise NoAlertError("No alert has been handled yet")
        return self._last_message

    @property
    def is_armed(self) -> bool:
        return self._pending is not None

    def _arm(self, accept: bool, prompt_text: Optional[str] = None) -> None:
        self._disarm()
        page = self.session.page

        def handle(dialog: Dialog) -> None:
            self._pending = None
            self._last_message = dialog.message
            logger.info(
                f"{'Accepting' if accept else 'Dismissing'} {dialog.type}: '{dialog.message}'"
            )
            if not accept:
                dialog.dismiss()
            elif prompt_text is None:
                dialog.accept()
            else:
                dialog.accept(prompt_text)

        page.once("dialog", handle)
        self._pending = (page, handle)
        logger.debug(f"Armed dialog response (accept={accept})")

    def _disarm(self) -> None:
        if self._pending is None:
            return
        page, handler = self._pending
        if not page.is_closed():
            page.remove_listener("dialog", handler)
        self._pending = None


__all__ = [
    "AlertHandler",
    "NoAlertError",
]
