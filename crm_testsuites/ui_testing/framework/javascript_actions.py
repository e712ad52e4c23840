"""
================================================================================
JavaScript Actions
================================================================================

Script execution and scrolling against the active page. Scripts are passed
to Playwright unchanged; values are handed over as evaluate() arguments.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any

import allure
from loguru import logger

from .session import BrowserSession, ElementTarget


class JavaScriptActions:
    """JavaScript executor and scroll helpers."""

    def __init__(self, session: BrowserSession):
        self.session = session

    def execute_script(self, expression: str, arg: Any = None) -> Any:
        """
        Evaluate a JavaScript expression or function in the active page.

        Args:
            expression: Expression, or function receiving ``arg``
            arg: JSON-serializable argument (or element handle)

        Returns:
            The JSON-serializable result
        """
        logger.debug(f"Executing script: {expression[:80]}")
        return self.session.page.evaluate(expression, arg)

    @allure.step("JS click: {target}")
    def js_click(self, target: ElementTarget) -> None:
        """Click through the DOM, bypassing actionability checks."""
        self.session.locate(target).evaluate("el => el.click()")

    @allure.step("JS set value of {target}")
    def js_set_value(self, target: ElementTarget, value: str) -> None:
        self.session.locate(target).evaluate("(el, value) => { el.value = value; }", value)

    def js_get_value(self, target: ElementTarget) -> str:
        return self.session.locate(target).evaluate("el => el.value")

    # ===== Scrolling =====

    @allure.step("Scroll into view: {target}")
    def scroll_into_view(self, target: ElementTarget, align_to_top: bool = True) -> None:
        """
        Scroll the element into view.

        Args:
            target: Element to reveal
            align_to_top: Align to the top (True) or bottom (False) of the viewport
        """
        self.session.locate(target).evaluate(
            "(el, alignToTop) => el.scrollIntoView(alignToTop)", align_to_top
        )

    @allure.step("Scroll by offset: ({x}, {y})")
    def scroll_by_offset(self, x: int, y: int) -> None:
        self.session.page.evaluate("([x, y]) => window.scrollBy(x, y)", [x, y])

    @allure.step("Scroll to bottom")
    def scroll_to_bottom(self) -> None:
        self.session.page.evaluate("window.scrollTo(0, document.body.scrollHeight)")

    @allure.step("Scroll to top")
    def scroll_to_top(self) -> None:
        self.session.page.evaluate("window.scrollTo(0, 0)")


__all__ = [
    "JavaScriptActions",
]
