# ================================================================================
# Element Actions Module
# ================================================================================
#
# One-call wrappers for element interactions: pointer gestures, dropdown
# selection, keyboard input and checkbox/radio handling.
#
# Every gesture is performed exactly once. Driver failures (element obscured,
# disabled, detached...) surface as InteractionError and are never retried.
#
# Key Features:
#   - Hover, right click, double click, click-and-hold
#   - Drag and drop / slider moves as explicit press-move-release sequences
#   - Dropdown selection by index, value or visible text
#   - Keyboard keys and Ctrl shortcuts
#   - Idempotent checkbox and radio helpers
#   - Allure step integration
#
# ================================================================================

from contextlib import contextmanager
from typing import Optional, Tuple

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator

from .session import BrowserSession, ElementTarget
from .wait_helpers import WaitActions


class InteractionError(Exception):
    """Raised when the driver rejects an interaction with a located element."""
    pass


@contextmanager
def _interaction(description: str):
    """Re-raise driver errors for one interaction as InteractionError."""
    try:
        yield
    except PlaywrightError as e:
        logger.error(f"Interaction failed: {description}: {e}")
        raise InteractionError(f"{description} failed: {e}") from e


class ElementActions:
    """
    A utility class providing element interaction methods.

    Example:
        actions = ElementActions(session, waits)
        actions.hover(By.link_text("Organizations"))
        actions.select_by_visible_text("select[name='industry']", "Banking")
        actions.drag_and_drop("#card-1", "#column-done")
    """

    def __init__(self, session: BrowserSession, waits: Optional[WaitActions] = None):
        """
        Initialize ElementActions.

        Args:
            session: Session whose active page is acted on
            waits: Wait facade used by wait_and_click
        """
        self.session = session
        self.waits = waits or WaitActions(session)

    # ===== Dropdown Select Methods =====

    @allure.step("Select option #{index} in: {target}")
    def select_by_index(self, target: ElementTarget, index: int) -> None:
        """
        Select dropdown option by index.

        Args:
            target: The <select> element
            index: Zero-based index of the option
        """
        logger.info(f"Selecting index {index} in {target}")
        with _interaction(f"select index {index} in {target}"):
            self.session.locate(target).select_option(index=index)

    @allure.step("Select option value '{value}' in: {target}")
    def select_by_value(self, target: ElementTarget, value: str) -> None:
        """
        Select dropdown option by its value attribute.

        Args:
            target: The <select> element
            value: Value of the option
        """
        logger.info(f"Selecting value '{value}' in {target}")
        with _interaction(f"select value '{value}' in {target}"):
            self.session.locate(target).select_option(value=value)

    @allure.step("Select option '{visible_text}' in: {target}")
    def select_by_visible_text(self, target: ElementTarget, visible_text: str) -> None:
        """
        Select dropdown option by the text shown to the user.

        Args:
            target: The <select> element
            visible_text: Visible label of the option
        """
        logger.info(f"Selecting '{visible_text}' in {target}")
        with _interaction(f"select '{visible_text}' in {target}"):
            self.session.locate(target).select_option(label=visible_text)

    # ===== Basic Mouse Actions =====

    @allure.step("Hover element: {target}")
    def hover(self, target: ElementTarget) -> None:
        """Move the mouse over the element."""
        logger.info(f"Hovering over: {target}")
        with _interaction(f"hover {target}"):
            self.session.locate(target).hover()

    @allure.step("Right click element: {target}")
    def right_click(self, target: ElementTarget) -> None:
        """Open the context menu on the element."""
        logger.info(f"Right clicking: {target}")
        with _interaction(f"right click {target}"):
            self.session.locate(target).click(button="right")

    @allure.step("Double click element: {target}")
    def double_click(self, target: ElementTarget) -> None:
        """Double click the element."""
        logger.info(f"Double clicking: {target}")
        with _interaction(f"double click {target}"):
            self.session.locate(target).dblclick()

    @allure.step("Click and hold element: {target}")
    def click_and_hold(self, target: ElementTarget) -> None:
        """Press the left button over the element without releasing it."""
        logger.info(f"Click and hold: {target}")
        with _interaction(f"click and hold {target}"):
            x, y = self._center(self.session.locate(target))
            mouse = self.session.page.mouse
            mouse.move(x, y)
            mouse.down()

    @allure.step("Drag and drop: {source} -> {target}")
    def drag_and_drop(self, source: ElementTarget, target: ElementTarget) -> None:
        """
        Drag an element and drop it onto another element.

        Performs press on source, move to target, release. The target is
        located only after the press, since scrolling it into view moves
        the source.

        Args:
            source: Element to drag
            target: Element to drop onto
        """
        logger.info(f"Dragging from {source} to {target}")
        with _interaction(f"drag {source} to {target}"):
            mouse = self.session.page.mouse

            source_x, source_y = self._center(self.session.locate(source))
            mouse.move(source_x, source_y)
            mouse.down()
            try:
                target_x, target_y = self._center(self.session.locate(target))
                mouse.move(target_x, target_y)
            finally:
                mouse.up()

        logger.debug(f"Dropped {source} onto {target}")

    @allure.step("Move slider {slider} by {x_offset}px")
    def move_slider_by_offset(self, slider: ElementTarget, x_offset: int) -> None:
        """
        Press on a slider, move it horizontally by an offset and release.

        Args:
            slider: Slider element
            x_offset: Horizontal offset in CSS pixels (negative moves left)
        """
        logger.info(f"Moving slider {slider} by {x_offset}px")
        with _interaction(f"move slider {slider}"):
            x, y = self._center(self.session.locate(slider))

            mouse = self.session.page.mouse
            mouse.move(x, y)
            mouse.down()
            mouse.move(x + x_offset, y)
            mouse.up()

    # ===== Basic Element Interactions =====

    @allure.step("Wait and click: {target}")
    def wait_and_click(self, target: ElementTarget, timeout: Optional[float] = None) -> None:
        """
        Wait for the element to be clickable, then click it.

        Args:
            target: Element to click
            timeout: Max wait time in seconds before clicking
        """
        locator = self.waits.wait_for_element_clickable(target, timeout=timeout)

        logger.info(f"Clicking element: {target}")
        with _interaction(f"click {target}"):
            locator.click()

    @allure.step("Clear and type into: {target}")
    def clear_and_send_keys(self, target: ElementTarget, text: str) -> None:
        """
        Replace the content of an input with ``text``.

        Args:
            target: Input element
            text: Text to enter
        """
        logger.info(f"Filling {target} with '{text[:50]}'")
        with _interaction(f"fill {target}"):
            locator = self.session.locate(target)
            locator.clear()
            locator.fill(text)

    @allure.step("Press key {key} on: {target}")
    def send_keyboard_key(self, target: ElementTarget, key: str) -> None:
        """
        Send one keyboard key (or chord) to the element.

        Args:
            target: Input or focusable element
            key: Playwright key name, e.g. "Enter", "Tab", "Control+a"
        """
        logger.debug(f"Pressing {key} on {target}")
        with _interaction(f"press {key} on {target}"):
            self.session.locate(target).press(key)

    # ===== Checkbox and Radio Button Handling =====

    @allure.step("Check checkbox: {checkbox}")
    def check_checkbox(self, checkbox: ElementTarget) -> None:
        """Click the checkbox only if it is not checked yet."""
        with _interaction(f"check {checkbox}"):
            locator = self.session.locate(checkbox)
            if not locator.is_checked():
                logger.info(f"Checking checkbox: {checkbox}")
                locator.click()

    @allure.step("Uncheck checkbox: {checkbox}")
    def uncheck_checkbox(self, checkbox: ElementTarget) -> None:
        """Click the checkbox only if it is currently checked."""
        with _interaction(f"uncheck {checkbox}"):
            locator = self.session.locate(checkbox)
            if locator.is_checked():
                logger.info(f"Unchecking checkbox: {checkbox}")
                locator.click()

    def is_checkbox_checked(self, checkbox: ElementTarget) -> bool:
        return self.session.locate(checkbox).is_checked()

    @allure.step("Select radio button: {radio_button}")
    def select_radio_button(self, radio_button: ElementTarget) -> None:
        """Click the radio button only if it is not selected yet."""
        with _interaction(f"select {radio_button}"):
            locator = self.session.locate(radio_button)
            if not locator.is_checked():
                logger.info(f"Selecting radio button: {radio_button}")
                locator.click()

    def is_radio_button_selected(self, radio_button: ElementTarget) -> bool:
        return self.session.locate(radio_button).is_checked()

    # ===== Keyboard Shortcuts =====

    def press_enter(self, target: ElementTarget) -> None:
        self.send_keyboard_key(target, "Enter")

    def press_escape(self, target: ElementTarget) -> None:
        self.send_keyboard_key(target, "Escape")

    def press_tab(self, target: ElementTarget) -> None:
        self.send_keyboard_key(target, "Tab")

    def press_ctrl_a(self, target: ElementTarget) -> None:
        """Select all."""
        self.send_keyboard_key(target, "Control+a")

    def press_ctrl_c(self, target: ElementTarget) -> None:
        """Copy."""
        self.send_keyboard_key(target, "Control+c")

    def press_ctrl_v(self, target: ElementTarget) -> None:
        """Paste."""
        self.send_keyboard_key(target, "Control+v")

    def _center(self, locator: Locator) -> Tuple[float, float]:
        """Scroll the element into view and return its centre in page coordinates."""
        locator.scroll_into_view_if_needed()
        box = locator.bounding_box()
        if box is None:
            raise InteractionError(f"{locator} has no bounding box (not visible)")
        return box["x"] + box["width"] / 2, box["y"] + box["height"] / 2


__all__ = [
    "ElementActions",
    "InteractionError",
]
