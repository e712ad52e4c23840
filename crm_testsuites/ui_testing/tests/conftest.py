"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser-driven tests of the helper layer.

Key Features:
- Session-scoped browser (skipped when no Playwright browser is installed)
- Function-scoped isolated context and page
- WebDriverUtility bound to the test page
- Screenshot capture on failure

================================================================================
"""

from pathlib import Path
from typing import Generator

import pytest
from loguru import logger
from playwright.sync_api import BrowserContext, Page
from playwright.sync_api import Error as PlaywrightError

from crm_testsuites.ui_testing.framework import BrowserManager, WaitConfig, WebDriverUtility
from crm_tools.report_tools import attach_png


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def browser_manager() -> Generator[BrowserManager, None, None]:
    """
    Session-scoped browser manager fixture.

    Launches one browser for the whole session; skips UI tests when the
    browser binaries are not installed (`playwright install chromium`).
    """
    manager = BrowserManager()
    try:
        manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Playwright browser not available: {e}")
    yield manager
    manager.close()


@pytest.fixture(scope="function")
def context(browser_manager: BrowserManager) -> Generator[BrowserContext, None, None]:
    """Function-scoped browser context, one per test for isolation."""
    context = browser_manager.new_context()
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Page:
    """Function-scoped page within the test's browser context."""
    return context.new_page()


@pytest.fixture
def screenshots_dir(tmp_path: Path) -> Path:
    """Temporary directory for screenshots."""
    screenshots = tmp_path / "screenshots"
    screenshots.mkdir(exist_ok=True)
    return screenshots


@pytest.fixture
def util(page: Page, screenshots_dir: Path) -> WebDriverUtility:
    """WebDriverUtility with short timeouts suited to inline test pages."""
    return WebDriverUtility(
        page,
        wait_config=WaitConfig(timeout_seconds=5, poll_interval_ms=100),
        screenshot_dir=screenshots_dir,
    )


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture a screenshot when a UI test fails and attach it to Allure.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = getattr(item, "funcargs", {}).get("page")
        if page is not None and not page.is_closed():
            try:
                attach_png(page.screenshot(full_page=True), name="failure_screenshot")
            except PlaywrightError as e:
                logger.warning(f"Failed to capture screenshot on failure: {e}")
