# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Explicit and fluent wait strategies for UI automation.
#
# Every wait takes an explicit timeout in seconds; when omitted the configured
# default (wait.timeout_seconds) applies. Polling happens at a fixed cadence
# (wait.poll_interval_ms, 500ms by default) with no backoff.
#
# Key Features:
#   - Element visibility / clickability / invisibility waits
#   - Text-in-element, title and URL substring waits
#   - Fluent presence polling that tolerates elements detached mid-poll
#   - Allure integration for step reporting
#
# Usage:
#   waits = WaitActions(session)
#   waits.wait_for_element_visible(By.id("username"), timeout=10)
#   row = waits.fluent_wait_for_element(By.css("table tr.result"), timeout=20)
#
# ================================================================================

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Type, TypeVar

import allure
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from crm_tools.common import get_config

from .session import BrowserSession, ElementTarget, NoSuchWindowError


T = TypeVar('T')


@dataclass
class WaitConfig:
    """
    Configuration for wait operations.

    Attributes:
        timeout_seconds: Maximum time to wait
        poll_interval_ms: Delay between two checks of the condition
    """
    timeout_seconds: float = 15.0
    poll_interval_ms: int = 500

    def __post_init__(self) -> None:
        if self.timeout_seconds < 0:
            raise ValueError(f"timeout_seconds must be >= 0, got {self.timeout_seconds}")
        if self.poll_interval_ms <= 0:
            raise ValueError(f"poll_interval_ms must be > 0, got {self.poll_interval_ms}")

    @property
    def timeout_ms(self) -> float:
        # Playwright reads 0 as "no timeout"
        return max(self.timeout_seconds * 1000, 1)

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000

    @classmethod
    def from_config(cls) -> "WaitConfig":
        """Build the default wait configuration from global config."""
        return cls(
            timeout_seconds=float(get_config("wait.timeout_seconds", 15)),
            poll_interval_ms=int(get_config("wait.poll_interval_ms", 500)),
        )


class WaitTimeoutError(TimeoutError):
    """Raised when a wait condition is not met within its timeout."""
    pass


def fluent_wait(
    check_fn: Callable[[], T],
    config: WaitConfig,
    description: str = "Waiting for condition",
    ignored_exceptions: Tuple[Type[BaseException], ...] = ()
) -> T:
    """
    Poll a condition at a fixed interval until it returns a truthy value.

    The condition is checked once before any sleep, so a condition that is
    already met returns immediately.

    Args:
        check_fn: Callable returning a truthy value once the condition holds
        config: Timeout and polling cadence
        description: Human-readable description for logging
        ignored_exceptions: Exception types treated as "not yet" while polling

    Returns:
        The first truthy value returned by check_fn

    Raises:
        WaitTimeoutError: If the condition is not met before the timeout
    """
    deadline = time.monotonic() + config.timeout_seconds
    attempt = 0
    last_error = None

    logger.debug(
        f"Starting wait: {description} "
        f"(timeout={config.timeout_seconds}s, poll={config.poll_interval_ms}ms)"
    )

    while True:
        attempt += 1

        try:
            result = check_fn()
            if result:
                logger.debug(f"Wait successful after {attempt} attempts: {description}")
                return result
        except ignored_exceptions as e:
            last_error = e

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            error_msg = (
                f"Timeout after {config.timeout_seconds}s waiting for: {description}. "
                f"Attempts: {attempt}, Last error: {last_error}"
            )
            logger.error(error_msg)
            raise WaitTimeoutError(error_msg)

        time.sleep(min(config.poll_interval_seconds, remaining))


@contextmanager
def _translate_timeout(description: str, config: WaitConfig):
    """Re-raise Playwright timeouts as WaitTimeoutError."""
    try:
        yield
    except PlaywrightTimeoutError as e:
        error_msg = f"Timeout after {config.timeout_seconds}s waiting for: {description}"
        logger.error(error_msg)
        raise WaitTimeoutError(error_msg) from e


class WaitActions:
    """
    Wait facade over the active page of a BrowserSession.

    Example:
        waits = WaitActions(session)
        waits.wait_for_title_contains("Organizations", timeout=10)
        waits.wait_for_element_invisibility(".loading-spinner", timeout=30)
    """

    def __init__(self, session: BrowserSession, config: Optional[WaitConfig] = None):
        """
        Initialize WaitActions.

        Args:
            session: Session whose active page is waited on
            config: Default timeout and polling; read from global config if None
        """
        self.session = session
        self.config = config or WaitConfig.from_config()

    def _config_for(
        self,
        timeout: Optional[float],
        poll_interval_ms: Optional[int] = None
    ) -> WaitConfig:
        return WaitConfig(
            timeout_seconds=self.config.timeout_seconds if timeout is None else timeout,
            poll_interval_ms=(
                self.config.poll_interval_ms if poll_interval_ms is None else poll_interval_ms
            ),
        )

    def _poll(self, condition: Callable[[], T], config: WaitConfig, description: str) -> T:
        """
        Poll a locator condition with fluent_wait.

        Only Playwright timeouts (element detached between two calls) count as
        "not yet". A window closed during the wait raises NoSuchWindowError;
        any other driver error, such as a malformed selector, propagates.
        """
        def check() -> T:
            page = self.session.page
            try:
                return condition()
            except PlaywrightTimeoutError:
                raise
            except PlaywrightError as e:
                if page.is_closed():
                    raise NoSuchWindowError(
                        f"Window closed while waiting for: {description}"
                    ) from e
                raise

        return fluent_wait(
            check,
            config,
            description=description,
            ignored_exceptions=(PlaywrightTimeoutError,),
        )

    @allure.step("Wait for page load")
    def wait_for_page_load(self, timeout: Optional[float] = None) -> None:
        """
        Apply the timeout to every subsequent page action and wait for "load".

        Args:
            timeout: Max wait time in seconds
        """
        config = self._config_for(timeout)
        page = self.session.page

        page.set_default_timeout(config.timeout_ms)
        with _translate_timeout("page load", config):
            page.wait_for_load_state("load", timeout=config.timeout_ms)

    @allure.step("Wait for element visible: {target}")
    def wait_for_element_visible(
        self,
        target: ElementTarget,
        timeout: Optional[float] = None
    ) -> Locator:
        """
        Wait until the element is visible.

        Args:
            target: Selector, By locator or Locator
            timeout: Max wait time in seconds

        Returns:
            The resolved Locator
        """
        config = self._config_for(timeout)
        locator = self.session.locate(target)

        logger.info(f"Waiting for {target} to be visible")
        with _translate_timeout(f"{target} visible", config):
            locator.wait_for(state="visible", timeout=config.timeout_ms)
        return locator

    @allure.step("Wait for element clickable: {target}")
    def wait_for_element_clickable(
        self,
        target: ElementTarget,
        timeout: Optional[float] = None
    ) -> Locator:
        """
        Wait until the element is visible and enabled.

        Args:
            target: Selector, By locator or Locator
            timeout: Max wait time in seconds

        Returns:
            The resolved Locator
        """
        config = self._config_for(timeout)
        locator = self.session.locate(target)

        logger.info(f"Waiting for {target} to be clickable")
        self._poll(
            lambda: locator.is_visible() and locator.is_enabled(timeout=config.poll_interval_ms),
            config,
            f"{target} clickable",
        )
        return locator

    @allure.step("Wait for element invisible: {target}")
    def wait_for_element_invisibility(
        self,
        target: ElementTarget,
        timeout: Optional[float] = None
    ) -> None:
        """
        Wait until the element is hidden or detached.

        Args:
            target: Selector, By locator or Locator
            timeout: Max wait time in seconds
        """
        config = self._config_for(timeout)
        locator = self.session.locate(target)

        logger.info(f"Waiting for {target} to disappear")
        with _translate_timeout(f"{target} invisible", config):
            locator.wait_for(state="hidden", timeout=config.timeout_ms)

    @allure.step("Wait for text '{text}' in element: {target}")
    def wait_for_text_in_element(
        self,
        target: ElementTarget,
        text: str,
        timeout: Optional[float] = None
    ) -> Locator:
        """
        Wait until the element's visible text contains ``text``.

        Args:
            target: Selector, By locator or Locator
            text: Expected text fragment
            timeout: Max wait time in seconds

        Returns:
            The resolved Locator
        """
        config = self._config_for(timeout)
        locator = self.session.locate(target)

        self._poll(
            lambda: (
                locator.is_visible()
                and text in locator.inner_text(timeout=config.poll_interval_ms)
            ),
            config,
            f"text '{text}' in {target}",
        )
        return locator

    @allure.step("Fluent wait for element: {target}")
    def fluent_wait_for_element(
        self,
        target: ElementTarget,
        timeout: Optional[float] = None,
        poll_interval_ms: Optional[int] = None
    ) -> Locator:
        """
        Poll until at least one element matches.

        Args:
            target: Selector, By locator or Locator
            timeout: Max wait time in seconds
            poll_interval_ms: Polling cadence; configured default if None

        Returns:
            Locator of the first matching element
        """
        config = self._config_for(timeout, poll_interval_ms)
        locator = self.session.locate(target)

        return self._poll(
            lambda: locator.first if locator.count() > 0 else None,
            config,
            f"{target} present",
        )

    @allure.step("Wait for title to contain: {title_part}")
    def wait_for_title_contains(
        self,
        title_part: str,
        timeout: Optional[float] = None
    ) -> None:
        """
        Wait until the page title contains ``title_part``.

        Args:
            title_part: Partial or full title text
            timeout: Max wait time in seconds
        """
        config = self._config_for(timeout)

        with _translate_timeout(f"title containing '{title_part}'", config):
            self.session.page.wait_for_function(
                "part => document.title.includes(part)",
                arg=title_part,
                timeout=config.timeout_ms,
                polling=config.poll_interval_ms,
            )

    @allure.step("Wait for URL to contain: {url_fraction}")
    def wait_for_url_contains(
        self,
        url_fraction: str,
        timeout: Optional[float] = None
    ) -> None:
        """
        Wait until the current URL contains ``url_fraction``.

        Args:
            url_fraction: Partial or full URL text
            timeout: Max wait time in seconds
        """
        config = self._config_for(timeout)

        with _translate_timeout(f"URL containing '{url_fraction}'", config):
            self.session.page.wait_for_function(
                "fraction => window.location.href.includes(fraction)",
                arg=url_fraction,
                timeout=config.timeout_ms,
                polling=config.poll_interval_ms,
            )


__all__ = [
    "WaitConfig",
    "WaitTimeoutError",
    "WaitActions",
    "fluent_wait",
]
