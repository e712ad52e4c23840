"""
================================================================================
Screenshot Manager
================================================================================

Full-page screenshot capture to disk, attached to the Allure report.

Files are written as <screenshot_dir>/<name>.png. The timestamped variant
appends "_HHMMSS_DDMMYYYY" so repeated captures of one step do not overwrite
each other.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import allure
from loguru import logger

from crm_tools.common import get_config
from crm_tools.report_tools import attach_screenshot_file

from .session import BrowserSession


class ScreenshotManager:
    """
    Captures screenshots of the active window.

    Usage:
        shots = ScreenshotManager(session)
        shots.take_screenshot("org_created")                # ./screenshots/org_created.png
        shots.take_screenshot_with_timestamp("login_page")  # ./screenshots/login_page_142501_17102026.png
    """

    def __init__(
        self,
        session: BrowserSession,
        screenshot_dir: Optional[Union[str, Path]] = None,
        timestamp_format: Optional[str] = None,
    ):
        """
        Initialize screenshot manager.

        Args:
            session: Session whose active page is captured
            screenshot_dir: Output directory (screenshots.dir from config if None)
            timestamp_format: strftime format of the name suffix
        """
        self.session = session
        self.screenshot_dir = Path(screenshot_dir or get_config("screenshots.dir", "./screenshots"))
        self.timestamp_format = timestamp_format or get_config(
            "screenshots.timestamp_format", "%H%M%S_%d%m%Y"
        )

    @allure.step("Take screenshot: {name}")
    def take_screenshot(self, name: str) -> Path:
        """
        Capture the full page to ``<screenshot_dir>/<name>.png``.

        Args:
            name: File name without extension

        Returns:
            Path of the written file

        Raises:
            OSError: If the file cannot be written
        """
        path = self.screenshot_dir / f"{name}.png"
        png = self.session.page.screenshot(full_page=True)
        self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png)
        logger.info(f"Screenshot saved: {path}")

        attach_screenshot_file(path, name=name)
        return path

    def take_screenshot_with_timestamp(self, base_name: str) -> Path:
        """
        Capture the full page with the current time appended to the name.

        Args:
            base_name: Base file name without extension

        Returns:
            Path of the written file
        """
        timestamp = datetime.now().strftime(self.timestamp_format)
        return self.take_screenshot(f"{base_name}_{timestamp}")


__all__ = [
    "ScreenshotManager",
]
