"""
================================================================================
Allure Report Utilities
================================================================================

PNG attachment helpers used by the UI framework to add screenshots to Allure
reports.

================================================================================
"""

from pathlib import Path
from typing import Optional, Union

import allure
from loguru import logger


def attach_png(png: bytes, name: str = "Screenshot"):
    """
    Attach PNG bytes to Allure report.

    Args:
        png: Raw PNG image data
        name: Attachment name
    """
    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


def attach_screenshot_file(path: Union[str, Path], name: Optional[str] = None):
    """
    Attach a PNG file already written to disk.

    Args:
        path: Screenshot file path
        name: Attachment name (defaults to the file stem)
    """
    path = Path(path)
    allure.attach.file(
        str(path),
        name=name or path.stem,
        attachment_type=allure.attachment_type.PNG
    )
    logger.debug(f"Attached screenshot to report: {path}")


__all__ = [
    "attach_png",
    "attach_screenshot_file",
]
