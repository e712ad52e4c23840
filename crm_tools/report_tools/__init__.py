"""Allure reporting helpers."""

from .allure_utils import attach_png, attach_screenshot_file

__all__ = [
    "attach_png",
    "attach_screenshot_file",
]
