"""
Repository-level pytest configuration.

Why this exists:
  - Initialize Loguru once per test session from config/config.yaml
  - Keep screenshots written by tests out of the working tree
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from crm_tools.common import init_logger, set_config


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _session_setup(tmp_path_factory: pytest.TempPathFactory) -> Generator[None, None, None]:
    """Configure logging and redirect the default screenshot directory."""
    init_logger()
    set_config("screenshots.dir", str(tmp_path_factory.mktemp("screenshots")))
    yield
