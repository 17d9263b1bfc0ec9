"""
Repository-level pytest configuration.

Points the configuration loader at the repo's `config/` directory and gives
each test run a predictable environment unless the user or CI overrides it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from table_tools.common.global_config import reset_config


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _default_env(project_root: Path) -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "TABLE_TOOLS_CONFIG_DIR": str(project_root / "config"),
        "UI_BASE_URL": "http://localhost:3000",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)
    reset_config()

    yield

    reset_config()
