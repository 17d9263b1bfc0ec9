"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by the directory they live in.

================================================================================
"""

import pytest

from table_tools.common.global_config import init_logger


def pytest_configure(config):
    """Configure logging and project-wide custom markers."""

    # Sinks come from the `logging` config section
    init_logger()

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for release"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Tests against the in-memory DOM, no browser required"
    )
    config.addinivalue_line(
        "markers", "ui: Tests driving a real Chromium instance"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Tests under `unit/` get the 'unit' marker and tests under `ui_testing/`
    get the 'ui' marker, so `-m unit` runs without a browser.
    """
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Smart Table Tools - Playwright Table Helpers",
        "=" * 60,
        "",
    ]
