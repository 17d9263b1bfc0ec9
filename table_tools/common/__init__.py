"""
================================================================================
Smart Table Tools Common Utilities
================================================================================

Shared configuration management and logging setup.

Exports:
    - get_config / set_config / reload_config: dot-path configuration access
    - init_logger / get_logger: loguru setup with standard settings
    - ConfigurationError: raised for unreadable configuration files

Usage:
    from table_tools.common import get_config, init_logger

    init_logger()
    limit = get_config("navigation.timeout_limit", 120)

================================================================================
"""

from .global_config import (
    ConfigurationError,
    get_config,
    get_logger,
    init_logger,
    reload_config,
    reset_config,
    set_config,
)

__all__ = [
    "ConfigurationError",
    "get_config",
    "get_logger",
    "init_logger",
    "reload_config",
    "reset_config",
    "set_config",
]
