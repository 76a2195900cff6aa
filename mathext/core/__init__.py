"""
Core Module: Errors, Configuration, Logging, and Precondition Checks

Zero third-party dependencies. Everything else in mathext builds on it.
"""

from mathext.core.errors import (
    Result,
    Ok,
    Err,
    ErrorCode,
    MathExtError,
    InvalidArgumentError,
    PreconditionError,
    ConfigError,
)
from mathext.core.config import (
    MathExtConfig,
    get_config,
    set_config,
    debug_checks,
    load_config,
)
from mathext.core.checks import (
    check_ascending,
    check_sorted_by_id,
    require,
)
from mathext.core.logging import JsonFormatter, setup_logging

__all__ = [
    # Errors
    "Result",
    "Ok",
    "Err",
    "ErrorCode",
    "MathExtError",
    "InvalidArgumentError",
    "PreconditionError",
    "ConfigError",
    # Config
    "MathExtConfig",
    "get_config",
    "set_config",
    "debug_checks",
    "load_config",
    # Checks
    "check_ascending",
    "check_sorted_by_id",
    "require",
    # Logging
    "JsonFormatter",
    "setup_logging",
]
