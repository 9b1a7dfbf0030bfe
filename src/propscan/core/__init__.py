"""Core module exports."""

from propscan.core.errors import (
    ConfigError,
    ErrorCode,
    FactsError,
    InternalError,
    PropScanError,
)
from propscan.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    log_file_path,
    set_run_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "FactsError",
    "InternalError",
    "PropScanError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "log_file_path",
    "set_run_id",
]
