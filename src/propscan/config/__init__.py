"""Config module exports."""

from propscan.config.loader import load_config
from propscan.config.models import (
    AnalysisConfig,
    LoggingConfig,
    LogOutputConfig,
    PropScanConfig,
)

__all__ = [
    "load_config",
    "AnalysisConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "PropScanConfig",
]
