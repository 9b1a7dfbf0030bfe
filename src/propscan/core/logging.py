"""structlog setup for propscan.

Events are rendered by stdlib handlers, one per configured output, each
with its own level and format. Every event logged while a facts document
is being checked carries that run's id. The first file output is
remembered so the CLI can point at it when a check fails.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from propscan.config.models import LoggingConfig, LogOutputConfig

_CONSOLE_DESTINATIONS = ("stderr", "stdout")

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)
_log_file: Path | None = None


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Start a run; generates a short id when none is given."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def log_file_path() -> Path | None:
    """First file output of the current configuration, if any."""
    return _log_file


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_run_id():
        event_dict["run_id"] = rid
    return event_dict


def _level(name: str | None, fallback: int) -> int:
    if name is None:
        return fallback
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else fallback


def _renderer(output: LogOutputConfig) -> structlog.types.Processor:
    if output.format == "json":
        return structlog.processors.JSONRenderer()
    stream = sys.stdout if output.destination == "stdout" else sys.stderr
    return structlog.dev.ConsoleRenderer(
        colors=output.destination in _CONSOLE_DESTINATIONS and stream.isatty(),
        pad_event_to=0,
        pad_level=False,
    )


def _handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
) -> None:
    """Route structlog events through one stdlib handler per output.

    Without a config, a single stderr output at level is used. Calling
    again replaces the previous handlers.
    """
    global _log_file
    from propscan.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )
    default_level = _level(config.level, logging.WARNING)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_run_id,  # type: ignore[list-item]
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Uncached so a later configure_logging call takes effect
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in root.handlers[:]:
        root.removeHandler(old)
        old.close()
    root.setLevel(default_level)

    _log_file = None
    for output in config.outputs:
        handler = _handler(output.destination)
        handler.setLevel(_level(output.level, default_level))
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(processor=_renderer(output), foreign_pre_chain=pre_chain)
        )
        root.addHandler(handler)
        if _log_file is None and output.destination not in _CONSOLE_DESTINATIONS:
            _log_file = Path(output.destination)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]
