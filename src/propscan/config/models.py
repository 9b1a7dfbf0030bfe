"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PROPSCAN__SECTION__KEY)
3. Repo YAML (.propscan/config.yaml)
4. Global YAML (~/.config/propscan/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    PROPSCAN__<SECTION>__<KEY>=<VALUE>

Examples:
    PROPSCAN__LOGGING__LEVEL=DEBUG
    PROPSCAN__ANALYSIS__CHECK_UNINITIALIZED_PROPERTIES=true
    PROPSCAN__ANALYSIS__ALWAYS_READ_TAGS='["@serialized"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        PROPSCAN__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every skipped access fact.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class AnalysisConfig(BaseModel):
    """Options of the unused private property analysis.

    Immutable: one instance is handed to the rule and shared by every class
    it analyzes.

    Env vars:
        PROPSCAN__ANALYSIS__ALWAYS_WRITTEN_TAGS: JSON list of doc markers
        PROPSCAN__ANALYSIS__ALWAYS_READ_TAGS: JSON list of doc markers
        PROPSCAN__ANALYSIS__CHECK_UNINITIALIZED_PROPERTIES: Trust the uninitialized oracle
    """

    model_config = ConfigDict(frozen=True)

    always_written_tags: tuple[str, ...] = Field(
        default=(),
        description="Doc comment substrings marking a property as written by something "
        "the analysis cannot see (e.g. an ORM or injector).",
    )
    always_read_tags: tuple[str, ...] = Field(
        default=(),
        description="Doc comment substrings marking a property as read by something "
        "the analysis cannot see (e.g. a serializer).",
    )
    check_uninitialized_properties: bool = Field(
        default=False,
        description="Suppress read-only reports for properties the constructor analysis "
        "proves are never initialized (they are reported by that analysis instead).",
    )

    @field_validator("always_written_tags", "always_read_tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        # An empty marker is a substring of every comment
        if any(tag == "" for tag in v):
            raise ValueError("Doc markers must be non-empty strings")
        return v


class PropScanConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
