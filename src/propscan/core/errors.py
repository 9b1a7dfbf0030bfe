"""propscan error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Facts (malformed collaborator input)
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Facts (3xxx)
    FACTS_PARSE_ERROR = 3001
    FACTS_INVALID = 3002
    FACTS_FILE_NOT_FOUND = 3003
    FACTS_UNSUPPORTED_FORMAT = 3004

    # Internal (9xxx)
    CONTRACT_VIOLATION = 9002


@dataclass(frozen=True, slots=True)
class PropScanError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'FACTS_INVALID')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(PropScanError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class FactsError(PropScanError):
    """Errors in a facts document handed over by a front end."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "FactsError":
        return cls(
            code=ErrorCode.FACTS_PARSE_ERROR,
            message=f"Failed to parse facts at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid(cls, location: str, reason: str) -> "FactsError":
        return cls(
            code=ErrorCode.FACTS_INVALID,
            message=f"Invalid facts at '{location}': {reason}",
            details={"location": location, "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "FactsError":
        return cls(
            code=ErrorCode.FACTS_FILE_NOT_FOUND,
            message=f"Facts file not found: {path}",
            details={"path": path},
        )

    @classmethod
    def unsupported_format(cls, path: str) -> "FactsError":
        return cls(
            code=ErrorCode.FACTS_UNSUPPORTED_FORMAT,
            message=f"Unsupported facts format (expected .json, .yaml or .yml): {path}",
            details={"path": path},
        )


class InternalError(PropScanError):
    """Errors raised when a caller breaks the analysis contract."""

    @classmethod
    def contract_violation(cls, reason: str, **details: Any) -> "InternalError":
        """The caller broke a structural precondition; never data-dependent."""
        return cls(
            code=ErrorCode.CONTRACT_VIOLATION,
            message=f"Contract violation: {reason}",
            details=details,
        )
