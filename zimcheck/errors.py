"""
Custom Exceptions for zimcheck.

Design Principles:
- Every exception provides actionable guidance
- Error messages include context (what was expected, what was provided)
- Exceptions are hierarchical for flexible catching
- All exceptions are serializable for JSON error reporting

Check failures are never exceptions: they are recorded in the
DiagnosticReport. Only conditions that prevent checks from running at all
(archive cannot be opened, invalid configuration, bad command line) escape
the engine.
"""

from pathlib import Path
from typing import Any, Dict, Optional


class ZimcheckError(Exception):
    """
    Base exception for all zimcheck errors.

    Attributes:
        message: Human-readable error description
        context: Additional context as key-value pairs
        suggestion: Actionable suggestion to fix the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        parts = [self.message]

        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            parts.append(f"Context: {context_str}")

        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")

        return " | ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "suggestion": self.suggestion,
        }


# =============================================================================
# Archive access
# =============================================================================


class ArchiveError(ZimcheckError):
    """Raised by archive readers when the underlying archive misbehaves."""


class ArchiveOpenError(ArchiveError):
    """
    Raised when an archive cannot be opened at all.

    This is the fatal case: no check can run and the process exits with
    the exception status.
    """

    def __init__(self, path: Any, reason: str, suggestion: Optional[str] = None):
        self.path = str(path)
        self.reason = reason
        super().__init__(
            f"Unable to open archive {self.path}: {reason}",
            suggestion=suggestion,
        )


class EntryReadError(ArchiveError):
    """
    Raised when a single entry cannot be read or decompressed.

    The article scanner records it under the 'other' check and moves on
    to the next entry.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read entry {path}: {reason}")


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(ZimcheckError):
    """Base exception for configuration problems."""


class YAMLParseError(ConfigError):
    """
    Raised when YAML parsing fails.

    Provides line number and column if available.
    """

    def __init__(
        self,
        message: str,
        file_path: Optional[Path] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.file_path = file_path
        self.line = line
        self.column = column

        context = {}
        if file_path:
            context["file"] = str(file_path)
        if line is not None:
            context["line"] = line
        if column is not None:
            context["column"] = column

        suggestion = "Check YAML syntax: indentation, colons, quotes"
        if line:
            suggestion = f"Check line {line} for syntax errors"

        super().__init__(message, context=context, suggestion=suggestion)


class SchemaValidationError(ConfigError):
    """
    Raised when configuration content fails schema validation.

    Provides detailed information about which field failed validation.
    """

    def __init__(
        self,
        message: str,
        field_path: Optional[str] = None,
        actual_value: Any = None,
        source_file: Optional[Path] = None,
    ):
        self.field_path = field_path
        self.actual_value = actual_value
        self.source_file = source_file

        context = {}
        if field_path:
            context["field"] = field_path
        if actual_value is not None:
            context["actual_value"] = actual_value
        if source_file:
            context["file"] = str(source_file)

        super().__init__(message, context=context)


# =============================================================================
# Command line
# =============================================================================


class UsageError(ZimcheckError):
    """Raised when the command line cannot be understood."""

