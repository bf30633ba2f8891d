"""Access Analytics - Errors"""

from enum import Enum
from typing import Any, Mapping, Optional


class ErrorKind(str, Enum):
    """Tags callers can branch on instead of comparing messages."""

    CONFIG_REQUIRED = "config_required"
    LINE_REGEX_REQUIRED = "line_regex_required"
    SOURCE_UNAVAILABLE = "source_unavailable"
    RANK_OUT_OF_RANGE = "rank_out_of_range"


class LogAnalyzerError(Exception):
    """Base class for all errors raised by the analyzer."""

    default_message = "Log analyzer error occurred"
    kind: Optional[ErrorKind] = None

    def __init__(
        self, message: Optional[str] = None, *, context: Optional[Mapping[str, Any]] = None
    ):
        self.message = message or self.default_message
        self.context: Mapping[str, Any] = dict(context or {})
        formatted = self._format_message()
        super().__init__(formatted)

    def _format_message(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class ConfigurationError(LogAnalyzerError):
    """The analyzer cannot be built from the supplied configuration."""

    default_message = "Invalid analyzer configuration"


class ConfigRequiredError(ConfigurationError):
    default_message = "config is required"
    kind = ErrorKind.CONFIG_REQUIRED


class LineRegexRequiredError(ConfigurationError):
    default_message = "line regex is required"
    kind = ErrorKind.LINE_REGEX_REQUIRED


class SourceUnavailableError(LogAnalyzerError):
    """The log source could not be opened or read."""

    default_message = "error opening file"
    kind = ErrorKind.SOURCE_UNAVAILABLE


class RankOutOfRangeError(LogAnalyzerError):
    """More top entries were requested than distinct keys were collected."""

    default_message = "requested more top results than distinct keys exist"
    kind = ErrorKind.RANK_OUT_OF_RANGE
