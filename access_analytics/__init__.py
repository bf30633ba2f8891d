"""Access Analytics package"""

from .patterns import VERSION, DEFAULT_LINE_PATTERN, DEFAULT_LINE_REGEX
from .models import LogLine, LogAnalytics
from .config import LogAnalyzerConfig
from .errors import (
    ErrorKind,
    LogAnalyzerError,
    ConfigRequiredError,
    LineRegexRequiredError,
    SourceUnavailableError,
    RankOutOfRangeError,
)
from .decoder import decode_line
from .analyzer import LogAnalyzer
from .output import print_report

__all__ = [
    'VERSION', 'DEFAULT_LINE_PATTERN', 'DEFAULT_LINE_REGEX',
    'LogLine', 'LogAnalytics', 'LogAnalyzerConfig', 'LogAnalyzer',
    'decode_line', 'print_report',
    'ErrorKind', 'LogAnalyzerError', 'ConfigRequiredError', 'LineRegexRequiredError',
    'SourceUnavailableError', 'RankOutOfRangeError',
]
