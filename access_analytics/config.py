"""Access Analytics - Configuration"""

import re
from dataclasses import dataclass
from typing import Any, Optional, Pattern


@dataclass(frozen=True)
class LogAnalyzerConfig:
    """Immutable settings for one :class:`~access_analytics.analyzer.LogAnalyzer`.

    ``line_regex`` is required by the analyzer; it is left optional here so a
    missing pattern is reported as ``LineRegexRequiredError`` when the
    analyzer is built. Ranking counts of zero (or less) disable ranking.
    ``clamp_rankings`` truncates top lists to the number of distinct keys
    instead of raising ``RankOutOfRangeError``.
    """

    line_regex: Optional[Pattern[str]] = None
    most_active_ips_count: int = 0
    most_visited_urls_count: int = 0
    clamp_rankings: bool = False
    encoding: str = "utf-8"

    @classmethod
    def from_pattern(cls, pattern: str, **kwargs: Any) -> "LogAnalyzerConfig":
        """Compile ``pattern`` and build a config around it.

        Raises ``re.error`` when the pattern does not compile.
        """
        return cls(line_regex=re.compile(pattern), **kwargs)
