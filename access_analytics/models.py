"""Access Analytics - Data models"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Dict, List


@dataclass
class LogLine:
    """Decoded access log line"""
    remote_host: str
    time: datetime
    request: str
    status: int
    bytes: int
    referer: str
    user_agent: str
    url: str


@dataclass
class LogAnalytics:
    """Result of one analysis run"""
    unique_ip_count: int = 0
    most_active_ips: List[str] = field(default_factory=list)
    most_visited_urls: List[str] = field(default_factory=list)
    total_lines: int = 0
    skipped_lines: int = 0

    def to_dict(self) -> Dict:
        return asdict(self)
