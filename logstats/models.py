"""Log Stats - Data models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ExtractionResult:
    """Fields pulled out of one log line"""
    line: str
    ips: List[str]
    url: Optional[str]

    @property
    def matched(self) -> bool:
        return bool(self.ips)


@dataclass
class LogSummary:
    """Aggregate statistics for one analyzed file"""
    filepath: str
    total_lines: int
    total_ips: int
    unmatched_lines: int
    unique_ips: int
    top_ip_counts: List[Tuple[str, int]] = field(default_factory=list)
    top_url_counts: List[Tuple[str, int]] = field(default_factory=list)

    @property
    def top_ips(self) -> List[str]:
        return [ip for ip, _ in self.top_ip_counts]

    @property
    def top_urls(self) -> List[str]:
        return [url for url, _ in self.top_url_counts]

    def to_dict(self) -> Dict:
        return {
            'file': self.filepath,
            'summary': {
                'total_lines': self.total_lines,
                'total_ips': self.total_ips,
                'unmatched_lines': self.unmatched_lines,
                'unique_ips': self.unique_ips,
            },
            'top_ips': dict(self.top_ip_counts),
            'top_urls': dict(self.top_url_counts),
        }


@dataclass
class LineCollection:
    """Everything gathered from one pass over the lines of a file"""
    ips: List[str] = field(default_factory=list)
    urls: List[Optional[str]] = field(default_factory=list)
    line_count: int = 0
    unmatched: int = 0
