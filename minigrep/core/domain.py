"""
Domain Models - Pure business entities

No external dependencies. These represent the core search concepts.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Config:
    """Resolved run parameters for a single search"""
    query: str
    filename: str
    case_sensitive: bool = True


@dataclass(frozen=True)
class Match:
    """A matching line and its 1-based line number"""
    line_number: int
    line: str  # original text, never the lowercased copy


@dataclass
class SearchResult:
    """Results from searching within a file"""
    config: Config
    matches: list[Match] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matches)
