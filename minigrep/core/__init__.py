"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- errors.py: Error taxonomy
- ports.py: Port interfaces (abstractions for external dependencies)
- search.py: Line-scanning search engine
- services.py: Application services (use cases)
"""
from .domain import Config, Match, SearchResult
from .errors import MinigrepError, MissingArgument, InvalidFlag, IoError
from .ports import EnvLookup, FileReader
from .search import iter_lines, search, search_case_insensitive
from .services import ConfigResolver, SearchFileService

__all__ = [
    # Domain models
    "Config",
    "Match",
    "SearchResult",
    # Errors
    "MinigrepError",
    "MissingArgument",
    "InvalidFlag",
    "IoError",
    # Ports
    "EnvLookup",
    "FileReader",
    # Search engine
    "iter_lines",
    "search",
    "search_case_insensitive",
    # Services
    "ConfigResolver",
    "SearchFileService",
]
