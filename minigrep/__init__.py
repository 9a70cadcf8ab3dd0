"""
minigrep - search a file for lines containing a query string
"""
from .core import (
    Config,
    Match,
    SearchResult,
    MinigrepError,
    MissingArgument,
    InvalidFlag,
    IoError,
    search,
    search_case_insensitive,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "Match",
    "SearchResult",
    "MinigrepError",
    "MissingArgument",
    "InvalidFlag",
    "IoError",
    "search",
    "search_case_insensitive",
]
