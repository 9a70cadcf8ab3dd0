"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: Local filesystem file reader
- mcp/: MCP tool handlers over the core services
"""
from .filesystem import FilesystemReader

__all__ = [
    "FilesystemReader",
]
