"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from typing import Optional

from .adapters import FilesystemReader
from .core import ConfigResolver, EnvLookup, SearchFileService


class Container:
    """Dependency injection container for the application"""

    def __init__(self, env: Optional[EnvLookup] = None, encoding: Optional[str] = None):
        # Adapters (infrastructure)
        self.reader = FilesystemReader(encoding)

        # Services (use cases)
        self.resolve_config = ConfigResolver(env=env)
        self.search_file = SearchFileService(reader=self.reader)
