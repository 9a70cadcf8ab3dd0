"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional

# Environment lookup: name -> value, or None when the variable is unset
EnvLookup = Callable[[str], Optional[str]]


class FileReader(ABC):
    """Port for reading a whole file into memory"""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Return the full contents of path, raise IoError on failure"""
        pass
