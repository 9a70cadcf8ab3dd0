"""
Filesystem Reader Adapter

Implements FileReader port using the local filesystem.
"""
import logging
import os
from typing import Optional

from ..core.errors import IoError
from ..core.ports import FileReader

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = os.getenv("MINIGREP_ENCODING", "utf-8")


class FilesystemReader(FileReader):
    """Reads whole files from disk as text"""

    def __init__(self, encoding: Optional[str] = None):
        self.encoding = encoding or DEFAULT_ENCODING

    def read_text(self, path: str) -> str:
        """Return full file contents, wrapping OS and decode errors in IoError.

        Newlines are passed through untranslated, so a lone "\\r" stays inside
        its line.
        """
        try:
            with open(path, 'r', encoding=self.encoding, newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            raise IoError(str(path), e) from e
