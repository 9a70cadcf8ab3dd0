"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
import os
from typing import Optional, Sequence

from .domain import Config, SearchResult
from .errors import InvalidFlag, MissingArgument
from .ports import EnvLookup, FileReader
from .search import search, search_case_insensitive

logger = logging.getLogger(__name__)

CASE_INSENSITIVE_VAR = "CASE_INSENSITIVE"

# Third positional argument -> case_sensitive
CASE_FLAGS = {"-i": False, "-s": True}


class ConfigResolver:
    """Use case: Turn raw process arguments into a validated Config"""

    def __init__(self, env: Optional[EnvLookup] = None):
        self.env = env if env is not None else os.environ.get

    def execute(self, args: Sequence[str]) -> Config:
        """
        Resolve `<query> <filename> [-i|-s]` into a Config.

        Args exclude the program name. Without a flag, the search is
        case-sensitive unless CASE_INSENSITIVE is set to any value.

        Raises:
            MissingArgument: fewer than 2 arguments
            InvalidFlag: third argument is not -i or -s
        """
        if len(args) < 2:
            if not args:
                raise MissingArgument("didn't get a query string")
            raise MissingArgument("didn't get a file name")

        query, filename = args[0], args[1]
        flag = args[2] if len(args) > 2 else ""

        if len(args) > 3:
            logger.debug("Ignoring extra arguments: %s", list(args[3:]))

        if flag:
            if flag not in CASE_FLAGS:
                raise InvalidFlag(flag)
            case_sensitive = CASE_FLAGS[flag]
        else:
            case_sensitive = self.env(CASE_INSENSITIVE_VAR) is None

        config = Config(query=query, filename=filename, case_sensitive=case_sensitive)
        logger.debug("Resolved config: %s", config)
        return config


class SearchFileService:
    """Use case: Read a file and search it for the configured query"""

    def __init__(self, reader: FileReader):
        self.reader = reader

    def execute(self, config: Config) -> SearchResult:
        """
        Read the whole file, then scan it line by line.

        Raises IoError (from the reader) if the file cannot be read.
        """
        contents = self.reader.read_text(config.filename)

        if config.case_sensitive:
            matches = search(config.query, contents)
        else:
            matches = search_case_insensitive(config.query, contents)

        logger.debug(
            "Searched %s for %r (case_sensitive=%s): %d matches",
            config.filename, config.query, config.case_sensitive, len(matches)
        )
        return SearchResult(config=config, matches=matches)
