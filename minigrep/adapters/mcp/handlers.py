"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any, Optional

from ...container import Container
from ...core import Config, MinigrepError, SearchResult


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def search_file(
        self,
        query: str,
        filename: str,
        case_sensitive: Optional[bool] = None
    ) -> dict[str, Any]:
        """Search a file for query, return matches + count.

        When case_sensitive is None the CASE_INSENSITIVE environment
        default applies, same as the CLI without a flag.
        """
        try:
            if case_sensitive is None:
                config = self.container.resolve_config.execute([query, filename])
            else:
                config = Config(query=query, filename=filename, case_sensitive=case_sensitive)

            result = await asyncio.to_thread(self.container.search_file.execute, config)

            return self._format_result(result)

        except MinigrepError as e:
            return {
                "success": False,
                "error": f"Search failed: {str(e)}"
            }

    @staticmethod
    def _format_result(result: SearchResult) -> dict[str, Any]:
        config = result.config
        return {
            "success": True,
            "query": config.query,
            "filename": config.filename,
            "case_sensitive": config.case_sensitive,
            "matches": [
                {"line_number": match.line_number, "line": match.line}
                for match in result.matches
            ],
            "match_count": result.match_count,
        }
