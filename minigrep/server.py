"""
minigrep MCP Server

MCP delivery layer - wraps the search service as an MCP tool.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import MCPHandlers
from .cli import configure_logging
from .container import Container

logger = logging.getLogger(__name__)

# Get host/port from env or default
HTTP_PORT = int(os.getenv("MINIGREP_HTTP_PORT", "6661"))
HTTP_HOST = os.getenv("MINIGREP_HTTP_HOST", "127.0.0.1")

# Initialize MCP server with HTTP config
mcp = FastMCP("minigrep", host=HTTP_HOST, port=HTTP_PORT)

handlers = MCPHandlers(Container())


@mcp.tool()
async def search_file(
    query: str,
    filename: str,
    case_sensitive: Optional[bool] = None
) -> dict:
    """
    Find every line of a text file that contains query (literal substring).

    Args:
        query: Text to look for. No regex; the empty string matches every line.
        filename: Path of the file to search
        case_sensitive: True for exact case, False to ignore case.
            Omit to use the server default (case-insensitive if CASE_INSENSITIVE is set).

    Returns:
        Dictionary with matches (line_number + original line) and match_count

    Example:
        search_file("duct", "poem.txt")
        → {matches: [{line_number: 2, line: "safe, fast, productive."}], match_count: 1}
    """
    return await handlers.search_file(
        query=query,
        filename=filename,
        case_sensitive=case_sensitive
    )


def main():
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="minigrep: search text files for a query string over MCP."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=HTTP_HOST,
        help=f"Host to bind to for HTTP transport (default: {HTTP_HOST}, or set MINIGREP_HTTP_HOST)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=HTTP_PORT,
        help=f"Port to bind to for HTTP transport (default: {HTTP_PORT}, or set MINIGREP_HTTP_PORT)"
    )
    args = parser.parse_args()

    configure_logging()

    # Run the server
    if args.transport == "streamable-http":
        mcp.settings.host = args.host
        mcp.settings.port = args.port
        logger.info("Starting minigrep on http://%s:%s", args.host, args.port)
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
