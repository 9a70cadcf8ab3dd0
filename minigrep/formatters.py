"""
Console formatters for search results

Used by the CLI; kept separate so the text layout can be tested on its own.
"""
from .core import Match, SearchResult

EMPTY_NOTICE = "the file is empty"


def format_match(match: Match) -> str:
    """Format one match as: "<line>" at line <n>"""
    return f'"{match.line}" at line {match.line_number}'


def format_search_result(result: SearchResult) -> str:
    """Format a SearchResult for the console.

    Example output:
        "safe, fast, productive." at line 2
        has searched 1 lines matched

    The summary count is the number of matching lines, not the number of
    lines scanned. With no matches only EMPTY_NOTICE is printed.
    """
    if not result.matches:
        return EMPTY_NOTICE

    lines = [format_match(match) for match in result.matches]
    lines.append(f"has searched {result.match_count} lines matched")

    return "\n".join(lines)
