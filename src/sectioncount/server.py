"""MCP Server exposing section parsing and character counts."""

import asyncio
import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from . import config
from .tools.count_sections import count_sections as do_count_sections
from .tools.get_section import get_section as do_get_section

logger = logging.getLogger(__name__)

_SOURCE_PROPERTIES = {
    "text": {
        "type": "string",
        "description": "Document text, e.g. [\"title\"]\"content\"",
    },
    "path": {
        "type": "string",
        "description": "Path to a document file (used when text is not given)",
    },
}


# Create MCP server
server = Server("sectioncount")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="count_sections",
            description="""Parse a bracketed section document and count each section's characters.

Sections look like ["title"] followed by one or more quoted content strings.
Returns every section in title order with its content (newlines removed)
and the number of Unicode characters in it.

Provide either inline text or a file path.""",
            inputSchema={
                "type": "object",
                "properties": dict(_SOURCE_PROPERTIES),
            },
        ),
        Tool(
            name="get_section",
            description="""Get the content of a single section by its exact title.

Returns the raw content and its character count. If the title is missing,
the available titles are listed.""",
            inputSchema={
                "type": "object",
                "properties": {
                    "title": {
                        "type": "string",
                        "description": "Section title",
                    },
                    **_SOURCE_PROPERTIES,
                },
                "required": ["title"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "count_sections":
            result = do_count_sections(
                text=arguments.get("text"),
                path=arguments.get("path"),
            )
        elif name == "get_section":
            result = do_get_section(
                title=arguments["title"],
                text=arguments.get("text"),
                path=arguments.get("path"),
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2, ensure_ascii=False))]

    except Exception as e:
        logger.exception("Tool %s failed", name)
        error_result = {"error": str(e)}
        return [TextContent(type="text", text=json.dumps(error_result, indent=2))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def main():
    """Entry point for the MCP server."""
    config.configure_logging()
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
