"""Tests for MCP tool dispatch."""

import asyncio
import json

from sectioncount.server import call_tool, list_tools


def _call(name, arguments):
    contents = asyncio.run(call_tool(name, arguments))
    assert len(contents) == 1
    return json.loads(contents[0].text)


class TestListTools:
    def test_tool_names(self):
        tools = asyncio.run(list_tools())
        assert [t.name for t in tools] == ["count_sections", "get_section"]

    def test_get_section_requires_title(self):
        tools = {t.name: t for t in asyncio.run(list_tools())}
        assert tools["get_section"].inputSchema["required"] == ["title"]


class TestCallTool:
    def test_count_sections(self):
        result = _call("count_sections", {"text": '["b"]"y"["a"]"xx"'})
        assert [s["title"] for s in result["sections"]] == ["a", "b"]
        assert result["total_count"] == 3

    def test_get_section(self):
        result = _call("get_section", {"title": "a", "text": '["a"]"x"'})
        assert result["content"] == "x"

    def test_parse_error_is_reported(self):
        result = _call("count_sections", {"text": "[bad]"})
        assert "unexpected char b" in result["error"]

    def test_unknown_tool(self):
        result = _call("nope", {})
        assert result["error"] == "Unknown tool: nope"

    def test_missing_argument(self):
        result = _call("get_section", {"text": '["a"]"x"'})
        assert "error" in result
