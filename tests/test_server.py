"""Tests for MCP server wiring.

An in-memory FastMCP client checks that every tool and resource is exposed
and that reads go through to the injected catalog.
"""

import json

from fastmcp import Client

from library_desk.config import LibraryConfig
from library_desk.server import build_server


def make_server(catalog):
    return build_server(catalog, LibraryConfig(server_name="test-library-desk"))


async def test_tools_are_registered(seeded_catalog):
    async with Client(make_server(seeded_catalog)) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools} == {
        "register_book",
        "register_member",
        "issue_book",
        "return_book",
    }


async def test_resources_are_registered(seeded_catalog):
    async with Client(make_server(seeded_catalog)) as client:
        resources = await client.list_resources()
        templates = await client.list_resource_templates()

    assert {str(resource.uri) for resource in resources} == {
        "library://books/list",
        "library://books/available",
        "library://books/issued",
        "library://members/list",
        "library://stats",
    }
    assert {template.uriTemplate for template in templates} == {
        "library://books/{book_id}",
        "library://members/{member_id}",
    }


async def test_stats_resource_reads_injected_catalog(seeded_catalog):
    seeded_catalog.issue_book("M001", "B001")

    async with Client(make_server(seeded_catalog)) as client:
        contents = await client.read_resource("library://stats")

    stats = json.loads(contents[0].text)
    assert stats["library_name"] == "Test Library"
    assert stats["issued"] == 1
    assert stats["total_members"] == 1
