#!/usr/bin/env python3
"""
Command-line client for a running FunRec MCP server.

  python funrec_cli.py activities "Long Beach" 33.77 -118.19
  python funrec_cli.py search "Cerritos"
"""

import argparse
import asyncio
import json

from fastmcp.client import Client
from fastmcp.client.transports import StreamableHttpTransport
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import Config

console = Console()


def _transport(base_url):
    headers = {}
    if Config.SERVICE_API_KEY:
        headers["Authorization"] = f"Bearer {Config.SERVICE_API_KEY}"
    return StreamableHttpTransport(url=f"{base_url}/mcp", headers=headers)


def parse_tool_result(result_obj):
    """Extract the {text, data, ui} payload from a CallToolResult."""
    structured = getattr(result_obj, "structured_content", None)
    if structured:
        if set(structured) == {"result"}:
            structured = structured["result"]
        if isinstance(structured, str):
            return json.loads(structured)
        return structured
    content = getattr(result_obj, "content", None) or []
    if content and hasattr(content[0], "text"):
        return json.loads(content[0].text)
    raise ValueError(f"Unexpected tool result structure: {result_obj}")


async def call_tool(base_url, tool_name, args):
    async with Client(_transport(base_url)) as client:
        result_obj = await client.call_tool(tool_name, args)
        return parse_tool_result(result_obj)


def render_places_table(records, title="Activities"):
    """Build a rich table of place records."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="green")
    table.add_column("Address")
    for r in records:
        table.add_row(r.get("name", ""), r.get("category", ""), r.get("address", ""))
    return table


def print_result(result):
    data = result.get("data") or {}
    records = data.get("places", data.get("results", []))
    style = "red" if result.get("data") is None else "green"
    console.print(Panel(result.get("text", ""), border_style=style))
    if records:
        console.print(render_places_table(records))


async def _amain(args):
    if args.command == "activities":
        tool_args = {
            "location_name": args.location,
            "latitude": args.latitude,
            "longitude": args.longitude,
        }
        result = await call_tool(args.url, "get-FunRec", tool_args)
    else:
        result = await call_tool(args.url, "search-activities", {"location": args.location})
    print_result(result)


def main():
    parser = argparse.ArgumentParser(description="FunRec client")
    parser.add_argument("--url", default=Config.MCP_SERVER_URL, help="Server base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    activities = sub.add_parser("activities", help="Activities around coordinates")
    activities.add_argument("location")
    activities.add_argument("latitude", type=float)
    activities.add_argument("longitude", type=float)

    search = sub.add_parser("search", help="Activities matching a location name")
    search.add_argument("location")

    args = parser.parse_args()
    try:
        asyncio.run(_amain(args))
    except KeyboardInterrupt:
        console.print("\n[bold yellow]Cancelled.[/bold yellow]")


if __name__ == "__main__":
    main()
