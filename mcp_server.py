#!/usr/bin/env python3
"""
FunRec MCP Server (streamable HTTP transport).

Recommends fun activities around a location:
- Configuration centralized in config.py
- Places lookup, mapping and UI builders in utils/ package
- Tools, widget and service metadata in tools/ package

ENV:
  GEOAPIFY_API_KEY -> Geoapify Places API
  PORT             -> listening port (default 2022)
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from config import Config
from tools.tool_registry import register_all_tools
from utils.http_client import close_http_client

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
log_file = Path(__file__).parent / Config.LOG_DIR / "mcp_server.log"
daemon_mode = False


def setup_logging(daemon):
    """File log always; stderr too unless running as a daemon."""
    log_file.parent.mkdir(exist_ok=True)
    handlers = [logging.FileHandler(log_file)]
    if not daemon:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=logging.INFO, handlers=handlers)
    logging.getLogger("mcp.tools").setLevel(logging.INFO)


app = FastMCP("funrec", host=Config.SERVER_HOST, port=Config.SERVER_PORT)
register_all_tools(app)


async def run_server():
    """Run the FunRec MCP server until interrupted."""
    host, port = app.settings.host, app.settings.port
    if not daemon_mode:
        print(f"FunRec Service starting on http://{host}:{port}")
        print(f"Logs: {log_file}")
    logging.info(f"FunRec Service starting on {host}:{port}")
    logging.info(f"Daemon mode: {daemon_mode}")

    if not Config.has_geoapify_key():
        logging.warning("GEOAPIFY_API_KEY is not set; activity lookups will fail")
    if not daemon_mode:
        print(f"Tools loaded: {len(await app.list_tools())}")
        print(f"Places API: {'configured' if Config.has_geoapify_key() else 'Not configured'}")

    try:
        logging.info(
            "Server running in daemon mode" if daemon_mode else "Server running"
        )
        await app.run_streamable_http_async()
    except KeyboardInterrupt:
        logging.info("Server shutting down...")
        if not daemon_mode:
            print("\nServer shutting down...")
    finally:
        await close_http_client()


def main():
    parser = argparse.ArgumentParser(description="FunRec MCP Server")
    parser.add_argument(
        "--daemon", action="store_true", help="Run in daemon mode (no UI)"
    )
    parser.add_argument("--port", type=int, help="Override the listening port")
    args = parser.parse_args()
    global daemon_mode
    daemon_mode = args.daemon
    setup_logging(daemon_mode)
    if args.port:
        app.settings.port = args.port
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
