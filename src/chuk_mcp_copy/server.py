#!/usr/bin/env python3
"""
Entry point for the CHUK Copy MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Copy MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--tokens-dir",
        help="Directory holding the 13 token files (overrides COPY_TOKENS_DIR)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def configure_tokens_dir(tokens_dir: str | None) -> None:
    """Export the token directory so the server module picks it up on import."""
    if tokens_dir:
        os.environ["COPY_TOKENS_DIR"] = str(Path(tokens_dir).resolve())


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    configure_tokens_dir(args.tokens_dir)

    # The server module reads COPY_TOKENS_DIR at import time
    from chuk_mcp_copy.async_server import TOKENS_DIR, mcp

    logger.info(f"Serving token files from {TOKENS_DIR}")

    if args.transport == "stdio":
        logger.info("Starting CHUK Copy MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Copy MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
