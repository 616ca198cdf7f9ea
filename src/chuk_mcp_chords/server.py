#!/usr/bin/env python3
"""
Entry point for the CHUK Chords MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).

The dataset and directories can be picked on the command line or with
environment variables; the command line wins:

    CHUK_CHORDS_DATASET      dataset name (default: "default")
    CHUK_CHORDS_THEORY_DIR   project dataset directory (default: ./theory)
    CHUK_CHORDS_OUTPUT_DIR   MIDI output directory (default: ./output)
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ENV_DATASET = "CHUK_CHORDS_DATASET"
ENV_THEORY_DIR = "CHUK_CHORDS_THEORY_DIR"
ENV_OUTPUT_DIR = "CHUK_CHORDS_OUTPUT_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(description="CHUK Chords MCP Server")
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
        "--dataset",
        help=f"Music-theory dataset to load (env: {ENV_DATASET})",
    )
    parser.add_argument(
        "--theory-dir",
        help=f"Directory with project datasets, overriding the library (env: {ENV_THEORY_DIR})",
    )
    parser.add_argument(
        "--output-dir",
        help=f"Directory MIDI exports are written to (env: {ENV_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def apply_settings(args: argparse.Namespace) -> None:
    """Export command-line choices for async_server, which reads them at import."""
    for value, env_name in (
        (args.dataset, ENV_DATASET),
        (args.theory_dir, ENV_THEORY_DIR),
        (args.output_dir, ENV_OUTPUT_DIR),
    ):
        if value:
            os.environ[env_name] = value


def main() -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    apply_settings(args)

    # Import after argument parsing so settings and --debug cover dataset loading
    from chuk_mcp_chords.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Chords MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Chords MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
