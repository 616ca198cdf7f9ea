#!/usr/bin/env python3
"""
Async Chords MCP Server using chuk-mcp-server

This server provides MCP tools for generating chords and chord progressions
from scale degrees. Progressions are written key-independently ("6m-2m-5-1")
and resolved in any key against a music-theory dataset you can override
per project.

The server provides tools for:
- Generating single chords on a degree, with extensions
- Generating and transposing progressions
- Looking up functional substitutions
- Browsing curated progressions and picking random ones
- Exporting progressions to MIDI files
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chords.constants import DEFAULT_DATASET
from chuk_mcp_chords.theory import TheoryLoader
from chuk_mcp_chords.tools import register_chord_tools, register_progression_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chords")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
THEORY_DIR = Path(os.environ.get("CHUK_CHORDS_THEORY_DIR", BASE_PATH / "theory"))
OUTPUT_DIR = Path(os.environ.get("CHUK_CHORDS_OUTPUT_DIR", BASE_PATH / "output"))
DATASET = os.environ.get("CHUK_CHORDS_DATASET", DEFAULT_DATASET)
THEORY_LIBRARY_PATH = Path(__file__).parent / "theory" / "library"

# Load the dataset once; the engine is immutable after this
theory_loader = TheoryLoader(
    library_path=THEORY_LIBRARY_PATH,
    project_path=THEORY_DIR,
)
engine = theory_loader.create_engine(DATASET)

# Register all tools
chord_tools = register_chord_tools(mcp, engine)
progression_tools = register_progression_tools(mcp, engine, OUTPUT_DIR)

# Export tool functions for direct access
music_generate_chord = chord_tools["music_generate_chord"]
music_parse_notation = chord_tools["music_parse_notation"]
music_list_chord_types = chord_tools["music_list_chord_types"]
music_list_keys = chord_tools["music_list_keys"]
music_random_extensions = chord_tools["music_random_extensions"]

music_generate_progression = progression_tools["music_generate_progression"]
music_transpose_progression = progression_tools["music_transpose_progression"]
music_get_substitutions = progression_tools["music_get_substitutions"]
music_list_progressions = progression_tools["music_list_progressions"]
music_random_progression = progression_tools["music_random_progression"]
music_export_progression_midi = progression_tools["music_export_progression_midi"]

logger.info("CHUK Chords MCP Server initialized")
logger.info(f"  Dataset: {DATASET}")
logger.info(f"  Theory library: {THEORY_LIBRARY_PATH}")
logger.info(f"  Project theory dir: {THEORY_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
