"""
MCP tool implementations.

Tools are organized by domain:
- chords - Single-chord generation, notation parsing, dataset lookup
- progressions - Progression generation, transposition, substitutions,
  curated library and MIDI export
"""

from chuk_mcp_chords.tools.chords import register_chord_tools
from chuk_mcp_chords.tools.progressions import register_progression_tools

__all__ = [
    "register_chord_tools",
    "register_progression_tools",
]
