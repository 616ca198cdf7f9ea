"""
Chord tools - MCP tools for single-chord generation and lookup.

Tools for generating a chord on a degree, parsing chord notation,
and discovering the keys, chord types and extensions a dataset defines.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.constants import DEFAULT_CHORD_TYPE, SuccessMessages
from chuk_mcp_chords.core import ChordEngine, ChordEngineError

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_chord_tools(mcp: ChukMCPServer, engine: ChordEngine) -> dict[str, Any]:
    """
    Register chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_generate_chord(
        key: str,
        degree: str,
        chord_type: str = DEFAULT_CHORD_TYPE,
        extensions: list[str] | None = None,
    ) -> str:
        """
        Generate a chord on a scale degree of a key.

        Args:
            key: Key name (e.g., "C", "Eb", "F#")
            degree: Scale degree with optional accidental (e.g., "1", "b6", "#4")
            chord_type: Chord type or glyph (e.g., "M", "m", "m7", "°", "ø", "+")
            extensions: Extension keys to add (e.g., ["7", "9"]); ones the
                chord type doesn't define are ignored

        Returns:
            JSON string with the chord's symbol, root, notes and intervals

        Example:
            music_generate_chord(key="C", degree="6", chord_type="m", extensions=["7"])
        """
        try:
            chord = engine.generate_chord(key, degree, chord_type, extensions or [])
            return json.dumps(
                {
                    "status": "success",
                    "chord": chord.to_dict(),
                    "message": SuccessMessages.CHORD_GENERATED.format(
                        symbol=chord.symbol, key=key
                    ),
                }
            )
        except ChordEngineError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_generate_chord"] = music_generate_chord

    @mcp.tool  # type: ignore[arg-type]
    async def music_parse_notation(notation: str) -> str:
        """
        Split a compact chord token into degree and chord type.

        Args:
            notation: Chord token (e.g., "6m", "4M7", "b2dim7", "7°")

        Returns:
            JSON string with degree and normalized type

        Example:
            music_parse_notation(notation="7ø")
        """
        try:
            ref = engine.parse_chord_notation(notation)
            return json.dumps({"status": "success", "degree": ref.degree, "type": ref.type})
        except ChordEngineError as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_parse_notation"] = music_parse_notation

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_chord_types() -> str:
        """
        List chord types with their formulas and extensions.

        Returns:
            JSON string with chord types

        Example:
            music_list_chord_types()
        """
        try:
            chord_types = [
                {
                    "type": name,
                    "symbol": engine.display_chord_type_symbol(name),
                    "formula": definition.formula,
                    "extensions": list(definition.extensions),
                }
                for name, definition in engine.dataset.chord_types.items()
            ]
            return json.dumps(
                {"status": "success", "chord_types": chord_types, "count": len(chord_types)}
            )
        except Exception as e:
            logger.exception("Failed to list chord types")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_chord_types"] = music_list_chord_types

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_keys() -> str:
        """
        List the keys chords can be generated in.

        Returns:
            JSON string with key names and tonic semitones

        Example:
            music_list_keys()
        """
        keys = [
            {"key": name, "semitone": semitone}
            for name, semitone in engine.dataset.key_signatures.items()
        ]
        return json.dumps({"status": "success", "keys": keys, "count": len(keys)})

    tools["music_list_keys"] = music_list_keys

    @mcp.tool  # type: ignore[arg-type]
    async def music_random_extensions(chord_type: str, count: int = 2) -> str:
        """
        Pick random extensions for a chord type.

        Useful for colouring a progression. Never returns duplicates or
        more extensions than the type defines.

        Args:
            chord_type: Chord type or glyph
            count: Maximum number of extensions

        Returns:
            JSON string with the chosen extension keys

        Example:
            music_random_extensions(chord_type="7", count=2)
        """
        extensions = engine.get_random_extensions(chord_type, count)
        return json.dumps({"status": "success", "chord_type": chord_type, "extensions": extensions})

    tools["music_random_extensions"] = music_random_extensions

    return tools
