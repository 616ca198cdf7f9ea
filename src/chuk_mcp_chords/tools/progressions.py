"""
Progression tools - MCP tools for progressions.

Tools for generating and transposing progressions, looking up
substitutions, browsing the curated library and exporting to MIDI.
"""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_chords.compiler import progression_to_midi
from chuk_mcp_chords.constants import SuccessMessages
from chuk_mcp_chords.core import ChordEngine, ChordEngineError
from chuk_mcp_chords.progressions import (
    CURATED_PROGRESSIONS,
    degree_labels,
    group_by_degree,
    random_progression,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(
    mcp: ChukMCPServer,
    engine: ChordEngine,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The chord engine
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_generate_progression(key: str, notation: str) -> str:
        """
        Generate a chord progression in a key.

        Chords are written as scale degrees with an optional type,
        separated by hyphens. Any bad chord fails the whole request.

        Args:
            key: Key name (e.g., "C", "Eb", "F#")
            notation: Progression (e.g., "1 - 5 - 6m - 4", "2m7-5-1M7")

        Returns:
            JSON string with the generated chords in order

        Example:
            music_generate_progression(key="G", notation="1-5-6m-4")
        """
        try:
            chords = engine.generate_progression(key, notation)
            return json.dumps(
                {
                    "status": "success",
                    "key": key,
                    "symbols": [c.symbol for c in chords],
                    "chords": [c.to_dict() for c in chords],
                    "message": SuccessMessages.PROGRESSION_GENERATED.format(
                        count=len(chords), key=key
                    ),
                }
            )
        except ChordEngineError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to generate progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_generate_progression"] = music_generate_progression

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_progression(notation: str, from_key: str, to_key: str) -> str:
        """
        Transpose a progression from one key to another.

        Chords are regenerated from their scale degrees, so every chord
        keeps its shape and only the roots move.

        Args:
            notation: Progression (e.g., "6m-2m-5-1")
            from_key: Original key
            to_key: Target key

        Returns:
            JSON string with original and transposed symbols

        Example:
            music_transpose_progression(notation="1-4-5-1", from_key="C", to_key="Eb")
        """
        try:
            original = engine.generate_progression(from_key, notation)
            transposed = engine.transpose_progression(original, from_key, to_key)
            return json.dumps(
                {
                    "status": "success",
                    "from_key": from_key,
                    "to_key": to_key,
                    "original": [c.symbol for c in original],
                    "transposed": [c.symbol for c in transposed],
                    "chords": [c.to_dict() for c in transposed],
                    "message": SuccessMessages.PROGRESSION_TRANSPOSED.format(
                        count=len(transposed), from_key=from_key, to_key=to_key
                    ),
                }
            )
        except ChordEngineError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to transpose progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose_progression"] = music_transpose_progression

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_substitutions(degree: str) -> str:
        """
        Look up substitute chords for a progression token.

        Args:
            degree: Token as written in progressions (e.g., "1", "6m", "5")

        Returns:
            JSON string with the harmonic function and substitutes

        Example:
            music_get_substitutions(degree="4")
        """
        substitution = engine.get_substitutions(degree)
        if substitution is None:
            return json.dumps(
                {"status": "error", "message": f"No substitutions found for: {degree}"}
            )
        return json.dumps(
            {
                "status": "success",
                "degree": degree,
                "function": substitution.function,
                "substitutions": substitution.substitutions,
            }
        )

    tools["music_get_substitutions"] = music_get_substitutions

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_progressions() -> str:
        """
        List the curated progressions, grouped by starting degree.

        Returns:
            JSON string with progressions and their degree labels

        Example:
            music_list_progressions()
        """
        return json.dumps(
            {
                "status": "success",
                "progressions": [
                    {"notation": p, "degrees": degree_labels(p)} for p in CURATED_PROGRESSIONS
                ],
                "by_degree": group_by_degree(CURATED_PROGRESSIONS),
                "count": len(CURATED_PROGRESSIONS),
            }
        )

    tools["music_list_progressions"] = music_list_progressions

    @mcp.tool  # type: ignore[arg-type]
    async def music_random_progression(seed: int | None = None) -> str:
        """
        Pick a random curated progression in a random key.

        Args:
            seed: Optional seed for a reproducible pick

        Returns:
            JSON string with key, notation, degree labels and chords

        Example:
            music_random_progression(seed=42)
        """
        try:
            pick = random_progression(engine, random.Random(seed))
            return json.dumps(
                {
                    "status": "success",
                    "key": pick.key,
                    "notation": pick.notation,
                    "labels": pick.labels(),
                    "symbols": [c.symbol for c in pick.chords],
                    "chords": [c.to_dict() for c in pick.chords],
                }
            )
        except ChordEngineError as e:
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_random_progression"] = music_random_progression

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_progression_midi(
        key: str,
        notation: str,
        output_name: str | None = None,
        tempo: int = 120,
    ) -> str:
        """
        Export a progression as a MIDI file of block chords.

        Each chord is held for one 4/4 bar.

        Args:
            key: Key name
            notation: Progression (e.g., "1-5-6m-4")
            output_name: Optional output filename (without .mid extension)
            tempo: Tempo in BPM

        Returns:
            JSON string with the file path

        Example:
            music_export_progression_midi(key="A", notation="6m-4-1-5", output_name="pop")
        """
        try:
            chords = engine.generate_progression(key, notation)
            midi_file = progression_to_midi(chords, engine.dataset, tempo_bpm=tempo)

            filename = f"{output_name or f'progression_{key}'}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            midi_file.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "symbols": [c.symbol for c in chords],
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        count=len(chords), path=output_path
                    ),
                }
            )
        except ChordEngineError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export progression MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_progression_midi"] = music_export_progression_midi

    return tools
