"""
Progression library - curated progressions, degree labels, random picks.
"""

from chuk_mcp_chords.progressions.library import (
    CURATED_PROGRESSIONS,
    DEMO_KEYS,
    ProgressionPick,
    degree_labels,
    format_degree_symbol,
    group_by_degree,
    random_progression,
)

__all__ = [
    "CURATED_PROGRESSIONS",
    "DEMO_KEYS",
    "ProgressionPick",
    "degree_labels",
    "format_degree_symbol",
    "group_by_degree",
    "random_progression",
]
