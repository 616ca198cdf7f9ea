"""
Interval formulas - token strings to semitone offsets.

Chord formulas are written in interval notation ("1,b3,5,b7"). This module
turns them into semitone offsets from the root. Offsets are not reduced:
"9" is 14, so voicings can place extensions above the octave. Pitch-class
arithmetic reduces modulo 12 at the point of use.
"""

from __future__ import annotations

import logging

from chuk_mcp_chords.constants import INTERVAL_SEMITONES, SEMITONES_PER_OCTAVE

logger = logging.getLogger(__name__)


def interval_to_semitones(token: str) -> int:
    """
    Convert a single interval token to semitones.

    Unknown tokens resolve to 0 (the root) with a warning rather than
    failing the whole chord.
    """
    token = token.strip()
    semitones = INTERVAL_SEMITONES.get(token)
    if semitones is None:
        logger.warning(f"Unknown interval: {token!r}")
        return 0
    return semitones


def formula_to_semitones(formula: str) -> list[int]:
    """
    Convert a comma-separated interval formula to semitone offsets.

    Args:
        formula: Interval tokens, e.g. "1,3,5,b7"

    Returns:
        Offsets in formula order (not sorted), e.g. [0, 4, 7, 10]
    """
    return [interval_to_semitones(token) for token in formula.split(",")]


def pitch_class(semitones: int) -> int:
    """Reduce to 0-11. Python's % is already non-negative for a positive modulus."""
    return semitones % SEMITONES_PER_OCTAVE
