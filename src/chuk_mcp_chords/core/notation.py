"""
Chord notation - the compact strings progressions are written in.

A progression is hyphen-separated chord tokens: "1 - 5 - 6m - 4".
Each token is a degree (optional accidental + digits) followed by an
optional chord type: "6m", "b2dim7", "4M7", "7ø".
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_chords.constants import (
    CHORD_TYPE_ALIASES,
    CHORD_TYPE_GLYPHS,
    DEFAULT_CHORD_TYPE,
    DEGREES_PER_SCALE,
)
from chuk_mcp_chords.core.errors import InvalidDegreeFormatError, InvalidNotationError
from chuk_mcp_chords.models.chord import ChordRef

DEGREE_PATTERN = re.compile(r"^([b#]?)([0-9]+)([mM]?)$")
NOTATION_PATTERN = re.compile(r"^([b#]?[0-9]+)([a-zA-Z0-9+#øΔ°]+)?$")
DEGREE_PREFIX_PATTERN = re.compile(r"^([b#]?[0-9]+)")
PROGRESSION_SEPARATOR = re.compile(r"\s*-\s*")


def normalize_chord_type(token: str) -> str:
    """
    Map glyphs and aliases to canonical chord-type keys.

    '°' and 'o' become 'dim', 'ø' and 'm7b5' become 'hdim', '+' becomes
    'aug'. Anything else is assumed canonical and returned unchanged.
    """
    return CHORD_TYPE_ALIASES.get(token, token)


def display_chord_type_symbol(type_key: str) -> str:
    """Glyph for a canonical chord type in a rendered symbol ('dim7' -> '°7')."""
    return CHORD_TYPE_GLYPHS.get(type_key, type_key)


@dataclass(frozen=True)
class ParsedDegree:
    """
    A degree token split into its parts.

    number is 1-based and may exceed 7 (compound degrees).
    alteration is semitones: -1 = flat, +1 = sharp, 0 = natural.
    quality is the optional 'm'/'M' suffix, kept for display only.

    Examples:
        "1"  -> ParsedDegree(1, 0, "")
        "b6" -> ParsedDegree(6, -1, "")
        "2m" -> ParsedDegree(2, 0, "m")
    """

    number: int
    alteration: int = 0
    quality: str = ""

    @property
    def scale_index(self) -> int:
        """
        Index into a 7-degree scale formula.

        Degrees above 7 wrap by octave equivalence: 8 is 1, 9 is 2.
        """
        return (self.number - 1) % DEGREES_PER_SCALE

    def __str__(self) -> str:
        accidental = {-1: "b", 1: "#"}.get(self.alteration, "")
        return f"{accidental}{self.number}{self.quality}"


def parse_degree(degree: str) -> ParsedDegree:
    """
    Parse a degree token like '1', 'b6', '#4', '2m'.

    Raises:
        InvalidDegreeFormatError: If the token doesn't match, or names degree 0
    """
    match = DEGREE_PATTERN.match(degree)
    if not match:
        raise InvalidDegreeFormatError(degree)

    accidental, digits, quality = match.groups()
    number = int(digits)
    if number < 1:
        raise InvalidDegreeFormatError(degree)

    alteration = {"b": -1, "#": 1}.get(accidental, 0)
    return ParsedDegree(number, alteration, quality)


def parse_chord_notation(notation: str) -> ChordRef:
    """
    Split a compact chord token into degree and normalized type.

    "6m" -> (6, m), "5" -> (5, M), "b2dim7" -> (b2, dim7), "7°" -> (7, dim)

    Raises:
        InvalidNotationError: If the token doesn't start with a degree
    """
    match = NOTATION_PATTERN.match(notation.strip())
    if not match:
        raise InvalidNotationError(notation)

    degree, raw_type = match.groups()
    return ChordRef(degree=degree, type=normalize_chord_type(raw_type or DEFAULT_CHORD_TYPE))


def split_progression(notations: str) -> list[str]:
    """Split 'a - b-c  -  d' into trimmed tokens."""
    return [token.strip() for token in PROGRESSION_SEPARATOR.split(notations.strip())]


def degree_prefix(token: str) -> str:
    """Leading degree of a chord token ('6m' -> '6'); the token itself if there is none."""
    match = DEGREE_PREFIX_PATTERN.match(token.strip())
    return match.group(1) if match else token.strip()
