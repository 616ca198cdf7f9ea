"""
Errors raised by the chord engine and the dataset loader.

All engine errors are ValueErrors so callers that only care about
"bad input" can catch the base type.
"""

from __future__ import annotations

from chuk_mcp_chords.constants import ErrorMessages


class ChordEngineError(ValueError):
    """Base class for caller-visible chord engine failures."""


class UnknownKeyError(ChordEngineError):
    """The key is not present in the dataset's key signatures."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(ErrorMessages.UNKNOWN_KEY.format(key=key))


class InvalidDegreeFormatError(ChordEngineError):
    """The degree is not an accidental + digits [+ quality] token."""

    def __init__(self, degree: str):
        self.degree = degree
        super().__init__(ErrorMessages.INVALID_DEGREE.format(degree=degree))


class UnknownChordTypeError(ChordEngineError):
    """The normalized chord type is not defined in the dataset."""

    def __init__(self, chord_type: str):
        self.chord_type = chord_type
        super().__init__(ErrorMessages.UNKNOWN_CHORD_TYPE.format(chord_type=chord_type))


class InvalidNotationError(ChordEngineError):
    """A compact chord token could not be split into degree and type."""

    def __init__(self, notation: str):
        self.notation = notation
        super().__init__(ErrorMessages.INVALID_NOTATION.format(notation=notation))


class DatasetNotFoundError(LookupError):
    """No dataset with the requested name exists in project or library."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(ErrorMessages.DATASET_NOT_FOUND.format(name=name))


class DatasetLoadError(ValueError):
    """A dataset file exists but could not be parsed or validated."""

    def __init__(self, path: object, reason: str):
        self.path = path
        super().__init__(ErrorMessages.DATASET_INVALID.format(path=path, reason=reason))
