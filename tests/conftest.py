"""
Pytest configuration and shared fixtures.
"""

import copy
import tempfile
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_chords.core import ChordEngine
from chuk_mcp_chords.models import MusicTheoryDataset
from chuk_mcp_chords.theory import TheoryLoader

MINIMAL_DOCUMENT: dict[str, Any] = {
    "chordTypes": {
        "M": {"formula": "1,3,5", "extensions": {"7": "b7", "9": "9"}},
        "m": {"formula": "1,b3,5", "extensions": {"7": "b7"}},
        "dim": {"formula": "1,b3,b5", "extensions": {}},
    },
    "scaleFormula": {"major": [0, 2, 4, 5, 7, 9, 11]},
    "keySignatures": {"C": 0, "G": 7},
    "noteNames": ["C", "C#", "D", "Eb", "E", "F", "F#", "G", "Ab", "A", "Bb", "B"],
    "functionalGroups": {
        "tonic": {"substitutions": {"1": ["6m"]}},
    },
}


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def minimal_document() -> dict[str, Any]:
    """A small, valid camelCase dataset document (fresh copy per test)."""
    return copy.deepcopy(MINIMAL_DOCUMENT)


@pytest.fixture
def dataset() -> MusicTheoryDataset:
    """The built-in default dataset."""
    return TheoryLoader().get_dataset()


@pytest.fixture
def engine(dataset: MusicTheoryDataset) -> ChordEngine:
    """Engine over the built-in default dataset."""
    return ChordEngine(dataset)
