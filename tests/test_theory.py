"""
Tests for theory datasets.

Tests cover:
- MusicTheoryDataset / ChordTypeDef load-time validation
- TheoryLoader discovery, precedence, formats and caching
"""

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_mcp_chords.core import ChordEngine, DatasetLoadError, DatasetNotFoundError
from chuk_mcp_chords.models import ChordTypeDef, MusicTheoryDataset
from chuk_mcp_chords.theory import TheoryLoader


class TestChordTypeDef:
    """Tests for ChordTypeDef model."""

    def test_tokens(self):
        """Formula tokens are split and trimmed."""
        definition = ChordTypeDef(formula="1, b3 ,5")
        assert definition.tokens == ["1", "b3", "5"]
        assert definition.extensions == {}

    def test_null_extensions(self):
        """Null extensions become an empty mapping."""
        definition = ChordTypeDef.model_validate({"formula": "1,3,5", "extensions": None})
        assert definition.extensions == {}

    def test_empty_formula_rejected(self):
        """A chord needs at least one tone."""
        with pytest.raises(ValidationError):
            ChordTypeDef(formula="  ")


class TestMusicTheoryDataset:
    """Tests for MusicTheoryDataset validation."""

    def test_valid_document(self, minimal_document):
        """camelCase documents validate to snake_case attributes."""
        dataset = MusicTheoryDataset.model_validate(minimal_document)
        assert dataset.key_signatures["G"] == 7
        assert dataset.major_scale == [0, 2, 4, 5, 7, 9, 11]
        assert list(dataset.functional_groups) == ["tonic"]

    def test_snake_case_names_accepted(self, minimal_document):
        """Attributes can be populated by name too."""
        dataset = MusicTheoryDataset(
            chord_types=minimal_document["chordTypes"],
            scale_formula=minimal_document["scaleFormula"],
            key_signatures=minimal_document["keySignatures"],
            note_names=minimal_document["noteNames"],
        )
        assert dataset.functional_groups == {}

    def test_to_document_uses_aliases(self, minimal_document):
        """Serializing gives back the document keys."""
        document = MusicTheoryDataset.model_validate(minimal_document).to_document()
        assert set(document) == {
            "chordTypes",
            "scaleFormula",
            "keySignatures",
            "noteNames",
            "functionalGroups",
        }

    def test_note_names_must_cover_octave(self, minimal_document):
        """Exactly twelve note names."""
        minimal_document["noteNames"] = minimal_document["noteNames"][:11]
        with pytest.raises(ValidationError, match="noteNames"):
            MusicTheoryDataset.model_validate(minimal_document)

    def test_scale_needs_seven_degrees(self, minimal_document):
        """Scales are heptatonic."""
        minimal_document["scaleFormula"]["major"] = [0, 2, 4, 5, 7, 9]
        with pytest.raises(ValidationError):
            MusicTheoryDataset.model_validate(minimal_document)

    def test_scale_starts_at_tonic(self, minimal_document):
        """First scale offset is 0."""
        minimal_document["scaleFormula"]["major"] = [1, 2, 4, 5, 7, 9, 11]
        with pytest.raises(ValidationError):
            MusicTheoryDataset.model_validate(minimal_document)

    def test_major_scale_required(self, minimal_document):
        """Degree placement needs the major scale."""
        minimal_document["scaleFormula"] = {"minor": [0, 2, 3, 5, 7, 8, 10]}
        with pytest.raises(ValidationError, match="major"):
            MusicTheoryDataset.model_validate(minimal_document)

    def test_key_semitone_range(self, minimal_document):
        """Key semitones are 0-11."""
        minimal_document["keySignatures"]["X"] = 12
        with pytest.raises(ValidationError):
            MusicTheoryDataset.model_validate(minimal_document)

    def test_frozen(self, minimal_document):
        """The dataset can't be reassigned."""
        dataset = MusicTheoryDataset.model_validate(minimal_document)
        with pytest.raises(ValidationError):
            dataset.note_names = []


class TestTheoryLoader:
    """Tests for TheoryLoader."""

    def test_default_library(self):
        """The built-in dataset loads and covers the usual keys."""
        loader = TheoryLoader()
        assert "default" in loader.list_datasets()
        dataset = loader.get_dataset()
        assert len(dataset.note_names) == 12
        assert dataset.note_names[4] == "E"
        assert dataset.key_signatures["C"] == 0
        assert dataset.chord_types["M"].formula == "1,3,5"
        assert {"dim", "dim7", "hdim", "aug"} <= set(dataset.chord_types)

    def test_cache(self):
        """Datasets are cached per name until cleared."""
        loader = TheoryLoader()
        first = loader.get_dataset()
        assert loader.get_dataset() is first
        loader.clear_cache()
        assert loader.get_dataset() is not first

    def test_create_engine(self):
        """Loader builds an engine on a dataset."""
        engine = TheoryLoader().create_engine()
        assert isinstance(engine, ChordEngine)
        assert engine.generate_chord("C", "1").symbol == "C"

    def test_project_overrides_library(self, temp_dir: Path, minimal_document):
        """A project dataset with the same name wins."""
        (temp_dir / "default.yaml").write_text(yaml.safe_dump(minimal_document))
        loader = TheoryLoader(project_path=temp_dir)
        dataset = loader.get_dataset("default")
        assert list(dataset.key_signatures) == ["C", "G"]

    def test_json_dataset(self, temp_dir: Path, minimal_document):
        """JSON documents load like YAML ones."""
        (temp_dir / "site.json").write_text(json.dumps(minimal_document))
        loader = TheoryLoader(project_path=temp_dir)
        assert "site" in loader.list_datasets()
        assert loader.get_dataset("site").chord_types["m"].extensions == {"7": "b7"}

    def test_load_file(self, temp_dir: Path, minimal_document):
        """Explicit files load without discovery."""
        path = temp_dir / "anywhere.yml"
        path.write_text(yaml.safe_dump(minimal_document))
        assert TheoryLoader().load_file(path).key_signatures["G"] == 7

    def test_not_found(self, temp_dir: Path):
        """Unknown names raise."""
        loader = TheoryLoader(project_path=temp_dir)
        with pytest.raises(DatasetNotFoundError):
            loader.get_dataset("missing")

    def test_invalid_document(self, temp_dir: Path, minimal_document):
        """Validation failures surface as DatasetLoadError."""
        minimal_document["noteNames"] = ["C"]
        (temp_dir / "broken.yaml").write_text(yaml.safe_dump(minimal_document))
        loader = TheoryLoader(project_path=temp_dir)
        with pytest.raises(DatasetLoadError) as exc_info:
            loader.get_dataset("broken")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_unparseable_json(self, temp_dir: Path):
        """Syntax errors surface as DatasetLoadError."""
        (temp_dir / "bad.json").write_text("{not json")
        loader = TheoryLoader(project_path=temp_dir)
        with pytest.raises(DatasetLoadError):
            loader.get_dataset("bad")
