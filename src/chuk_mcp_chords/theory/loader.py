"""
Theory loader - discovers and loads music-theory datasets.

Datasets can come from:
1. Built-in library (shipped with package)
2. Project datasets (user's project/theory directory)

Both YAML and JSON documents are accepted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_chords.constants import DEFAULT_DATASET
from chuk_mcp_chords.core.engine import ChordEngine
from chuk_mcp_chords.core.errors import DatasetLoadError, DatasetNotFoundError
from chuk_mcp_chords.models.dataset import MusicTheoryDataset

logger = logging.getLogger(__name__)

DATASET_SUFFIXES = (".yaml", ".yml", ".json")


class TheoryLoader:
    """
    Discovers and loads theory datasets.

    Datasets are loaded from files in the library and project directories.
    Project datasets override library datasets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the theory loader.

        Args:
            library_path: Path to built-in dataset library
            project_path: Path to project datasets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, MusicTheoryDataset] = {}

    def list_datasets(self) -> list[str]:
        """
        List all available dataset names.

        Returns names from both library and project, sorted.
        """
        names: set[str] = set()
        for directory in self._search_paths():
            for path in directory.iterdir():
                if path.suffix in DATASET_SUFFIXES:
                    names.add(path.stem)
        return sorted(names)

    def get_dataset(self, name: str = DEFAULT_DATASET) -> MusicTheoryDataset:
        """
        Get a dataset by name.

        Project datasets take precedence over library datasets.

        Args:
            name: Dataset name (file stem)

        Returns:
            The validated dataset

        Raises:
            DatasetNotFoundError: No file with that name exists
            DatasetLoadError: The file exists but is invalid
        """
        if name in self._cache:
            return self._cache[name]

        path = self._find(name)
        if path is None:
            raise DatasetNotFoundError(name)

        dataset = self.load_file(path)
        self._cache[name] = dataset
        return dataset

    def create_engine(self, name: str = DEFAULT_DATASET) -> ChordEngine:
        """Load a dataset and build an engine on it."""
        return ChordEngine(self.get_dataset(name))

    def load_file(self, path: Path) -> MusicTheoryDataset:
        """
        Load and validate a dataset from an explicit file.

        Raises:
            DatasetLoadError: The file can't be read, parsed or validated
        """
        try:
            data = self._read_document(path)
            dataset = MusicTheoryDataset.model_validate(data)
        except (OSError, yaml.YAMLError, json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to load theory dataset {path}: {e}")
            raise DatasetLoadError(path, str(e)) from e

        logger.debug(
            f"Loaded theory dataset {path}: {len(dataset.chord_types)} chord types, "
            f"{len(dataset.key_signatures)} keys"
        )
        return dataset

    def clear_cache(self) -> None:
        """Clear the dataset cache."""
        self._cache.clear()

    def _search_paths(self) -> list[Path]:
        """Directories to search, highest precedence first."""
        paths = []
        if self.project_path and self.project_path.exists():
            paths.append(self.project_path)
        if self.library_path.exists():
            paths.append(self.library_path)
        return paths

    def _find(self, name: str) -> Path | None:
        for directory in self._search_paths():
            for suffix in DATASET_SUFFIXES:
                candidate = directory / f"{name}{suffix}"
                if candidate.exists():
                    return candidate
        return None

    def _read_document(self, path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            if path.suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)
