"""
Scale library - discovers and loads scale collections.

Collections can come from:
1. Built-in library (YAML files shipped with the package, one per category)
2. Custom scales (a user-owned text file, one spec per line)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_scales.constants import (
    BUILTIN_CATEGORIES,
    CUSTOM_SCALES_FILE,
    ErrorMessages,
    LibraryCategory,
)
from chuk_mcp_scales.core import Catalogue, ScaleCollection, build_catalogue
from chuk_mcp_scales.models.spec import ScaleSpec, SpecFormatError

logger = logging.getLogger(__name__)


def read_spec_file(path: Path) -> list[ScaleSpec]:
    """
    Read scale specs from a text file, one per line.

    Blank lines are skipped. Malformed lines are logged and skipped.
    A missing file reads as empty.

    Args:
        path: Path to the file

    Returns:
        Parsed specs in file order
    """
    if not path.exists():
        return []

    specs: list[ScaleSpec] = []
    with open(path) as f:
        for number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                specs.append(ScaleSpec.from_line(line))
            except (SpecFormatError, ValidationError) as e:
                logger.warning(f"Skipping {path.name}:{number}: {e}")
    return specs


def write_spec_file(path: Path, specs: list[ScaleSpec]) -> None:
    """Write scale specs to a text file, replacing its contents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for spec in specs:
            f.write(spec.to_line() + "\n")


class ScaleLibrary:
    """
    Loads scale collections by category.

    Built-in categories are read from YAML files in the library directory.
    The custom category is read from, and saved to, a plain text file.
    Collections are cached per category once loaded.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        custom_path: Path | None = None,
        catalogue: Catalogue | None = None,
    ):
        """
        Initialize the library.

        Args:
            library_path: Directory of built-in category YAML files
            custom_path: Text file holding custom scale specs
            catalogue: Note/interval catalogue shared by every collection
        """
        self.library_path = library_path or (Path(__file__).parent / "data")
        self.custom_path = custom_path or (Path.cwd() / CUSTOM_SCALES_FILE)
        self.catalogue = catalogue or build_catalogue()
        self._cache: dict[LibraryCategory, list[ScaleCollection]] = {}

    def categories(self) -> list[LibraryCategory]:
        """All categories, built-in first."""
        return [*BUILTIN_CATEGORIES, LibraryCategory.CUSTOM]

    def list_collections(self, category: LibraryCategory | str) -> list[ScaleCollection]:
        """
        List the collections in a category.

        Args:
            category: Category or its name (e.g. 'modes')

        Returns:
            Collections in the order they are defined

        Raises:
            ValueError: If the category is unknown
        """
        category = self._parse_category(category)

        if category not in self._cache:
            if category == LibraryCategory.CUSTOM:
                specs = read_spec_file(self.custom_path)
            else:
                specs = self._load_category_file(self.library_path / f"{category.value}.yaml")
            self._cache[category] = [ScaleCollection(spec, self.catalogue) for spec in specs]
            logger.debug(f"Loaded {len(specs)} {category.value} collections")

        return self._cache[category]

    def get_collection(self, category: LibraryCategory | str, name: str) -> ScaleCollection | None:
        """
        Get a collection by name within a category.

        Args:
            category: Category or its name
            name: Full name ('major scale') or type alone ('major')

        Returns:
            The first matching collection, or None if not found
        """
        key = name.strip().lower()
        for collection in self.list_collections(category):
            if collection.name == key or collection.type == key:
                return collection
        return None

    def add_custom(self, spec: ScaleSpec) -> ScaleCollection:
        """
        Add a custom collection and save the custom scales file.

        Args:
            spec: The new collection's spec

        Returns:
            The new collection

        Raises:
            ValueError: If a custom collection with the same name exists
        """
        collections = self.list_collections(LibraryCategory.CUSTOM)
        if any(collection.name == spec.name for collection in collections):
            raise ValueError(ErrorMessages.DUPLICATE_COLLECTION.format(name=spec.name))

        collection = ScaleCollection(spec, self.catalogue)
        self._write_custom([*collections, collection])
        collections.append(collection)
        logger.info(f"Added custom collection '{spec.name}'")
        return collection

    def remove_custom(self, name: str) -> ScaleCollection | None:
        """
        Remove a custom collection and save the custom scales file.

        Args:
            name: Full name ('my scale') or type alone

        Returns:
            The removed collection, or None if not found
        """
        collection = self.get_collection(LibraryCategory.CUSTOM, name)
        if collection is None:
            return None

        collections = self.list_collections(LibraryCategory.CUSTOM)
        self._write_custom([c for c in collections if c is not collection])
        collections.remove(collection)
        logger.info(f"Removed custom collection '{collection.name}'")
        return collection

    def save_custom(self) -> Path:
        """Write the custom collections to the custom scales file."""
        self._write_custom(self.list_collections(LibraryCategory.CUSTOM))
        return self.custom_path

    def use_custom_path(self, path: Path) -> None:
        """Switch to another custom scales file, reloading it on next use."""
        self.custom_path = path
        self._cache.pop(LibraryCategory.CUSTOM, None)
        logger.info(f"Custom scales file: {path}")

    def clear_cache(self) -> None:
        """Clear the collection cache."""
        self._cache.clear()

    def _write_custom(self, collections: list[ScaleCollection]) -> None:
        # Callers update the cache only after this succeeds
        write_spec_file(self.custom_path, [collection.spec for collection in collections])

    def _parse_category(self, category: LibraryCategory | str) -> LibraryCategory:
        if isinstance(category, str):
            category = category.strip().lower()
        try:
            return LibraryCategory(category)
        except ValueError:
            raise ValueError(
                ErrorMessages.UNKNOWN_CATEGORY.format(
                    category=category,
                    categories=", ".join(c.value for c in LibraryCategory),
                )
            ) from None

    def _load_category_file(self, path: Path) -> list[ScaleSpec]:
        """Load the specs of a built-in category from a YAML file."""
        if not path.exists():
            logger.warning(f"Library file not found: {path}")
            return []

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Could not read {path.name}: {e}")
            return []

        if not isinstance(data, dict):
            logger.warning(f"Skipping {path.name}: expected a mapping at the top level")
            return []

        return self._parse_specs(data.get("collections", []), path)

    def _parse_specs(self, entries: list[dict[str, Any]], path: Path) -> list[ScaleSpec]:
        """Parse collection entries, skipping any that fail validation."""
        specs: list[ScaleSpec] = []
        for entry in entries:
            try:
                specs.append(ScaleSpec.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping invalid collection in {path.name}: {e}")
        return specs

