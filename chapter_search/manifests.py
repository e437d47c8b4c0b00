"""Bundled chapter manifests for the book sites."""

import json
import os
from typing import Any, Dict, List

from .core.index import SearchIndex

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


class ManifestNotFoundError(KeyError):
    """Raised when a manifest name has no bundled data file."""


def available_manifests() -> List[str]:
    """Get the names of all bundled manifests."""
    return sorted(
        name[:-len(".json")]
        for name in os.listdir(DATA_DIR)
        if name.endswith(".json")
    )


def load_manifest(name: str) -> List[Dict[str, Any]]:
    """
    Load the raw entries of a bundled manifest.

    Args:
        name: Manifest name, e.g. ``"uikit"``

    Returns:
        List of entry dictionaries in display order

    Raises:
        ManifestNotFoundError: If no manifest with that name is bundled
    """
    if name not in available_manifests():
        raise ManifestNotFoundError(name)

    json_file_path = os.path.join(DATA_DIR, f"{name}.json")
    with open(json_file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def build_index(name: str) -> SearchIndex:
    """Build a SearchIndex from a bundled manifest."""
    return SearchIndex.from_manifest(load_manifest(name))
