"""Catalog (list.json) loading and validation."""

import json
import yaml
from pathlib import Path
from typing import Any, List, Tuple, Union
from .schema import GuideCatalog, GuideEntry

class CatalogLoadError(Exception):
    """Exception raised when catalog loading or parsing fails."""
    pass

def _is_valid_item(item: Any) -> bool:
    if not isinstance(item, dict):
        return False
    name, file = item.get("name"), item.get("file")
    return (
        isinstance(name, str) and bool(name)
        and isinstance(file, str) and bool(file)
        and file.lower().endswith(".txt")
    )

def parse_catalog_items(data: Any) -> Tuple[List[GuideEntry], int]:
    """
    Extract guide entries from decoded catalog data.

    Accepts a bare array, or an object holding the array under
    'list' or 'guides'.

    Args:
        data: Decoded JSON/YAML document

    Returns:
        Tuple of (valid entries in order, number of skipped items)

    Raises:
        CatalogLoadError: If the document has none of the accepted shapes
    """
    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("list"), list):
        items = data["list"]
    elif isinstance(data, dict) and isinstance(data.get("guides"), list):
        items = data["guides"]
    else:
        raise CatalogLoadError(
            "catalog must be an array or an object with a 'list'/'guides' field"
        )

    entries = [GuideEntry(name=item["name"], file=item["file"])
               for item in items if _is_valid_item(item)]
    return entries, len(items) - len(entries)

def _build_catalog(data: Any) -> GuideCatalog:
    entries, skipped = parse_catalog_items(data)
    return GuideCatalog(entries=entries, skipped=skipped)

def load_catalog_from_string(content: str, fmt: str = "json") -> GuideCatalog:
    """
    Load a guide catalog from a string.

    Args:
        content: Catalog content
        fmt: "json" or "yaml"

    Returns:
        GuideCatalog: Catalog of valid entries (possibly empty)

    Raises:
        CatalogLoadError: If content cannot be decoded or has the wrong shape
    """
    if fmt == "yaml":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid YAML content: {e}") from e
    else:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Invalid JSON content: {e}") from e

    return _build_catalog(data)

def load_catalog(path: Union[str, Path]) -> GuideCatalog:
    """
    Load a guide catalog from a file; .yaml/.yml files are read as YAML.

    Raises:
        CatalogLoadError: If file cannot be read or catalog is malformed
    """
    path = Path(path)

    if not path.exists():
        raise CatalogLoadError(f"Catalog file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e

    fmt = "yaml" if path.suffix.lower() in (".yaml", ".yml") else "json"
    return load_catalog_from_string(content, fmt=fmt)
